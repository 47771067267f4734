"""Ports layer - interfaces between the domain and the adapters."""

from bulletin_board.ports.inbound import PostRepositoryPort, RepositoryStats

__all__ = [
    "PostRepositoryPort",
    "RepositoryStats",
]
