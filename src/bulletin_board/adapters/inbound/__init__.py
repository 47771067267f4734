"""Inbound adapters for the Bulletin Board.

Provides the REST and GraphQL front ends and the server combining them.
"""

from bulletin_board.adapters.inbound.server import create_app, run_server

__all__ = ["create_app", "run_server"]
