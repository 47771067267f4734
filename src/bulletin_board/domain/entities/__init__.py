"""Domain entities."""

from bulletin_board.domain.entities.post import Post

__all__ = [
    "Post",
]
