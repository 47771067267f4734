"""Domain services.

The post repository is the sole owner of the post collection and the only
place CRUD and pagination rules are enforced.
"""

from bulletin_board.domain.services.post_repository import PostRepository

__all__ = [
    "PostRepository",
]
