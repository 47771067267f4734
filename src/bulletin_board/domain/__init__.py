"""Bulletin board domain layer."""

from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.services.post_repository import PostRepository
from bulletin_board.domain.value_objects.errors import (
    ErrorKind,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    PostError,
)
from bulletin_board.domain.value_objects.identifiers import IdPolicy, PostId

__all__ = [
    # Value objects
    "PostId",
    "IdPolicy",
    "ErrorKind",
    "PostError",
    "InvalidArgumentError",
    "NotFoundError",
    "InternalError",
    # Entities
    "Post",
    # Services
    "PostRepository",
]
