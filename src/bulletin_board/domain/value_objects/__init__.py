"""Value objects for the bulletin board domain."""

from bulletin_board.domain.value_objects.errors import (
    ERROR_KIND_TO_STATUS,
    ErrorKind,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    PostError,
)
from bulletin_board.domain.value_objects.identifiers import (
    IdPolicy,
    PostId,
    create_post_id,
    is_positive_int,
)

__all__ = [
    # Errors
    "ERROR_KIND_TO_STATUS",
    "ErrorKind",
    "PostError",
    "InvalidArgumentError",
    "NotFoundError",
    "InternalError",
    # Identifiers
    "PostId",
    "IdPolicy",
    "create_post_id",
    "is_positive_int",
]
