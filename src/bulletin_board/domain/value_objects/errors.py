"""Failure kinds shared by the repository and both protocol adapters.

The repository raises these; adapters translate them into an HTTP error
body or a GraphQL error entry. Each error carries the message/detail pair
rendered verbatim by both front ends.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of post operation failure."""

    INVALID_ARGUMENT = "InvalidArgument"
    NOT_FOUND = "NotFound"
    INTERNAL = "Internal"


ERROR_KIND_TO_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class PostError(Exception):
    """Raised when a post operation fails."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    @property
    def code(self) -> int:
        """HTTP status code for this failure."""
        return ERROR_KIND_TO_STATUS[self.kind]

    def to_dict(self) -> dict[str, Any]:
        """Render as the REST error body."""
        return {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }

    def __str__(self) -> str:
        return f"code: {self.code}, message: {self.message}, detail: {self.detail}"


class InvalidArgumentError(PostError):
    """Malformed or missing input."""

    kind = ErrorKind.INVALID_ARGUMENT


class NotFoundError(PostError):
    """Referenced post does not exist."""

    kind = ErrorKind.NOT_FOUND


class InternalError(PostError):
    """Unexpected repository fault."""

    kind = ErrorKind.INTERNAL


def invalid_id() -> InvalidArgumentError:
    return InvalidArgumentError(
        "Invalid ID", "The 'id' parameter must be a positive integer."
    )


def invalid_parameter(name: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Invalid {name} parameter",
        f"The '{name}' parameter must be a positive integer.",
    )


def missing_field(name: str) -> InvalidArgumentError:
    return InvalidArgumentError("Invalid request parameters", f"{name} is required")


def post_not_found(post_id: object) -> NotFoundError:
    return NotFoundError(
        "Resource not found", f"The post with ID {post_id} was not found."
    )


def unexpected_error() -> InternalError:
    return InternalError("Internal server error", "An unexpected error occurred.")
