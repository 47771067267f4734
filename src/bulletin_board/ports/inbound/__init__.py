"""Inbound ports - the repository contract both adapters depend on.

The REST and GraphQL adapters never touch the post collection directly;
they only see this capability set.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.services.post_repository import RepositoryStats


@runtime_checkable
class PostRepositoryPort(Protocol):
    """Protocol for post management operations.

    Thread Safety:
        All methods must be atomic with respect to each other.

    Errors:
        Failures are raised as PostError subclasses carrying
        (kind, message, detail). Implementations never log.

    Example:
        post = repository.create("Hello", "First post")
        page = repository.list(page=1, per_page=10)
        repository.update(post.id, "Hello again", "")
        repository.delete(post.id)
    """

    @abstractmethod
    def list(self, page: int, per_page: int) -> list[Post]:
        """Return one page of posts in insertion order.

        Args:
            page: 1-based page number.
            per_page: Page size.

        Returns:
            Posts in [(page-1)*per_page, page*per_page), possibly empty.

        Raises:
            InvalidArgumentError: If page or per_page is missing or < 1.
        """
        ...

    @abstractmethod
    def get(self, post_id: int) -> Post:
        """Get a post by id.

        Raises:
            InvalidArgumentError: If post_id < 1.
            NotFoundError: If no post has that id.
        """
        ...

    @abstractmethod
    def create(self, title: str, content: str) -> Post:
        """Create a post and assign its id.

        Raises:
            InvalidArgumentError: If title or content is empty.
        """
        ...

    @abstractmethod
    def update(self, post_id: int, title: str, content: str) -> Post:
        """Replace title and content of an existing post.

        Empty strings are accepted.

        Raises:
            InvalidArgumentError: If post_id < 1.
            NotFoundError: If no post has that id.
        """
        ...

    @abstractmethod
    def delete(self, post_id: int) -> bool:
        """Delete a post.

        Returns:
            True on success.

        Raises:
            InvalidArgumentError: If post_id < 1.
            NotFoundError: If no post has that id.
        """
        ...

    @abstractmethod
    def stats(self) -> RepositoryStats:
        """Get repository statistics."""
        ...


__all__ = [
    "PostRepositoryPort",
    "RepositoryStats",
]
