"""In-memory post repository.

Owns the insertion-ordered post collection and implements list, get,
create, update and delete. Every operation runs under a single mutex so
readers never observe a half-applied mutation and concurrent creates never
derive the same id.

Validation is asymmetric on purpose: create rejects empty title/content,
update accepts them.

References:
    - DESIGN.md (Post Repository)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, Optional

from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.value_objects.errors import (
    invalid_id,
    invalid_parameter,
    missing_field,
    post_not_found,
)
from bulletin_board.domain.value_objects.identifiers import (
    IdPolicy,
    PostId,
    create_post_id,
    is_positive_int,
)


@dataclass
class RepositoryStats:
    """Statistics for repository monitoring."""

    total_posts: int
    next_id: int
    id_policy: IdPolicy


class PostRepository:
    """Sole authority over the post collection."""

    def __init__(
        self,
        id_policy: IdPolicy = IdPolicy.SEQUENCE,
        posts: Optional[Iterable[Post]] = None,
    ) -> None:
        """Initialize the repository.

        Args:
            id_policy: How ids are assigned to new posts.
            posts: Optional initial posts, kept in the given order.
        """
        self._id_policy = IdPolicy(id_policy)
        self._lock = threading.Lock()
        self._posts: list[Post] = []
        self._next_id = 1

        for post in posts or ():
            if not is_positive_int(post.id):
                raise ValueError(f"Invalid post id: {post.id!r}")
            if any(p.id == post.id for p in self._posts):
                raise ValueError(f"Duplicate post id: {post.id}")
            self._posts.append(post.copy())
            self._next_id = max(self._next_id, post.id + 1)

    @property
    def id_policy(self) -> IdPolicy:
        return self._id_policy

    def list(self, page: int, per_page: int) -> list[Post]:
        """Return one page of posts in insertion order.

        A page starting past the end of the collection is empty, not an
        error; a page running past the end is truncated.
        """
        if not is_positive_int(page):
            raise invalid_parameter("page")
        if not is_positive_int(per_page):
            raise invalid_parameter("per_page")

        start = (page - 1) * per_page
        end = start + per_page

        with self._lock:
            if start >= len(self._posts):
                return []
            end = min(end, len(self._posts))
            return [post.copy() for post in self._posts[start:end]]

    def get(self, post_id: int) -> Post:
        """Get a post by id."""
        if not is_positive_int(post_id):
            raise invalid_id()

        with self._lock:
            index = self._index_of(post_id)
            if index is None:
                raise post_not_found(post_id)
            return self._posts[index].copy()

    def create(self, title: str, content: str) -> Post:
        """Create a post at the end of the collection."""
        if not title:
            raise missing_field("title")
        if not content:
            raise missing_field("content")

        with self._lock:
            post = Post(id=self._assign_id(), title=title, content=content)
            self._posts.append(post)
            return post.copy()

    def update(self, post_id: int, title: str, content: str) -> Post:
        """Replace title and content in place; id and position are kept."""
        if not is_positive_int(post_id):
            raise invalid_id()

        with self._lock:
            index = self._index_of(post_id)
            if index is None:
                raise post_not_found(post_id)
            post = self._posts[index]
            post.title = title
            post.content = content
            return post.copy()

    def delete(self, post_id: int) -> bool:
        """Remove a post, keeping the order of the remaining ones."""
        if not is_positive_int(post_id):
            raise invalid_id()

        with self._lock:
            index = self._index_of(post_id)
            if index is None:
                raise post_not_found(post_id)
            del self._posts[index]
            return True

    def stats(self) -> RepositoryStats:
        """Get repository statistics."""
        with self._lock:
            return RepositoryStats(
                total_posts=len(self._posts),
                next_id=self._peek_id(),
                id_policy=self._id_policy,
            )

    def clear(self) -> None:
        """Drop every post and restart id assignment at 1."""
        with self._lock:
            self._posts.clear()
            self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def count(self) -> int:
        """Number of stored posts."""
        return len(self)

    def _index_of(self, post_id: int) -> Optional[int]:
        # Caller holds the lock; first match wins.
        for i, post in enumerate(self._posts):
            if post.id == post_id:
                return i
        return None

    def _peek_id(self) -> int:
        if self._id_policy is IdPolicy.LENGTH:
            return len(self._posts) + 1
        return self._next_id

    def _assign_id(self) -> PostId:
        # Caller holds the lock.
        post_id = self._peek_id()
        self._next_id = max(self._next_id, post_id) + 1
        return create_post_id(post_id)
