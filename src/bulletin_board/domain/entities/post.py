"""Post entity for the bulletin board."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from bulletin_board.domain.value_objects.identifiers import PostId


@dataclass
class Post:
    """A single bulletin-board entry.

    The id is assigned by the repository at creation and never changes;
    title and content are replaced in place by updates.
    """

    id: PostId
    title: str
    content: str

    def copy(self) -> Post:
        """Return a detached copy of this post."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Render as the JSON object served by the REST API."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
        }
