"""Post identifiers and the policies used to assign them.

References:
    - DESIGN.md (Identifier policy)
"""

from __future__ import annotations

from enum import Enum
from typing import NewType

# Positive integer identifying a stored post
PostId = NewType("PostId", int)


class IdPolicy(str, Enum):
    """How the repository assigns ids to new posts."""

    # Strictly increasing counter, never reused after deletions
    SEQUENCE = "sequence"
    # Legacy count-based assignment: len(collection) + 1
    LENGTH = "length"


def create_post_id(value: int) -> PostId:
    """Create a post identifier from a positive integer."""
    if value < 1:
        raise ValueError(f"PostId must be positive, got {value}")
    return PostId(value)


def is_positive_int(value: object) -> bool:
    """Check that a value is an int >= 1 (post ids, page numbers, page sizes)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1
