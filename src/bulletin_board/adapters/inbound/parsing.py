"""Primitive input checks shared by the REST and GraphQL adapters.

Both front ends receive ids and page numbers as text. They are accepted
when they read as a plain integer (optional sign, ASCII digits) and are
positive; anything else becomes an InvalidArgumentError with the same
message/detail text on either protocol.
"""

from __future__ import annotations

import re
from typing import Optional

from bulletin_board.domain.value_objects.errors import (
    InvalidArgumentError,
    invalid_id,
    invalid_parameter,
)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range; longer literals are malformed, not huge ids
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_DIGITS = 19


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse a plain integer literal in the signed 64-bit range, or return None."""
    if raw is None or not _INTEGER.fullmatch(raw):
        return None
    sign = "-" if raw.startswith("-") else ""
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _INT64_DIGITS:
        return None
    value = int(sign + digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def parse_positive(raw: Optional[str], error: InvalidArgumentError) -> int:
    value = parse_int(raw)
    if value is None or value < 1:
        raise error
    return value


def parse_post_id(raw: Optional[str]) -> int:
    """Parse a post id from a path segment or a GraphQL ID."""
    return parse_positive(raw, invalid_id())


def parse_page_params(page: Optional[str], per_page: Optional[str]) -> tuple[int, int]:
    """Parse the page/per_page query pair; page is checked first."""
    return (
        parse_positive(page, invalid_parameter("page")),
        parse_positive(per_page, invalid_parameter("per_page")),
    )
