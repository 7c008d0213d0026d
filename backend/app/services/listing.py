"""Translation of list query-string values into bounded provider options."""

import re
from typing import Optional

from app.models.schemas import ListOptions

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_SKIP = 0
FILE_TYPES = ("all", "image", "non-image", "video")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a string ("12abc" -> 12, "1.9" -> 1); None when there is none."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def clamp_limit(value: Optional[str]) -> int:
    parsed = parse_int(value)
    if parsed is None:
        return DEFAULT_LIMIT
    return min(MAX_LIMIT, max(MIN_LIMIT, parsed))


def clamp_skip(value: Optional[str]) -> int:
    parsed = parse_int(value)
    if parsed is None:
        return DEFAULT_SKIP
    return max(0, parsed)


def build_list_options(
    limit: Optional[str] = None,
    skip: Optional[str] = None,
    folder: Optional[str] = None,
    path: Optional[str] = None,
    file_type: Optional[str] = None,
) -> ListOptions:
    """
    Build list options from raw query values.

    ``folder`` wins over ``path`` when both are non-empty. An unknown
    ``file_type`` is dropped rather than rejected.
    """
    return ListOptions(
        limit=clamp_limit(limit),
        skip=clamp_skip(skip),
        path=folder or path or None,
        file_type=file_type if file_type in FILE_TYPES else None,
    )
