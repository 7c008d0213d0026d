"""Projection of provider file records into the public file shape."""

from typing import Any, Mapping, Optional

from app.models.schemas import PublicFile, RawFile
from app.utils import strip_updated_at


def _first(*values: Any) -> Optional[str]:
    """First value that is not None, as a string."""
    for value in values:
        if value is not None:
            return str(value)
    return None


def to_public_file(record: Optional[Mapping[str, Any]]) -> PublicFile:
    """
    Map a raw provider record to a PublicFile.

    Precedence: id from ``fileId`` then ``id``; filetype from ``fileType``
    then ``mime``; thumbnail from ``thumbnail`` then ``thumbnailUrl``.
    Non-string values are converted with ``str()``.
    """
    raw = RawFile.model_validate(record or {})
    url = _first(raw.url) or ""
    return PublicFile(
        id=_first(raw.fileId, raw.id) or "",
        name=_first(raw.name) or "",
        filetype=_first(raw.fileType, raw.mime),
        url=strip_updated_at(url) if url else "",
        thumbnail=_first(raw.thumbnail, raw.thumbnailUrl),
    )
