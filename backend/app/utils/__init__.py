"""Utilities for cleaning base64 payloads and provider URLs."""

import re
from urllib.parse import urlsplit, urlunsplit

DATA_URL_PATTERN = re.compile(r"^data:.*;base64,(.*)$", re.DOTALL)
UPDATED_AT_PATTERN = re.compile(r"([?&])updatedAt=\d+(&?)")
UPDATED_AT_PARAM = "updatedAt"


def strip_data_url_prefix(value: str) -> str:
    """
    Remove a leading ``data:<mime>;base64,`` header from a base64 string.

    Args:
        value: The base64 string, with or without a data-URL header

    Returns:
        The bare base64 payload. Strings without the header are returned as-is.
    """
    match = DATA_URL_PATTERN.match(value)
    return match.group(1) if match else value


def strip_updated_at(url: str) -> str:
    """
    Remove the ``updatedAt`` cache-busting parameter from a file URL.

    Absolute URLs are split and rebuilt without any ``updatedAt`` pair, the
    other pairs are kept byte-for-byte. Relative or malformed strings fall
    back to a regex removal.

    Args:
        url: The URL returned by the provider

    Returns:
        The URL without ``updatedAt``, never ending in a dangling ``?`` or ``&``
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return _strip_updated_at_fallback(url)

    if not (parts.scheme and parts.netloc):
        return _strip_updated_at_fallback(url)

    pairs = [
        pair
        for pair in parts.query.split("&")
        if pair and pair.split("=", 1)[0] != UPDATED_AT_PARAM
    ]
    return urlunsplit(parts._replace(query="&".join(pairs)))


def _strip_updated_at_fallback(url: str) -> str:
    def replace(match: re.Match) -> str:
        separator, trailing = match.group(1), match.group(2)
        # "?updatedAt=1&a=2" keeps the "?" for the next pair
        if trailing:
            return separator
        return ""

    cleaned = UPDATED_AT_PATTERN.sub(replace, url, count=1)
    while cleaned != url:
        url = cleaned
        cleaned = UPDATED_AT_PATTERN.sub(replace, url, count=1)
    return cleaned
