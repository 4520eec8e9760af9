"""Validation of user-supplied blog URLs."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from blog_summarizer.client.errors import EmptyInput, InvalidUrl

_ALLOWED_SCHEMES = {"http", "https"}
_WHITESPACE = re.compile(r"\s")


def is_valid_url(url: str) -> bool:
    """Return ``True`` if *url* is an absolute ``http``/``https`` URL with a host.

    Whitespace is only fatal in the host; spaces in the path or query are
    percent-encoded when the request is sent.
    """
    try:
        parts = urlsplit(url)
        # Accessing .port raises ValueError for out-of-range or non-numeric ports.
        parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        return False
    return bool(parts.hostname) and not _WHITESPACE.search(parts.netloc)


def validate_url(raw_url: str) -> str:
    """Validate *raw_url* and return it trimmed.

    Checks run in order and stop at the first failure.

    Raises:
        EmptyInput: If the trimmed input is empty.
        InvalidUrl: If the input is not an absolute http(s) URL.
    """
    url = raw_url.strip()
    if not url:
        raise EmptyInput()
    if not is_valid_url(url):
        raise InvalidUrl()
    return url
