"""Mapping between public URLs and object keys."""

import re
from urllib.parse import urlsplit

from media_ingest.models.errors import InvalidURLError
from media_ingest.utils.constants import OBJECT_KEY_PATTERN

_OBJECT_KEY_RE = re.compile(OBJECT_KEY_PATTERN)


def join_url(base_url: str, key: str) -> str:
    """Append an object key to a public base URL."""
    return f"{base_url.rstrip('/')}/{key}"


def key_from_url(url: str, base_url: str, *, provider: str) -> str:
    """Extract the object key from a URL built with ``join_url(base_url, key)``.

    Only keys in the shape produced by ``build_object_key`` are accepted,
    so a URL can never address an object outside the provider's namespace.

    Raises:
        InvalidURLError: If the URL has a different scheme, host or path
            prefix, carries a query or fragment, or the key is malformed
    """
    parsed = urlsplit(url or "")
    base = urlsplit(base_url)
    prefix = base.path.rstrip("/") + "/"

    if (
        parsed.scheme != base.scheme
        or parsed.netloc.lower() != base.netloc.lower()
        or parsed.query
        or parsed.fragment
        or not parsed.path.startswith(prefix)
    ):
        raise InvalidURLError(
            message=f"URL does not belong to the {provider} storage provider",
            details={"url": url},
        )

    key = parsed.path[len(prefix) :]
    if not _OBJECT_KEY_RE.fullmatch(key):
        raise InvalidURLError(
            message="URL does not address a stored media object",
            details={"url": url},
        )
    return key
