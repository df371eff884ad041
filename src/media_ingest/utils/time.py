"""
Time-related utilities for the package.

All timestamps are generated in UTC.
"""

from datetime import datetime, timezone


def utc_now_millis() -> int:
    """Return milliseconds since the Unix epoch.

    Used as the sortable prefix of generated object keys, e.g.
    ``posts/1705315351123-9f2c4e1ab37d0c55a1b2c3d4e5f60718.jpg``.
    """
    return int(datetime.now(timezone.utc).timestamp() * 1000)
