"""Scheme allow-list for generic URL autolinks.

Only links whose scheme is on a fixed list are turned into anchors, so
``javascript:`` and friends stay plain text. The list is a module-level
tuple: immutable, ordered, shared by every thread without locking.
"""

from __future__ import annotations

from typing import Final

from barelinks.charsets import SCHEME_FOLLOWERS

SAFE_SCHEMES: Final[tuple[str, ...]] = (
    "http://",
    "https://",
    "ftp://",
    "mailto://",
    "/",
    "git://",
    "steam://",
    "irc://",
    "news://",
    "mumble://",
    "ssh://",
    "ircs://",
    "#",
)


def is_safe(link: str) -> bool:
    """Check whether ``link`` starts with an allow-listed scheme.

    The prefix is compared case-insensitively and must be followed by an
    alphanumeric character, ``#``, ``/`` or ``?``. A bare prefix with
    nothing after it is not safe.

    Examples:
        >>> is_safe("HTTP://a")
        True
        >>> is_safe("httpx://example.com")
        False
        >>> is_safe("http://")
        False

    """
    for scheme in SAFE_SCHEMES:
        n = len(scheme)
        if (
            len(link) > n
            and link[:n].lower() == scheme
            and link[n] in SCHEME_FOLLOWERS
        ):
            return True
    return False
