"""Minimal host-name validation for www. and scheme:// autolinks."""

from __future__ import annotations

from barelinks.charsets import ALNUM, DOMAIN_CHARS
from barelinks.window import ScanWindow


def domain_length(window: ScanWindow, length: int | None = None) -> int:
    """Length of the domain at the start of ``window``, or 0.

    A domain starts with an alphanumeric character and continues over
    letters, digits, hyphens and dots. At least one dot is required;
    that's as far as validation goes. The last character of the range is
    never examined, so callers extend the match past it themselves.

    Args:
        window: Window positioned at the first character of the host
        length: Number of characters to consider (defaults to, and is
            clamped to, ``window.size``)

    Returns:
        Number of characters consumed, or 0 if this is not a domain

    Examples:
        >>> domain_length(ScanWindow.over("example.com/path"))
        11
        >>> domain_length(ScanWindow.over("nodotshere"))
        0

    """
    if length is None or length > window.size:
        length = window.size
    if length < 2 or window.at(0) not in ALNUM:
        return 0

    dots = 0
    i = 1
    while i < length - 1:
        char = window.at(i)
        if char == ".":
            dots += 1
        elif char not in DOMAIN_CHARS:
            break
        i += 1

    return i if dots else 0
