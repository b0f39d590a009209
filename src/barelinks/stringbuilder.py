"""LinkBuffer: append-only sink for recognized link text.

Adopts patitas' StringBuilder pattern: appends to a list, joins once at
the end. Detectors write the exact text of a match into it and leave it
untouched when they do not match, so a caller can share one buffer across
many detector calls and read the result with build().

Thread Safety:
LinkBuffer instances are owned by the caller of a detector.
No shared mutable state.

"""

from __future__ import annotations


class LinkBuffer:
    """Append-only text accumulator.

    Usage:
            >>> buf = LinkBuffer()
            >>> _ = detect_url(ScanWindow.over("http://example.com", 4), buf)
            >>> buf.build()
            'http://example.com'

    Thread Safety:
        Instance is local to the caller.
        No shared mutable state.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty LinkBuffer."""
        self._parts: list[str] = []

    def append(self, s: str) -> LinkBuffer:
        """Append a string to the buffer.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return total number of characters appended."""
        return sum(len(part) for part in self._parts)

    def __bool__(self) -> bool:
        """Return True if any text has been appended."""
        return bool(self._parts)
