"""Bounds-checked scan window over a text buffer.

A ScanWindow is a view of a text at an absolute position. Index 0 is the
candidate position; negative indices look behind it, positive indices
look ahead. Reads are only valid in ``[-offset, size)``:

    text:    "mail a.b@example.com"
    pos:              ^ (8)
    offset:  8  (characters usable for lookbehind)
    size:    12 (characters from pos to the end)

``at()`` returns None outside that range, so detectors can never read past
the bounds the caller granted them.

Thread Safety:
ScanWindow is frozen (immutable) and safe to share across threads.
The underlying text is a str and never mutated.

"""

from __future__ import annotations

from dataclasses import dataclass

from barelinks.errors import WindowError


@dataclass(frozen=True, slots=True)
class ScanWindow:
    """Read-only view of ``text`` centred on ``pos``.

    Attributes:
        text: The full text being scanned
        pos: Absolute position of relative index 0
        offset: Number of characters before ``pos`` usable for lookbehind
        size: Number of characters from ``pos`` usable for lookahead

    Examples:
            >>> win = ScanWindow.over("see www.example.com", pos=4)
            >>> win.at(0), win.at(-1), win.size
        ('w', ' ', 15)
            >>> win.at(-5) is None
        True

    """

    text: str
    pos: int
    offset: int
    size: int

    def __post_init__(self) -> None:
        if self.offset < 0 or self.size < 0:
            msg = "Window bounds must be non-negative"
            raise WindowError(msg, self.pos, self.offset, self.size)
        if self.pos - self.offset < 0 or self.pos + self.size > len(self.text):
            msg = f"Window exceeds text of length {len(self.text)}"
            raise WindowError(msg, self.pos, self.offset, self.size)

    @classmethod
    def over(cls, text: str, pos: int = 0, consumed: int = 0) -> ScanWindow:
        """Build a window at ``pos`` looking back to ``consumed``.

        Args:
            text: Text to scan
            pos: Candidate position
            consumed: First position lookbehind may reach (the end of the
                last recognized link, or 0)

        Returns:
            Window spanning ``[consumed, len(text))``

        Raises:
            WindowError: If ``consumed > pos`` or ``pos`` is outside ``text``
        """
        return cls(text, pos, pos - consumed, len(text) - pos)

    def at(self, index: int) -> str | None:
        """Character at relative ``index``, or None outside the window."""
        if -self.offset <= index < self.size:
            return self.text[self.pos + index]
        return None

    def slice(self, start: int, end: int) -> str:
        """Characters in relative range ``[start, end)``.

        Raises:
            WindowError: If the range leaves ``[-offset, size]``
        """
        if start < -self.offset or end > self.size or start > end:
            msg = f"Slice [{start}, {end}) outside window"
            raise WindowError(msg, self.pos, self.offset, self.size)
        return self.text[self.pos + start : self.pos + end]

    def startswith(self, prefix: str, ignore_case: bool = False) -> bool:
        """Whether the lookahead begins with ``prefix``."""
        if len(prefix) > self.size:
            return False
        head = self.text[self.pos : self.pos + len(prefix)]
        if ignore_case:
            return head.lower() == prefix.lower()
        return head == prefix

    def advance(self, n: int) -> ScanWindow:
        """The same view with index 0 moved ``n`` characters forward."""
        return ScanWindow(self.text, self.pos + n, self.offset + n, self.size - n)
