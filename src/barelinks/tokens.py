"""Typed tokens produced by the autolink scanner.

Uses NamedTuples, like patitas' inline tokens:
- Immutability by default
- Tuple unpacking support
- Faster attribute access (tuple index vs hash lookup)

Usage:
    for token in iter_autolinks(text):
        match token:
            case AutolinkToken(match=m, start=start):
                print(f"{m.kind.name} at {start}: {m.href}")
            case TextToken(content=content):
                print(content)

Thread Safety:
All tokens are immutable and safe to share across threads.

"""

from __future__ import annotations

from typing import Literal, NamedTuple, TypeAlias

from barelinks.spans import AutolinkMatch


class TextToken(NamedTuple):
    """Plain text between autolinks.

    Attributes:
        content: The text content.
        start: Absolute offset of the first character.

    """

    content: str
    start: int

    @property
    def type(self) -> Literal["text"]:
        """Token type identifier for dispatch."""
        return "text"

    @property
    def end(self) -> int:
        """Absolute offset one past the last character."""
        return self.start + len(self.content)


class AutolinkToken(NamedTuple):
    """A recognized autolink.

    Attributes:
        match: The detector result.
        start: Absolute offset of the first character, rewind included.
        end: Absolute offset one past the last character.

    """

    match: AutolinkMatch
    start: int
    end: int

    @property
    def type(self) -> Literal["autolink"]:
        """Token type identifier for dispatch."""
        return "autolink"


ScanToken: TypeAlias = TextToken | AutolinkToken
