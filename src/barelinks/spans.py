"""Match results produced by the autolink detectors.

A detector either returns None (no autolink here, treat the candidate as
ordinary text) or an AutolinkMatch describing the recognized span:

    text:     "mail a.b@example.com now"
    window:           ^ index 0 (the @)
    rewind:   3       ("a.b", reclaimed from already scanned text)
    length:   12      ("@example.com")

The full recognized range is ``[-rewind, length)`` relative to the
candidate position.

Thread Safety:
AutolinkMatch is frozen (immutable) and safe to share across threads.
LinkKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LinkKind(Enum):
    """Kind of autolink a detector recognized."""

    URL = auto()  # scheme://host/path
    WWW = auto()  # www.host/path
    EMAIL = auto()  # local@host.tld
    SUBREDDIT = auto()  # /r/name
    USERNAME = auto()  # ~name or ~name~
    STRIKETHROUGH = auto()  # ~~name~~, rendered as deleted text


@dataclass(frozen=True, slots=True)
class AutolinkMatch:
    """A recognized autolink span.

    Attributes:
        kind: What was recognized
        length: Characters matched forward from the candidate position
        rewind: Characters before the candidate position that belong to
            the match
        text: Exact text written to the sink (for STRIKETHROUGH, only the
            inner name)

    """

    kind: LinkKind
    length: int
    rewind: int
    text: str

    @property
    def span_length(self) -> int:
        """Total characters covered, lookbehind included."""
        return self.rewind + self.length

    @property
    def render_as_deletion(self) -> bool:
        """Whether the caller should render a deletion, not a link."""
        return self.kind is LinkKind.STRIKETHROUGH

    @property
    def href(self) -> str:
        """Link target for the recognized text.

        ``www.`` hosts get an ``http://`` scheme and email addresses a
        ``mailto:`` one; everything else links to its own text.
        """
        if self.kind is LinkKind.WWW:
            return f"http://{self.text}"
        if self.kind is LinkKind.EMAIL:
            return f"mailto:{self.text}"
        return self.text
