"""Bare autolink detectors.

Each detector is called by an inline scanner when it reaches a trigger
character, with a window positioned at that character:

    ":"  detect_url        http://example.com (rewinds over the scheme)
    "@"  detect_email      user@example.com   (rewinds over the local part)
    "w"  detect_www        www.example.com
    "/"  detect_subreddit  /r/python
    "~"  detect_username   ~alice, ~alice~, ~~alice~~

A detector returns None when there is no autolink at the candidate, or an
AutolinkMatch whose ``[-rewind, length)`` range is the recognized text.
When a sink is given, the match text is appended to it on success only;
a failed detection never touches it.

Thread Safety:
All detectors are pure functions over immutable windows. The only shared
data is the read-only scheme allow-list and character sets.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeAlias

from barelinks.charsets import (
    ALNUM,
    ALPHA,
    ASCII_PUNCTUATION,
    EMAIL_DOMAIN_CHARS,
    EMAIL_LOCAL_CHARS,
    SUBREDDIT_CHARS,
    USERNAME_CHARS,
    WHITESPACE,
)
from barelinks.delimiters import trim_delimiters
from barelinks.domain import domain_length
from barelinks.safety import SAFE_SCHEMES, is_safe
from barelinks.spans import AutolinkMatch, LinkKind
from barelinks.stringbuilder import LinkBuffer
from barelinks.window import ScanWindow

Detector: TypeAlias = Callable[[ScanWindow, LinkBuffer | None], AutolinkMatch | None]

# is_safe() never looks further than the longest scheme plus one character
_SCHEME_PROBE: Final[int] = max(len(scheme) for scheme in SAFE_SCHEMES) + 1


def _emit(
    kind: LinkKind,
    window: ScanWindow,
    rewind: int,
    link_end: int,
    sink: LinkBuffer | None,
    text: str | None = None,
) -> AutolinkMatch:
    if text is None:
        text = window.slice(-rewind, link_end)
    if sink is not None:
        sink.append(text)
    return AutolinkMatch(kind=kind, length=link_end, rewind=rewind, text=text)


def _extend_to_whitespace(window: ScanWindow, link_end: int) -> int:
    while link_end < window.size and window.at(link_end) not in WHITESPACE:
        link_end += 1
    return link_end


def detect_www(window: ScanWindow, sink: LinkBuffer | None = None) -> AutolinkMatch | None:
    """Detect a ``www.`` host at the start of the window.

    Only matches at a word boundary: ``fooWWW.bar`` and ``xwww.a.com``
    are left alone.
    """
    prev = window.at(-1)
    if prev is not None and prev not in ASCII_PUNCTUATION and prev not in WHITESPACE:
        return None

    if window.size < 4 or not window.startswith("www."):
        return None

    link_end = domain_length(window)
    if link_end == 0:
        return None

    link_end = _extend_to_whitespace(window, link_end)
    link_end = trim_delimiters(window, link_end)
    if link_end == 0:
        return None

    return _emit(LinkKind.WWW, window, 0, link_end, sink)


def detect_email(window: ScanWindow, sink: LinkBuffer | None = None) -> AutolinkMatch | None:
    """Detect an email address around the ``@`` at the start of the window.

    The local part is recovered by looking behind the ``@``; it must not
    be empty. The domain needs exactly one ``@`` and at least one dot that
    is not the last character of the text.
    """
    rewind = 0
    while rewind < window.offset and window.at(-rewind - 1) in EMAIL_LOCAL_CHARS:
        rewind += 1

    if rewind == 0:
        return None

    at_signs = 0
    dots = 0
    link_end = 0
    while link_end < window.size:
        char = window.at(link_end)
        if char in EMAIL_DOMAIN_CHARS:
            pass
        elif char == "@":
            at_signs += 1
        elif char == "." and link_end < window.size - 1:
            dots += 1
        else:
            break
        link_end += 1

    if link_end < 2 or at_signs != 1 or dots == 0:
        return None

    # The local part holds no delimiters, so trimming the forward part is enough
    link_end = trim_delimiters(window, link_end)
    if link_end == 0:
        return None

    return _emit(LinkKind.EMAIL, window, rewind, link_end, sink)


def detect_url(window: ScanWindow, sink: LinkBuffer | None = None) -> AutolinkMatch | None:
    """Detect a ``scheme://`` URL with the window at the colon.

    The scheme name is recovered by looking behind the colon and must be
    on the SAFE_SCHEMES allow-list.
    """
    if window.size < 4 or window.at(1) != "/" or window.at(2) != "/":
        return None

    rewind = 0
    while rewind < window.offset and window.at(-rewind - 1) in ALPHA:
        rewind += 1

    if not is_safe(window.slice(-rewind, min(window.size, _SCHEME_PROBE - rewind))):
        return None

    link_end = len("://")
    domain_len = domain_length(window.advance(link_end))
    if domain_len == 0:
        return None

    link_end = _extend_to_whitespace(window, link_end + domain_len)
    link_end = trim_delimiters(window, link_end)
    if link_end == 0:
        return None

    return _emit(LinkKind.URL, window, rewind, link_end, sink)


def detect_subreddit(
    window: ScanWindow, sink: LinkBuffer | None = None
) -> AutolinkMatch | None:
    """Detect a ``/r/name`` subreddit reference.

    The prefix is case-insensitive and the name must start with a letter
    or digit. Names have no trailing-punctuation ambiguity, so no trimming
    is done.
    """
    if window.size < 3 or not window.startswith("/r/", ignore_case=True):
        return None

    link_end = len("/r/")
    if window.at(link_end) not in ALNUM:
        return None
    link_end += 1

    while window.at(link_end) in SUBREDDIT_CHARS:
        link_end += 1

    return _emit(LinkKind.SUBREDDIT, window, 0, link_end, sink)


def detect_username(
    window: ScanWindow, sink: LinkBuffer | None = None
) -> AutolinkMatch | None:
    """Detect a ``~name`` mention.

    Three shapes are recognized, told apart by the number of tildes in
    the run:

        ~alice      1 tilde   mention, text "~alice"
        ~alice~     2 tildes  mention, text "~alice~"
        ~~alice~~   4 tildes  STRIKETHROUGH, text "alice"

    Any other tilde count is rejected rather than guessed at, so
    ``~~~carol~~~`` and ``~a~b~`` are plain text.
    """
    if window.at(0) != "~":
        return None

    tilde_count = 1
    link_end = 1
    while window.at(link_end) in USERNAME_CHARS:
        if window.at(link_end) == "~":
            tilde_count += 1
        link_end += 1

    run = window.slice(0, link_end)

    if tilde_count == 1:
        if link_end == 1:
            return None
        return _emit(LinkKind.USERNAME, window, 0, link_end, sink, run)

    if tilde_count == 2 and run[1] != "~" and run.endswith("~"):
        return _emit(LinkKind.USERNAME, window, 0, link_end, sink, run)

    if tilde_count == 4 and link_end > 4 and run.startswith("~~") and run.endswith("~~"):
        return _emit(LinkKind.STRIKETHROUGH, window, 0, link_end, sink, run[2:-2])

    return None


# Trigger character -> detector
DETECTORS: Final[dict[str, Detector]] = {
    ":": detect_url,
    "@": detect_email,
    "w": detect_www,
    "/": detect_subreddit,
    "~": detect_username,
}
