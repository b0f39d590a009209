"""Inline scanner that drives the autolink detectors over plain text.

Walks the text once, left to right. At every trigger character of an
enabled detector it builds a ScanWindow and asks that detector whether an
autolink is there:

    "Mail a.b@example.com or see www.example.com."
              ^ "@" -> detect_email, rewind 3 ("a.b")
                                 ^ "w" -> detect_www

On a match, the pending plain text gives back its last ``rewind``
characters to the link, the link is emitted, and scanning resumes right
after it. Lookbehind never crosses the end of the previous link, so two
links can never overlap.

Thread Safety:
Scanning keeps all state in local variables. The active ScanConfig is
read from a ContextVar, so concurrent scans with different configs do
not interfere.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from barelinks.config import ScanConfig, get_scan_config
from barelinks.detectors import DETECTORS, Detector
from barelinks.spans import AutolinkMatch
from barelinks.tokens import AutolinkToken, ScanToken, TextToken
from barelinks.utils.logger import get_logger
from barelinks.window import ScanWindow

logger = get_logger(__name__)

# Trigger character -> ScanConfig flag that enables its detector
TRIGGER_FLAGS: Final[dict[str, str]] = {
    ":": "url_enabled",
    "@": "email_enabled",
    "w": "www_enabled",
    "/": "subreddit_enabled",
    "~": "username_enabled",
}


def _active_detectors(config: ScanConfig) -> dict[str, Detector]:
    return {
        char: DETECTORS[char]
        for char, flag in TRIGGER_FLAGS.items()
        if getattr(config, flag)
    }


def iter_autolinks(text: str, config: ScanConfig | None = None) -> Iterator[ScanToken]:
    """Split ``text`` into plain-text and autolink tokens.

    Args:
        text: Plain inline text (no markup is interpreted)
        config: Detector switches (defaults to the active ScanConfig)

    Yields:
        TextToken and AutolinkToken in document order. Concatenating the
        source ranges of all tokens reproduces ``text`` exactly.
    """
    if config is None:
        config = get_scan_config()
    detectors = _active_detectors(config)

    pos = 0
    consumed = 0  # end of the last link; lookbehind stops here
    text_len = len(text)

    while pos < text_len:
        detector = detectors.get(text[pos])
        if detector is None:
            pos += 1
            continue

        match = detector(ScanWindow.over(text, pos, consumed))
        if match is None:
            pos += 1
            continue

        start = pos - match.rewind
        end = pos + match.length
        if start > consumed:
            yield TextToken(text[consumed:start], consumed)

        logger.debug("Autolink %s at %d-%d: %r", match.kind.name, start, end, match.text)
        yield AutolinkToken(match, start, end)
        pos = consumed = end

    if consumed < text_len:
        yield TextToken(text[consumed:], consumed)


def scan_autolinks(text: str, config: ScanConfig | None = None) -> list[ScanToken]:
    """Tokenize ``text`` into a list. See iter_autolinks()."""
    return list(iter_autolinks(text, config))


def find_autolinks(text: str, config: ScanConfig | None = None) -> list[AutolinkMatch]:
    """Return only the autolinks recognized in ``text``.

    Example:
        >>> [m.href for m in find_autolinks("mail bob@example.com or www.python.org")]
        ['mailto:bob@example.com', 'http://www.python.org']

    """
    return [
        token.match
        for token in iter_autolinks(text, config)
        if isinstance(token, AutolinkToken)
    ]
