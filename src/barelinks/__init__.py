"""
barelinks — bare autolink detection for markdown-style renderers

Recognizes links that are not marked up as links: raw URLs, www. hosts,
email addresses, /r/subreddit references and ~username mentions. Zero
runtime dependencies.

Quick Start:
    >>> from barelinks import find_autolinks
    >>> [m.text for m in find_autolinks("see www.example.com/page. next")]
    ['www.example.com/page']

    >>> # Or drive a single detector from your own inline scanner
    >>> from barelinks import LinkBuffer, ScanWindow, detect_url
    >>> buf = LinkBuffer()
    >>> text = "(visit http://example.com/x(y))"
    >>> match = detect_url(ScanWindow.over(text, text.index(":")), buf)
    >>> match.rewind, buf.build()
    (4, 'http://example.com/x(y)')

Installation:
    pip install barelinks
"""

from barelinks.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from barelinks.delimiters import trim_delimiters
from barelinks.detectors import (
    DETECTORS,
    detect_email,
    detect_subreddit,
    detect_url,
    detect_username,
    detect_www,
)
from barelinks.domain import domain_length
from barelinks.errors import BarelinksError, WindowError
from barelinks.safety import SAFE_SCHEMES, is_safe
from barelinks.scanner import find_autolinks, iter_autolinks, scan_autolinks
from barelinks.spans import AutolinkMatch, LinkKind
from barelinks.stringbuilder import LinkBuffer
from barelinks.tokens import AutolinkToken, TextToken
from barelinks.window import ScanWindow

__version__ = "0.1.0"

__all__ = [
    # Detectors
    "DETECTORS",
    "detect_email",
    "detect_subreddit",
    "detect_url",
    "detect_username",
    "detect_www",
    # Building blocks
    "SAFE_SCHEMES",
    "domain_length",
    "is_safe",
    "trim_delimiters",
    # Data model
    "AutolinkMatch",
    "LinkBuffer",
    "LinkKind",
    "ScanWindow",
    # Scanner
    "AutolinkToken",
    "TextToken",
    "find_autolinks",
    "iter_autolinks",
    "scan_autolinks",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "BarelinksError",
    "WindowError",
    "__version__",
]
