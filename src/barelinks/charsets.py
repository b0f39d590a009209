"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classes follow the C locale ``<ctype.h>`` definitions. Anything outside
ASCII belongs to none of them, so ``"é" in ALNUM`` is False even though
``"é".isalnum()`` is True.

Usage:
    from barelinks.charsets import ALNUM

    if char in ALNUM:  # O(1) lookup
        ...
"""

import string

ALPHA: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

ALNUM: frozenset[str] = ALPHA | DIGITS

# isspace(): space, \t, \n, \v, \f, \r
WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")

# ispunct(): printable, not alphanumeric, not space
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Trailing sentence punctuation dropped from the end of a link
TRAILING_PUNCTUATION: frozenset[str] = frozenset("?!.,")

# Closing character -> matching opener
BRACKET_PAIRS: dict[str, str] = {
    '"': '"',
    "'": "'",
    ")": "(",
    "]": "[",
    "}": "{",
}

# Characters allowed right after an allow-listed scheme prefix
SCHEME_FOLLOWERS: frozenset[str] = ALNUM | frozenset("#/?")

# Domain labels: letters, digits, hyphen (dots are counted separately)
DOMAIN_CHARS: frozenset[str] = ALNUM | frozenset("-")

# Local part of an email address, scanned backward from the @
EMAIL_LOCAL_CHARS: frozenset[str] = ALNUM | frozenset(".+-_")

# Domain part of an email address, scanned forward from the @
EMAIL_DOMAIN_CHARS: frozenset[str] = ALNUM | frozenset("-_")

SUBREDDIT_CHARS: frozenset[str] = ALNUM | frozenset("_+")

USERNAME_CHARS: frozenset[str] = ALNUM | frozenset("_-~")
