"""Trailing-delimiter trimming for greedily scanned links.

Detectors extend a link over every non-whitespace character, which
swallows sentence punctuation and closing brackets from the surrounding
prose. trim_delimiters() shrinks the span back to the real link:

    See http://example.com/page.          -> http://example.com/page
    (see http://example.com/a_(b))        -> http://example.com/a_(b)
    (see http://example.com/page)         -> http://example.com/page
    http://example.com/&amp;              -> http://example.com/

A closing bracket is kept only when it balances an opener inside the
link itself:

    foo http://www.pokemon.com/Pikachu_(Electric) bar
        => http://www.pokemon.com/Pikachu_(Electric)

    foo (http://www.pokemon.com/Pikachu_(Electric)) bar
        => http://www.pokemon.com/Pikachu_(Electric)

    foo http://www.pokemon.com/Pikachu_(Electric)) bar
        => http://www.pokemon.com/Pikachu_(Electric))

Thread Safety:
Pure function over an immutable window.

"""

from __future__ import annotations

from barelinks.charsets import ALPHA, BRACKET_PAIRS, TRAILING_PUNCTUATION
from barelinks.window import ScanWindow


def trim_delimiters(window: ScanWindow, link_end: int) -> int:
    """Shrink ``link_end`` to exclude trailing delimiters.

    Args:
        window: Window positioned at the start of the forward span
        link_end: Tentative end of the span (exclusive, relative to index 0)

    Returns:
        Trimmed end, or 0 if nothing of the span survives
    """
    link_end = min(link_end, window.size)

    # An embedded tag starts a new token
    for i in range(link_end):
        if window.at(i) == "<":
            link_end = i
            break

    while link_end > 0:
        last = window.at(link_end - 1)
        if last in TRAILING_PUNCTUATION:
            link_end -= 1
        elif last == ";":
            # Entity tail such as &amp; is not part of the link
            new_end = link_end - 2
            while new_end > 0 and window.at(new_end) in ALPHA:
                new_end -= 1
            if 0 <= new_end < link_end - 2 and window.at(new_end) == "&":
                link_end = new_end
            else:
                link_end -= 1
        else:
            break

    if link_end == 0:
        return 0

    opener = BRACKET_PAIRS.get(window.at(link_end - 1))
    if opener is not None:
        closer = window.at(link_end - 1)
        opening = closing = 0
        for i in range(link_end):
            char = window.at(i)
            if char == opener:
                opening += 1
            elif char == closer:
                closing += 1

        if opening != closing:
            link_end -= 1

    return link_end
