"""Exception classes for barelinks.

Detectors never raise: a failed match is reported as ``None``. These
exceptions cover misuse at the edges, such as building a scan window
that points outside its text.
"""

from __future__ import annotations


class BarelinksError(Exception):
    """Base exception for all barelinks errors.
    
    Subclass this for specific error categories.
    """

    pass


class WindowError(BarelinksError, ValueError):
    """Invalid scan window bounds.
    
    Raised when a window is built with a negative lookbehind or lookahead,
    with bounds that leave the underlying text, or when a slice is
    requested outside ``[-offset, size]``.
    """

    def __init__(
        self,
        message: str,
        pos: int | None = None,
        offset: int | None = None,
        size: int | None = None,
    ) -> None:
        """Initialize window error with the offending bounds.
        
        Args:
            message: Error description
            pos: Absolute position of the window (optional)
            offset: Lookbehind length (optional)
            size: Lookahead length (optional)
        """
        self.message = message
        self.pos = pos
        self.offset = offset
        self.size = size

        bounds = []
        if pos is not None:
            bounds.append(f"pos={pos}")
        if offset is not None:
            bounds.append(f"offset={offset}")
        if size is not None:
            bounds.append(f"size={size}")
        location = f" ({', '.join(bounds)})" if bounds else ""

        super().__init__(f"{message}{location}")
