"""ContextVar-based scan configuration for barelinks.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The scanner reads the active config unless one is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from barelinks.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(username_enabled=False)):
        tokens = scan_autolinks("ping ~alice at www.example.com")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        url_enabled: Detect scheme://host URLs
        www_enabled: Detect www.host links
        email_enabled: Detect user@host addresses
        subreddit_enabled: Detect /r/name references
        username_enabled: Detect ~name mentions and ~~name~~ deletions

    """

    url_enabled: bool = True
    www_enabled: bool = True
    email_enabled: bool = True
    subreddit_enabled: bool = True
    username_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "email_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.email_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(www_enabled=False)):
        ...     get_scan_config().www_enabled
        False

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
