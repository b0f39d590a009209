"""Tests for the scheme allow-list."""

import pytest

from barelinks import SAFE_SCHEMES, is_safe


class TestSafeSchemes:
    """The allow-list itself."""

    def test_fixed_order(self) -> None:
        assert SAFE_SCHEMES == (
            "http://",
            "https://",
            "ftp://",
            "mailto://",
            "/",
            "git://",
            "steam://",
            "irc://",
            "news://",
            "mumble://",
            "ssh://",
            "ircs://",
            "#",
        )

    def test_immutable(self) -> None:
        assert isinstance(SAFE_SCHEMES, tuple)


class TestIsSafe:
    """is_safe() behavior."""

    @pytest.mark.parametrize("scheme", SAFE_SCHEMES)
    @pytest.mark.parametrize("follower", ["a", "Z", "0", "#", "/", "?"])
    def test_every_scheme_with_valid_follower(self, scheme: str, follower: str) -> None:
        assert is_safe(scheme + follower)
        assert is_safe(scheme.upper() + follower)

    @pytest.mark.parametrize("scheme", SAFE_SCHEMES)
    @pytest.mark.parametrize("follower", [" ", ".", "-", "!", "é"])
    def test_invalid_follower(self, scheme: str, follower: str) -> None:
        assert not is_safe(scheme + follower)

    @pytest.mark.parametrize("scheme", SAFE_SCHEMES)
    def test_bare_prefix_is_unsafe(self, scheme: str) -> None:
        assert not is_safe(scheme)

    def test_case_insensitive(self) -> None:
        assert is_safe("HTTP://a")
        assert is_safe("HtTpS://example.com")

    def test_unknown_scheme(self) -> None:
        assert not is_safe("httpx://example.com")
        assert not is_safe("javascript://alert")
        assert not is_safe("data://text")

    def test_empty(self) -> None:
        assert not is_safe("")
