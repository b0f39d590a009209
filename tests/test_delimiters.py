"""Tests for trailing-delimiter trimming."""

import pytest

from barelinks import ScanWindow, trim_delimiters


def _trim(text: str) -> str:
    return text[: trim_delimiters(ScanWindow.over(text), len(text))]


class TestTrailingPunctuation:
    """Sentence punctuation after a link."""

    @pytest.mark.parametrize("tail", [".", ",", "!", "?", "?!", "...", ".,!?"])
    def test_punctuation_dropped(self, tail: str) -> None:
        assert _trim("http://x.com/path" + tail) == "http://x.com/path"

    def test_inner_punctuation_kept(self) -> None:
        assert _trim("http://x.com/a.b?c=d") == "http://x.com/a.b?c=d"

    def test_only_punctuation(self) -> None:
        assert trim_delimiters(ScanWindow.over("?!.,"), 4) == 0


class TestEntities:
    """Trailing ;-terminated entities."""

    def test_entity_dropped(self) -> None:
        assert _trim("http://x.com/&amp;") == "http://x.com/"

    def test_entity_then_punctuation(self) -> None:
        assert _trim("http://x.com/a&quot;.") == "http://x.com/a"

    def test_bare_semicolon_dropped(self) -> None:
        assert _trim("http://x.com/a;") == "http://x.com/a"

    def test_ampersand_semicolon_without_letters(self) -> None:
        assert _trim("http://x.com/&;") == "http://x.com/&"

    def test_semicolon_alone(self) -> None:
        assert trim_delimiters(ScanWindow.over(";"), 1) == 0

    def test_two_characters(self) -> None:
        assert _trim("a;") == "a"


class TestEmbeddedTag:
    """A < inside the span starts a new token."""

    def test_truncated_at_tag(self) -> None:
        assert _trim("http://x.com/a<b>c") == "http://x.com/a"

    def test_tag_at_start(self) -> None:
        assert trim_delimiters(ScanWindow.over("<b>"), 3) == 0


class TestBrackets:
    """Closing brackets are kept only when balanced inside the link."""

    def test_unbalanced_paren_after_punctuation(self) -> None:
        assert _trim("http://x.com/path).") == "http://x.com/path"

    def test_balanced_paren_kept(self) -> None:
        assert _trim("http://x.com/(y)") == "http://x.com/(y)"

    def test_nested_balance(self) -> None:
        assert _trim("http://www.pokemon.com/Pikachu_(Electric))") == (
            "http://www.pokemon.com/Pikachu_(Electric)"
        )

    @pytest.mark.parametrize(("opener", "closer"), [("(", ")"), ("[", "]"), ("{", "}")])
    def test_each_bracket_pair(self, opener: str, closer: str) -> None:
        balanced = f"http://x.com/{opener}a{closer}"
        assert _trim(balanced) == balanced
        assert _trim(f"http://x.com/a{closer}") == "http://x.com/a"

    def test_only_one_closer_dropped(self) -> None:
        assert _trim("http://x.com/a))") == "http://x.com/a)"

    @pytest.mark.parametrize("quote", ['"', "'"])
    def test_trailing_quote_dropped(self, quote: str) -> None:
        assert _trim(f"http://x.com/a{quote}") == "http://x.com/a"
        assert _trim(f"http://x.com/{quote}a{quote}") == f"http://x.com/{quote}a"

    def test_lone_closer(self) -> None:
        assert trim_delimiters(ScanWindow.over(")"), 1) == 0


class TestBounds:
    """The trimmer never reads outside the window."""

    def test_link_end_clamped(self) -> None:
        assert trim_delimiters(ScanWindow.over("abc"), 10) == 3

    def test_zero_length(self) -> None:
        assert trim_delimiters(ScanWindow.over("abc"), 0) == 0

    def test_respects_window_start(self) -> None:
        text = "(http://x.com/a)"
        win = ScanWindow.over(text, pos=1, consumed=1)
        assert trim_delimiters(win, win.size) == len("http://x.com/a")
