"""Tests for rayas.utils text helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rayas.utils import escape_text, get_logger, is_safe_identifier, unescape_text


class TestEscapeText:
    """escape_text converts exactly &, <, > and double quotes."""

    def test_empty(self) -> None:
        assert escape_text("") == ""

    def test_special_characters(self) -> None:
        assert escape_text('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_single_quote_untouched(self) -> None:
        assert escape_text("it's") == "it's"

    def test_non_ascii_untouched(self) -> None:
        assert escape_text("naïve 日本") == "naïve 日本"

    def test_already_escaped_is_escaped_again(self) -> None:
        assert escape_text("&amp;") == "&amp;amp;"

    @pytest.mark.parametrize(
        ("char", "expected"),
        [("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"), ("'", "'"), ("x", "x")],
    )
    def test_single_character(self, char: str, expected: str) -> None:
        assert escape_text(char) == expected

    @given(st.text())
    def test_escaping_is_per_character(self, text: str) -> None:
        assert "".join(escape_text(c) for c in text) == escape_text(text)

    @given(st.text())
    def test_unescape_inverts_escape(self, text: str) -> None:
        assert unescape_text(escape_text(text)) == text


class TestIsSafeIdentifier:
    """Language identifiers embedded unescaped in the output."""

    @pytest.mark.parametrize("value", ["python", "c++", "c#", "objective-c", "x_1", "ts.tsx"])
    def test_safe(self, value: str) -> None:
        assert is_safe_identifier(value)

    @pytest.mark.parametrize("value", ["", "a b", "x><script", 'a"b', "a'b", "a\n"])
    def test_unsafe(self, value: str) -> None:
        assert not is_safe_identifier(value)


class TestGetLogger:
    """Loggers live under the rayas namespace."""

    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "rayas.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        assert get_logger("rayas.registry").name == "rayas.registry"
        assert get_logger("rayas").name == "rayas"
