"""Tests for tokenizer adapters and capture-name resolution."""

from __future__ import annotations

import pytest

from rayas.errors import MalformedEventStreamError, TokenizationError
from rayas.events import HighlightEnd, HighlightStart, Source
from rayas.tokenizers import CaptureResolver, FunctionTokenizer, Tokenizer, match_capture_name
from rayas.vocabulary import DEFAULT_ROLE_NAMES


class TestMatchCaptureName:
    """Capture names resolve to the longest matching role name."""

    def test_exact_match(self) -> None:
        assert match_capture_name("keyword", ["comment", "keyword"]) == 1

    def test_longest_match_wins(self) -> None:
        roles = ["keyword", "keyword.return"]
        assert match_capture_name("keyword.return", roles) == 1

    def test_falls_back_to_prefix(self) -> None:
        roles = ["keyword", "keyword.return"]
        assert match_capture_name("keyword.coroutine", roles) == 0

    def test_parts_match_in_any_order(self) -> None:
        assert match_capture_name("call.function", ["function.call"]) == 0

    def test_all_role_parts_required(self) -> None:
        assert match_capture_name("function", ["function.call"]) is None

    def test_first_role_wins_a_tie(self) -> None:
        assert match_capture_name("string.special", ["special", "string"]) == 0

    def test_no_match(self) -> None:
        assert match_capture_name("comment", ["keyword", "string"]) is None

    def test_default_vocabulary(self) -> None:
        index = match_capture_name("function.method.call", DEFAULT_ROLE_NAMES)
        assert index is not None
        assert DEFAULT_ROLE_NAMES[index] == "function.call"


class TestCaptureResolver:
    """Resolution is cached per capture name."""

    def test_resolve_is_stable(self) -> None:
        resolver = CaptureResolver(["string", "string.escape"])
        assert resolver.resolve("string.escape") == 1
        assert resolver.resolve("string.escape") == 1
        assert resolver.resolve("number") is None

    def test_unmatched_captures_are_dropped(self) -> None:
        resolver = CaptureResolver(["string"])
        regions = list(resolver.regions([(0, 1, "string"), (1, 2, "number")]))
        assert [(r.start, r.end, r.index) for r in regions] == [(0, 1, 0)]


def quoted_strings(source: bytes):
    """Tiny capture function: double-quoted strings and backslash escapes."""
    start = None
    for offset, byte in enumerate(source):
        if byte == ord('"'):
            if start is None:
                start = offset
            else:
                yield (start, offset + 1, "string")
                start = None
        elif byte == ord("\\") and start is not None:
            yield (offset, offset + 2, "string.escape")


class TestFunctionTokenizer:
    """FunctionTokenizer turns capture triples into event streams."""

    def test_implements_protocol(self) -> None:
        tokenizer: Tokenizer = FunctionTokenizer(quoted_strings)
        assert tokenizer is not None

    def test_name_defaults_to_function_name(self) -> None:
        assert FunctionTokenizer(quoted_strings).name == "quoted_strings"
        assert FunctionTokenizer(quoted_strings, name="toy").name == "toy"

    def test_nested_captures(self) -> None:
        tokenizer = FunctionTokenizer(quoted_strings)
        tokenizer.configure(["string", "string.escape"])

        events = list(tokenizer.highlight(b'x "a\\n"'))

        assert events == [
            Source(0, 2),
            HighlightStart(0),
            Source(2, 4),
            HighlightStart(1),
            Source(4, 6),
            HighlightEnd(),
            Source(6, 7),
            HighlightEnd(),
        ]

    def test_unconfigured_tokenizer_highlights_nothing(self) -> None:
        tokenizer = FunctionTokenizer(quoted_strings)
        assert list(tokenizer.highlight(b'"a"')) == [Source(0, 3)]

    def test_reconfigure_replaces_binding(self) -> None:
        tokenizer = FunctionTokenizer(quoted_strings)
        tokenizer.configure(["string"])
        tokenizer.configure(["comment", "string"])

        events = list(tokenizer.highlight(b'"a"'))

        assert events[0] == HighlightStart(1)

    def test_function_error_becomes_tokenization_error(self) -> None:
        def broken(source: bytes):
            raise RuntimeError("grammar not loaded")

        tokenizer = FunctionTokenizer(broken)
        with pytest.raises(TokenizationError, match="grammar not loaded") as info:
            tokenizer.highlight(b"x")
        assert info.value.language == "broken"

    def test_overlapping_captures_surface_on_iteration(self) -> None:
        def overlapping(source: bytes):
            yield (0, 3, "string")
            yield (2, 5, "comment")

        tokenizer = FunctionTokenizer(overlapping)
        tokenizer.configure(["string", "comment"])

        with pytest.raises(MalformedEventStreamError):
            list(tokenizer.highlight(b"abcdef"))


class TestPygmentsTokenizer:
    """PygmentsTokenizer adapts Pygments lexers (optional dependency)."""

    def test_capture_names_walk_token_hierarchy(self) -> None:
        pytest.importorskip("pygments")
        from pygments.token import Keyword, Name, String, Text

        from rayas.tokenizers.lexer import capture_name_for

        assert capture_name_for(Name.Function.Magic) == "function.builtin"
        assert capture_name_for(Name.Function) == "function"
        assert capture_name_for(Keyword.Reserved) == "keyword"
        assert capture_name_for(String.Double) == "string"
        assert capture_name_for(String.Escape) == "string.escape"
        assert capture_name_for(Text) is None

    def test_unmapped_subtype_falls_back_to_parent(self) -> None:
        pytest.importorskip("pygments")
        from pygments.token import Keyword, Token

        from rayas.tokenizers.lexer import capture_name_for

        assert capture_name_for(Keyword.Made.Up) == "keyword"
        assert capture_name_for(Token.Unheard.Of) is None

    def test_unknown_language(self) -> None:
        pytest.importorskip("pygments")
        from rayas.errors import UnknownLanguageError
        from rayas.tokenizers.lexer import PygmentsTokenizer

        with pytest.raises(UnknownLanguageError):
            PygmentsTokenizer.for_language("definitely-not-a-language")

    def test_byte_offsets_cover_multibyte_text(self) -> None:
        pytest.importorskip("pygments")
        from rayas.tokenizers.lexer import PygmentsTokenizer

        tokenizer = PygmentsTokenizer.for_language("python")
        source = 's = "héllo"\n'.encode()

        captures = list(tokenizer.captures(source))

        string_spans = [source[start:end] for start, end, name in captures if name == "string"]
        assert b"h\xc3\xa9llo" in b"".join(string_spans)
        for start, end, _ in captures:
            assert 0 <= start < end <= len(source)

    def test_undecodable_bytes_keep_offsets(self) -> None:
        pytest.importorskip("pygments")
        from rayas.tokenizers.lexer import PygmentsTokenizer

        tokenizer = PygmentsTokenizer.for_language("python")
        source = b"x = 1  # \xff\xfe\nreturn\n"

        captures = list(tokenizer.captures(source))

        assert (source.index(b"return"), source.index(b"return") + 6, "keyword") in captures

    def test_highlight_produces_balanced_events(self) -> None:
        pytest.importorskip("pygments")
        from rayas.tokenizers.lexer import PygmentsTokenizer

        tokenizer = PygmentsTokenizer.for_language("python")
        tokenizer.configure(DEFAULT_ROLE_NAMES)
        source = b"def f(x):\n    return x  # done\n"

        events = list(tokenizer.highlight(source))

        starts = sum(isinstance(e, HighlightStart) for e in events)
        ends = sum(isinstance(e, HighlightEnd) for e in events)
        assert starts == ends > 0
        covered = b"".join(source[e.start : e.end] for e in events if isinstance(e, Source))
        assert covered == source
