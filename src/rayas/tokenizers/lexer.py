"""Pygments-backed tokenizer.

Requires the optional dependency: ``pip install rayas[pygments]``.

Pygments token types form a hierarchy (``Token.Name.Function.Magic``).
Each token type is mapped to a capture name in the tree-sitter naming
scheme by walking up the hierarchy until a mapped type is found; the
capture name is then resolved against the configured role names with
match_capture_name(). Pygments reports character offsets, which are
converted to UTF-8 byte offsets here.

Example:
    >>> from rayas import Languages
    >>> from rayas.tokenizers.lexer import PygmentsTokenizer
    >>> languages = Languages().insert("python", PygmentsTokenizer.for_language("python"))
    >>> languages.render("python", b"pass")
    '<pre class=language-python><code><span class=line><span class=keyword>pass</span></span></code></pre>'

"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Iterable, Iterator, Sequence

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.token import (
    Comment,
    Error,
    Escape,
    Generic,
    Keyword,
    Literal,
    Name,
    Number,
    Operator,
    Other,
    Punctuation,
    String,
    Text,
    Token,
    Whitespace,
)
from pygments.util import ClassNotFound

from rayas.errors import RayasError, TokenizationError, UnknownLanguageError
from rayas.events import HighlightEvent, events_from_regions
from rayas.tokenizers.function import Capture, CaptureResolver

# Encoding used to round-trip undecodable bytes through str one-to-one.
_ERRORS = "surrogateescape"

# Token types are tuples of their dotted parts, e.g. ("Name", "Function").
TokenType: TypeAlias = tuple[str, ...]

# None marks token types rendered as plain text.
TOKEN_CAPTURES: dict[TokenType, str | None] = {
    Token: None,
    Text: None,
    Whitespace: None,
    Other: None,
    Escape: "string.escape",
    Error: "error",
    Keyword: "keyword",
    Keyword.Constant: "constant.builtin",
    Keyword.Namespace: "include",
    Keyword.Type: "type.builtin",
    Name: "variable",
    Name.Attribute: "tag.attribute",
    Name.Builtin: "function.builtin",
    Name.Builtin.Pseudo: "variable.builtin",
    Name.Class: "type",
    Name.Constant: "constant",
    Name.Decorator: "attribute",
    Name.Entity: "character.special",
    Name.Exception: "type",
    Name.Function: "function",
    Name.Function.Magic: "function.builtin",
    Name.Label: "label",
    Name.Namespace: "namespace",
    Name.Property: "property",
    Name.Tag: "tag",
    Name.Variable.Magic: "variable.builtin",
    Literal: "constant",
    String: "string",
    String.Affix: "string.special",
    String.Char: "character",
    String.Escape: "string.escape",
    String.Interpol: "punctuation.special",
    String.Other: "string.special",
    String.Regex: "string.regex",
    String.Symbol: "symbol",
    Number: "number",
    Number.Float: "float",
    Operator: "operator",
    Operator.Word: "keyword.operator",
    Punctuation: "punctuation.delimiter",
    Punctuation.Marker: "punctuation.special",
    Comment: "comment",
    Comment.Preproc: "preproc",
    Comment.PreprocFile: "string.special",
    Generic: None,
    Generic.Deleted: "text.danger",
    Generic.Emph: "text.emphasis",
    Generic.Error: "error",
    Generic.Heading: "text.title",
    Generic.Inserted: "text.note",
    Generic.Output: "text",
    Generic.Prompt: "punctuation.special",
    Generic.Strong: "text.strong",
    Generic.Subheading: "text.title",
    Generic.Traceback: "error",
}


def capture_name_for(token_type: TokenType) -> str | None:
    """Map a Pygments token type to a capture name.

    Examples:
        >>> capture_name_for(Name.Function.Magic)
        'function.builtin'
        >>> capture_name_for(Keyword.Reserved)
        'keyword'
        >>> capture_name_for(Text) is None
        True
    """
    current: TokenType | None = token_type
    while current is not None:
        if current in TOKEN_CAPTURES:
            return TOKEN_CAPTURES[current]
        current = getattr(current, "parent", None)
    return None


class PygmentsTokenizer:
    """Tokenizer that runs a Pygments lexer.

    Thread Safety:
        Pygments lexers keep no per-call state in get_tokens_unprocessed(),
        so one instance may serve concurrent renders.
    """

    __slots__ = ("_lexer", "_resolver")

    def __init__(self, lexer: Lexer) -> None:
        """Initialize tokenizer.

        Args:
            lexer: A Pygments lexer instance
        """
        self._lexer = lexer
        self._resolver = CaptureResolver()

    @classmethod
    def for_language(cls, language: str, **options: object) -> PygmentsTokenizer:
        """Create a tokenizer from a Pygments lexer alias.

        Args:
            language: Pygments lexer alias (e.g., "python", "rust", "js")
            **options: Extra lexer options

        Raises:
            UnknownLanguageError: If Pygments has no lexer for the alias
        """
        options.setdefault("stripnl", False)
        options.setdefault("ensurenl", False)
        try:
            lexer = get_lexer_by_name(language, **options)
        except ClassNotFound as exc:
            raise UnknownLanguageError(language) from exc
        return cls(lexer)

    @property
    def name(self) -> str:
        """Name of the wrapped lexer."""
        return self._lexer.name

    def configure(self, role_names: Sequence[str]) -> None:
        self._resolver = CaptureResolver(role_names)

    def captures(self, source: bytes) -> Iterator[Capture]:
        """Run the lexer and yield byte-offset capture triples."""
        text = source.decode("utf-8", _ERRORS)
        char_pos = 0
        byte_pos = 0

        for index, token_type, value in self._lexer.get_tokens_unprocessed(text):
            if index != char_pos:
                if index > char_pos:
                    byte_pos += len(text[char_pos:index].encode("utf-8", _ERRORS))
                else:
                    byte_pos = len(text[:index].encode("utf-8", _ERRORS))
                char_pos = index

            size = len(value.encode("utf-8", _ERRORS))
            capture_name = capture_name_for(token_type)
            if capture_name is not None and size:
                yield (byte_pos, byte_pos + size, capture_name)

            char_pos += len(value)
            byte_pos += size

    def highlight(self, source: bytes) -> Iterable[HighlightEvent]:
        resolver = self._resolver
        try:
            regions = list(resolver.regions(self.captures(source)))
        except RayasError:
            raise
        except Exception as exc:
            raise TokenizationError(str(exc), language=self.name) from exc
        return events_from_regions(regions, len(source))
