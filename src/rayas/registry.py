"""Language registry for tokenizer lookup and rendering.

The registry maps language identifiers to a configured tokenizer and the
class table built from the same role names, and composes lookup,
tokenization and rendering into one call.

Thread Safety:
Populate the registry during setup, then share it read-only. Concurrent
renders are safe; inserting while other threads render is not, and the
registry provides no locking. Hosts that must mutate at runtime can build
a new Languages and swap the reference.

Example:
    >>> from rayas.tokenizers.lexer import PygmentsTokenizer
    >>> languages = Languages()
    >>> _ = languages.insert("rust", PygmentsTokenizer.for_language("rust"))
    >>> html = languages.render("rust", b"fn main() {}")
    >>> languages.render("cobol", b"...") is None
    True

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rayas.classes import ClassTable, names_to_classes
from rayas.config import RenderConfig
from rayas.errors import (
    ConfigurationError,
    RayasError,
    TokenizationError,
    UnknownLanguageError,
)
from rayas.renderer import HtmlRenderer
from rayas.tokenizers.protocol import Tokenizer
from rayas.utils.logger import get_logger
from rayas.utils.text import is_safe_identifier
from rayas.vocabulary import DEFAULT_ROLE_NAMES

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """A registered language.

    Attributes:
        language: Language identifier
        tokenizer: Tokenizer configured with role_names
        role_names: Ordered role names, indexed by capture index
        class_table: ``class=ROLE`` attribute per role name, same order

    """

    language: str
    tokenizer: Tokenizer
    role_names: tuple[str, ...]
    class_table: ClassTable


class Languages:
    """Registry of highlightable languages.

    Usage:
        languages = Languages()
        languages.insert("python", tokenizer)
        html = languages.render("python", "x = 1")

    Inserting a language that already exists replaces the previous entry.
    """

    __slots__ = ("_entries", "_renderer")

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        """Initialize an empty registry.

        Args:
            config: Render configuration for every render through this
                registry. When None, the context config is used per call.
        """
        self._entries: dict[str, LanguageEntry] = {}
        self._renderer = HtmlRenderer(config)

    def insert(self, language: str, tokenizer: Tokenizer) -> Languages:
        """Register a language with the default role names.

        Returns:
            Self for chaining
        """
        return self.insert_with_names(language, tokenizer, DEFAULT_ROLE_NAMES)

    def insert_with_names(
        self,
        language: str,
        tokenizer: Tokenizer,
        role_names: Sequence[str],
    ) -> Languages:
        """Register a language with explicit role names.

        Configures the tokenizer with role_names and builds the class table
        from the same names, so capture indices line up.

        Args:
            language: Language identifier, embedded unescaped in the output
            tokenizer: Tokenizer implementing the Tokenizer protocol
            role_names: Ordered role names

        Returns:
            Self for chaining

        Raises:
            ConfigurationError: If language is not a safe identifier
        """
        if not is_safe_identifier(language):
            msg = f"Language identifier {language!r} must match [A-Za-z0-9_+#.-]+"
            raise ConfigurationError(msg)

        names = tuple(role_names)
        tokenizer.configure(names)
        entry = LanguageEntry(
            language=language,
            tokenizer=tokenizer,
            role_names=names,
            class_table=names_to_classes(names),
        )
        if language in self._entries:
            logger.debug("Replacing language %r", language)
        self._entries[language] = entry
        logger.debug("Registered language %r with %d role names", language, len(names))
        return self

    def get(self, language: str) -> LanguageEntry | None:
        """Get the entry for a language identifier, or None."""
        return self._entries.get(language)

    def remove(self, language: str) -> bool:
        """Remove a language. Returns True if it was registered."""
        return self._entries.pop(language, None) is not None

    def render(self, language: str, source: bytes | str) -> str | None:
        """Highlight source and render it to HTML.

        Args:
            language: Registered language identifier
            source: Source bytes, or text to be UTF-8 encoded

        Returns:
            The HTML fragment, or None if the language is unknown or
            tokenization or rendering failed
        """
        try:
            return self.render_strict(language, source)
        except RayasError as exc:
            logger.debug("Render of %r returned no result: %s", language, exc)
            return None

    def render_strict(self, language: str, source: bytes | str) -> str:
        """Highlight source and render it to HTML, raising on failure.

        Raises:
            UnknownLanguageError: If language is not registered
            TokenizationError: If the tokenizer fails
            MalformedEventStreamError: If the event stream is invalid
        """
        entry = self._entries.get(language)
        if entry is None:
            raise UnknownLanguageError(language)

        if isinstance(source, str):
            source = source.encode("utf-8")

        try:
            events = entry.tokenizer.highlight(source)
        except RayasError:
            raise
        except Exception as exc:
            raise TokenizationError(str(exc), language=language) from exc
        return self._renderer.render(events, source, entry.class_table, language)

    @property
    def languages(self) -> tuple[str, ...]:
        """Get all registered language identifiers, sorted."""
        return tuple(sorted(self._entries))

    def __contains__(self, language: str) -> bool:
        """Support 'language in registry' syntax."""
        return language in self._entries

    def __len__(self) -> int:
        """Number of registered languages."""
        return len(self._entries)
