"""Tokenizer protocol: the seam to grammar-driven highlighters.

A tokenizer turns source bytes into the ordered highlight event stream.
Rayas never parses source itself; any grammar engine can be plugged in by
implementing configure() and highlight().

Example:
    class MyTokenizer:
        def configure(self, role_names: Sequence[str]) -> None:
            self._roles = tuple(role_names)

        def highlight(self, source: bytes) -> Iterable[HighlightEvent]:
            return [Source(0, len(source))]

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from rayas.events import HighlightEvent


class Tokenizer(Protocol):
    """Protocol for highlight event producers.

    Thread Safety:
        configure() is called once, from Languages.insert(), before the
        tokenizer is shared. highlight() may then be called concurrently
        from multiple render threads and must not mutate shared state.
    """

    def configure(self, role_names: Sequence[str]) -> None:
        """Bind the tokenizer's capture names to role indices.

        Args:
            role_names: Ordered role names; position is the capture index
                the tokenizer must emit in HighlightStart events.

        Contract:
            - Captures matching no role name MUST NOT be emitted
            - A later call replaces the previous binding
        """
        ...

    def highlight(self, source: bytes) -> Iterable[HighlightEvent]:
        """Tokenize source into an ordered event stream.

        Raises:
            TokenizationError: If the source cannot be tokenized

        Contract:
            - Source ranges MUST be increasing and within the buffer
            - Start/end events MUST be balanced and strictly nested
        """
        ...


def match_capture_name(capture_name: str, role_names: Sequence[str]) -> int | None:
    """Resolve a grammar capture name to a role index.

    A role name matches when each of its dot-separated parts appears among
    the parts of the capture name. The match with the most parts wins; the
    earliest role wins a tie.

    Args:
        capture_name: Capture name from the grammar (e.g., "function.method.call")
        role_names: Ordered role names

    Returns:
        Index of the best matching role, or None if no role matches

    Examples:
        >>> match_capture_name("keyword.return", ["keyword", "keyword.return"])
        1
        >>> match_capture_name("keyword.coroutine", ["keyword", "keyword.return"])
        0
        >>> match_capture_name("comment", ["keyword"]) is None
        True
    """
    capture_parts = set(capture_name.split("."))
    best_index: int | None = None
    best_length = 0

    for index, role_name in enumerate(role_names):
        parts = role_name.split(".")
        if len(parts) > best_length and all(part in capture_parts for part in parts):
            best_index = index
            best_length = len(parts)

    return best_index
