"""Callable-backed tokenizer.

Wraps any function that yields ``(start, end, capture_name)`` triples,
which is how most grammar engines report query captures. The triples may
nest; they are sorted and converted to an event stream here.

Example:
    >>> def words(source: bytes):
    ...     yield (0, 3, "keyword.return")
    >>> tokenizer = FunctionTokenizer(words)
    >>> tokenizer.configure(["keyword"])
    >>> list(tokenizer.highlight(b"ret x"))
    [HighlightStart(index=0), Source(start=0, end=3), HighlightEnd(), Source(start=3, end=5)]

"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable, Iterable, Iterator, Sequence

from rayas.errors import RayasError, TokenizationError
from rayas.events import HighlightEvent, HighlightRegion, events_from_regions
from rayas.tokenizers.protocol import match_capture_name

Capture: TypeAlias = tuple[int, int, str]
CaptureFunction: TypeAlias = Callable[[bytes], Iterable[Capture]]


class CaptureResolver:
    """Map capture names to role indices, caching each resolution.

    Thread Safety:
        The cache is a plain dict filled on first use of each name. Two
        threads racing on the same name compute and store the same value.
    """

    __slots__ = ("_role_names", "_cache")

    def __init__(self, role_names: Sequence[str] = ()) -> None:
        self._role_names = tuple(role_names)
        self._cache: dict[str, int | None] = {}

    def resolve(self, capture_name: str) -> int | None:
        """Return the role index for capture_name, or None if unmatched."""
        try:
            return self._cache[capture_name]
        except KeyError:
            index = match_capture_name(capture_name, self._role_names)
            self._cache[capture_name] = index
            return index

    def regions(self, captures: Iterable[Capture]) -> Iterator[HighlightRegion]:
        """Convert captures to regions, dropping unmatched capture names."""
        for start, end, capture_name in captures:
            index = self.resolve(capture_name)
            if index is not None:
                yield HighlightRegion(start, end, index)


class FunctionTokenizer:
    """Tokenizer implemented by a capture-producing function."""

    __slots__ = ("_func", "_resolver", "name")

    def __init__(self, func: CaptureFunction, *, name: str | None = None) -> None:
        """Initialize tokenizer.

        Args:
            func: Called with the source bytes; yields capture triples
            name: Display name used in error messages (defaults to the
                function's __name__)
        """
        self._func = func
        self._resolver = CaptureResolver()
        self.name = name or getattr(func, "__name__", "tokenizer")

    def configure(self, role_names: Sequence[str]) -> None:
        self._resolver = CaptureResolver(role_names)

    def highlight(self, source: bytes) -> Iterable[HighlightEvent]:
        resolver = self._resolver
        try:
            regions = list(resolver.regions(self._func(source)))
        except RayasError:
            raise
        except Exception as exc:
            raise TokenizationError(str(exc), language=self.name) from exc
        return events_from_regions(regions, len(source))
