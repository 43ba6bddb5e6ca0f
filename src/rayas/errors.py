"""Exception classes for Rayas.

Provides standardized exceptions for error handling throughout Rayas.
Every failure that can reach a caller derives from RayasError, so hosts
can catch the whole family in one place.
"""

from __future__ import annotations


class RayasError(Exception):
    """Base exception for all Rayas errors.

    Subclass this for specific error categories.
    """

    pass


class UnknownLanguageError(RayasError):
    """No language is registered under the requested identifier."""

    def __init__(self, language: str) -> None:
        """Initialize with the identifier that failed to resolve.

        Args:
            language: Language identifier passed by the caller
        """
        self.language = language
        super().__init__(f"Unknown language '{language}'")


class TokenizationError(RayasError):
    """Error raised by a tokenizer while producing highlight events.

    Raised when the external tokenizer cannot process the source
    (malformed grammar state, resource limits, lexer bugs).
    """

    def __init__(self, message: str, language: str | None = None) -> None:
        """Initialize tokenization error.

        Args:
            message: Error description
            language: Language being tokenized (optional)
        """
        self.message = message
        self.language = language

        prefix = f"[{language}] " if language else ""
        super().__init__(f"{prefix}{message}")


class MalformedEventStreamError(RayasError):
    """Highlight event stream violates nesting or bounds invariants.

    Raised for capture indices outside the class table, end events
    with no open region, partially overlapping regions, and source
    ranges outside the buffer. The renderer never returns partial
    output when this is raised.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        event_index: int | None = None,
    ) -> None:
        """Initialize malformed stream error with optional location.

        Args:
            message: Error description
            offset: Byte offset in the source buffer (0-indexed)
            event_index: Position of the offending event in the stream (0-indexed)
        """
        self.message = message
        self.offset = offset
        self.event_index = event_index

        location = ""
        if event_index is not None:
            location = f"event {event_index}"
        if offset is not None:
            location += f"{', ' if location else ''}byte {offset}"
        if location:
            location = f"{location}: "

        super().__init__(f"{location}{message}")


class ConfigurationError(RayasError):
    """Invalid registry or renderer configuration.

    Raised at setup time, e.g. for a language identifier that is not
    safe to embed in a class attribute unescaped.
    """

    pass
