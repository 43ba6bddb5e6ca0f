"""ContextVar-based render configuration for Rayas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
An HtmlRenderer created without an explicit config reads the active
config at render time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from rayas.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(line_separator="\\n")):
        html = languages.render("python", source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        line_separator: Text emitted between consecutive
            ``<span class=line>`` blocks. Empty by default, so line-spans
            are directly adjacent; ``"\\n"`` puts each block on its own
            output line.
        reject_unclosed: When True, a stream that ends with highlight
            regions still open raises MalformedEventStreamError. By default
            the residual spans are closed on the last line.

    """

    line_separator: str = ""
    reject_unclosed: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"line_separator": "\\n", "theme": "x"})
            RenderConfig(line_separator='\\n', reject_unclosed=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        with render_config_context(RenderConfig(line_separator="\\n")):
            html = render_html(events, source, classes, "python")

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
