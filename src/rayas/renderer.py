"""Line-wrapped HTML renderer.

Renders a highlight event stream over a source buffer to HTML where every
output line is self-contained:

    <pre class=language-LANG><code>
    <span class=line>...</span><span class=line>...</span>
    </code></pre>

Regions that span a newline are closed before the newline and reopened,
in their original nesting order, at the start of the next line. No span
ever continues past a ``<span class=line>`` boundary, so consumers can
style or number lines without parsing nested markup.

Thread Safety:
All per-render state is encapsulated in RenderState, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer
instance and call render() concurrently without synchronization.

Failure:
The renderer fails closed. A malformed event stream raises
MalformedEventStreamError and a failing tokenizer raises TokenizationError;
no partial HTML is ever returned.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from rayas.buffer import LineBuilder
from rayas.classes import ClassTable
from rayas.config import RenderConfig, get_render_config
from rayas.errors import MalformedEventStreamError, RayasError, TokenizationError
from rayas.events import HighlightEnd, HighlightEvent, HighlightStart, Source
from rayas.utils.text import escape_text

LINE_OPEN = "<span class=line>"
SPAN_CLOSE = "</span>"


@dataclass(slots=True)
class RenderState:
    """Per-render mutable state.

    Created fresh for each render, ensuring thread safety when sharing
    HtmlRenderer instances across threads.

    Attributes:
        open_classes: Class attributes of the open regions, outermost first
        lines: Rendered line contents
        position: End offset of the last Source event
        event_index: Index of the event being processed

    """

    open_classes: list[str] = field(default_factory=list)
    lines: LineBuilder = field(default_factory=LineBuilder)
    position: int = 0
    event_index: int = 0


def _is_offset(value: object) -> bool:
    """Check for a non-negative int; bool is rejected although it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _guarded(events: Iterable[HighlightEvent]) -> Iterator[HighlightEvent]:
    """Iterate events, reporting tokenizer crashes as TokenizationError."""
    iterator = iter(events)
    while True:
        try:
            event = next(iterator)
        except StopIteration:
            return
        except RayasError:
            raise
        except Exception as exc:
            raise TokenizationError(f"tokenizer failed: {exc}") from exc
        yield event


class HtmlRenderer:
    """Render highlight events to line-wrapped HTML.

    Usage:
        >>> from rayas.classes import names_to_classes
        >>> from rayas.events import HighlightEnd, HighlightStart, Source
        >>> renderer = HtmlRenderer()
        >>> events = [HighlightStart(0), Source(0, 2), HighlightEnd()]
        >>> renderer.render(events, b"ab", names_to_classes(["string"]), "x")
        '<pre class=language-x><code><span class=line><span class=string>ab</span></span></code></pre>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderState.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. When None, the config active in
                the calling context (see rayas.config) is read per render.
        """
        self._config = config

    @property
    def config(self) -> RenderConfig:
        """The effective render configuration."""
        return self._config if self._config is not None else get_render_config()

    def render(
        self,
        events: Iterable[HighlightEvent],
        source: bytes,
        class_table: ClassTable,
        language: str,
    ) -> str:
        """Render events to the complete HTML fragment.

        Args:
            events: Ordered highlight event stream over ``source``
            source: Source buffer the Source events index into
            class_table: Class attribute per capture index
            language: Language identifier for the outer ``pre`` class,
                emitted unescaped

        Returns:
            ``<pre class=language-LANG><code>`` + line-spans + ``</code></pre>``

        Raises:
            MalformedEventStreamError: If the stream is unbalanced, out of bounds,
                or carries non-integer indices or offsets
            TokenizationError: If the event iterator fails
        """
        lines = self.render_lines(events, source, class_table)
        separator = self.config.line_separator
        body = separator.join(f"{LINE_OPEN}{line}{SPAN_CLOSE}" for line in lines)
        return f"<pre class=language-{language}><code>{body}</code></pre>"

    def render_lines(
        self,
        events: Iterable[HighlightEvent],
        source: bytes,
        class_table: ClassTable,
    ) -> list[str]:
        """Render events to per-line HTML, without line or outer wrappers.

        Each returned line is individually well-formed. A line keeps its
        trailing newline character, emitted after all of its spans are
        closed. Source with k newlines yields k+1 lines.
        """
        state = RenderState()

        for index, event in enumerate(_guarded(events)):
            state.event_index = index
            match event:
                case HighlightStart(index=capture):
                    self._start_highlight(state, capture, class_table)
                case HighlightEnd():
                    self._end_highlight(state)
                case Source(start=start, end=end):
                    self._add_source(state, source, start, end)
                case _:
                    msg = f"unexpected event {event!r}"
                    raise MalformedEventStreamError(msg, event_index=index)

        # By default regions still open at the end of the stream are closed on
        # the last line; strict configs reject them instead.
        if state.open_classes and self.config.reject_unclosed:
            msg = f"{len(state.open_classes)} highlight region(s) left open at end of stream"
            raise MalformedEventStreamError(
                msg, offset=state.position, event_index=state.event_index
            )
        state.lines.append(SPAN_CLOSE * len(state.open_classes))
        state.open_classes.clear()
        return state.lines.build()

    def _start_highlight(
        self, state: RenderState, capture: int, class_table: ClassTable
    ) -> None:
        if not _is_offset(capture) or not capture < len(class_table):
            msg = f"capture index {capture!r} outside class table of {len(class_table)} entries"
            raise MalformedEventStreamError(
                msg, offset=state.position, event_index=state.event_index
            )
        attribute = class_table[capture]
        state.open_classes.append(attribute)
        state.lines.append(f"<span {attribute}>")

    def _end_highlight(self, state: RenderState) -> None:
        if not state.open_classes:
            raise MalformedEventStreamError(
                "highlight end without a matching start",
                offset=state.position,
                event_index=state.event_index,
            )
        state.open_classes.pop()
        state.lines.append(SPAN_CLOSE)

    def _add_source(self, state: RenderState, source: bytes, start: int, end: int) -> None:
        if not (_is_offset(start) and _is_offset(end)):
            msg = f"source range [{start!r}, {end!r}) must use integer offsets"
            raise MalformedEventStreamError(msg, event_index=state.event_index)
        if start < state.position or start > end or end > len(source):
            msg = (
                f"source range [{start}, {end}) invalid after offset {state.position} "
                f"in buffer of {len(source)} bytes"
            )
            raise MalformedEventStreamError(msg, offset=start, event_index=state.event_index)
        state.position = end

        text = source[start:end].decode("utf-8", errors="replace")
        segments = text.split("\n")
        lines = state.lines
        for segment in segments[:-1]:
            lines.append(escape_text(segment))
            lines.append(SPAN_CLOSE * len(state.open_classes))
            lines.append("\n")
            lines.end_line()
            lines.extend([f"<span {attribute}>" for attribute in state.open_classes])
        lines.append(escape_text(segments[-1]))


def render_html(
    events: Iterable[HighlightEvent],
    source: bytes,
    class_table: ClassTable,
    language: str,
    *,
    config: RenderConfig | None = None,
) -> str:
    """Render events to HTML with a one-off HtmlRenderer.

    See HtmlRenderer.render() for arguments and errors.
    """
    return HtmlRenderer(config).render(events, source, class_table, language)
