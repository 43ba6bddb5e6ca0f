"""LineBuilder for O(n) line-oriented HTML accumulation.

Same idea as a plain StringBuilder: append to a list, join once. The
difference is that parts are grouped by output line, so the renderer can
wrap each line independently without searching the output for newlines.

Thread Safety:
LineBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class LineBuilder:
    """Efficient per-line string accumulator.

    Usage:
            >>> lb = LineBuilder()
            >>> _ = lb.append("a").append("\\n")
            >>> _ = lb.end_line()
            >>> _ = lb.append("b")
            >>> lb.build()
            ['a\\n', 'b']

    The current (unfinished) line always exists, so a builder that never
    receives text still builds exactly one empty line.

    """

    __slots__ = ("_lines", "_parts")

    def __init__(self) -> None:
        """Initialize with one empty current line."""
        self._lines: list[str] = []
        self._parts: list[str] = []

    def append(self, s: str) -> LineBuilder:
        """Append a string to the current line.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: list[str]) -> LineBuilder:
        """Append multiple strings to the current line at once."""
        self._parts.extend(s for s in strings if s)
        return self

    def end_line(self) -> LineBuilder:
        """Finish the current line and start a new empty one."""
        self._lines.append("".join(self._parts))
        self._parts.clear()
        return self

    def build(self) -> list[str]:
        """Return all finished lines plus the current one."""
        return [*self._lines, "".join(self._parts)]

    def __len__(self) -> int:
        """Return number of lines, counting the current one."""
        return len(self._lines) + 1
