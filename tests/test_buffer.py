"""Tests for the LineBuilder accumulator."""

from __future__ import annotations

from rayas.buffer import LineBuilder


class TestLineBuilder:
    """Parts are grouped per line and joined once."""

    def test_new_builder_has_one_empty_line(self) -> None:
        lb = LineBuilder()
        assert lb.build() == [""]
        assert len(lb) == 1

    def test_chained_calls_return_builder(self) -> None:
        lb = LineBuilder()
        assert lb.append("a").append("\n") is lb
        assert lb.end_line() is lb
        lb.append("b")

        assert lb.build() == ["a\n", "b"]
        assert len(lb) == 2

    def test_extend_joins_into_current_line(self) -> None:
        lb = LineBuilder().extend(["<span class=string>", "x"])
        assert lb.build() == ["<span class=string>x"]

    def test_trailing_end_line_leaves_empty_last_line(self) -> None:
        lb = LineBuilder().append("a").end_line()
        assert lb.build() == ["a", ""]
