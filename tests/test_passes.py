"""
Tests for the classification and join passes.

Each test class corresponds to one pass module.
"""
from __future__ import annotations

import time

import pytest

from ted.models import LogicalLine
from ted.passes.classify import LineClassifyPass, classify_line
from ted.passes.line_join import JoinState, LineJoinPass, join_lines, join_step


# ─────────────────────────────────────────────────────────────────────────────
# classify_line / LineClassifyPass
# ─────────────────────────────────────────────────────────────────────────────


class TestClassifyLine:
    def _run(self, raw, tabstop=4):
        return classify_line(raw, tabstop)

    @pytest.mark.parametrize("raw", ["hello world", "x", "a, b; c!", "trailing space "])
    def test_plain_line_unchanged(self, raw):
        line = self._run(raw)
        assert line.text == raw
        assert line.indent == 0
        assert not line.indented
        assert not line.tabular
        assert not line.quoted
        assert not line.blank
        assert not line.incomplete

    @pytest.mark.parametrize("raw", ["", " ", "\t", "  \t  ", "\t\t"])
    def test_whitespace_only_is_blank(self, raw):
        line = self._run(raw)
        assert line.blank
        assert line.text == ""
        assert not line.tabular
        assert not line.quoted

    def test_blank_indent_still_measured(self):
        line = self._run("   \t ")
        assert line.blank
        assert line.indent == 5

    def test_space_indentation(self):
        line = self._run("  two spaces")
        assert line.indent == 2
        assert line.indented
        assert line.text == "two spaces"
        assert not line.quoted
        assert not line.tabular

    def test_tab_advances_to_next_stop(self):
        assert self._run("  \tx").indent == 4
        assert self._run("\tx").indent == 4
        assert self._run("\t\tx").indent == 8
        assert self._run("\tx", tabstop=8).indent == 8
        assert self._run("     \tx").indent == 8

    def test_continuation_marker_stripped(self):
        line = self._run("a b\\")
        assert line.incomplete
        assert line.text == "a b"

    def test_only_one_backslash_stripped(self):
        line = self._run("path\\\\")
        assert line.incomplete
        assert line.text == "path\\"

    def test_lone_backslash_is_blank_and_incomplete(self):
        line = self._run("\\")
        assert line.incomplete
        assert line.blank

    def test_tab_only_indentation_is_quoted(self):
        line = self._run("\tsome quoted text")
        assert line.quoted
        assert not line.tabular
        assert line.text == "some quoted text"

    def test_spaces_then_tab_is_quoted(self):
        line = self._run("    \tnested quote text that is somewhat long indeed")
        assert line.quoted
        assert line.indent == 8
        assert line.text == "nested quote text that is somewhat long indeed"

    def test_embedded_tab_is_tabular(self):
        line = self._run("one\ttwo")
        assert line.tabular
        assert not line.quoted
        assert line.text == "one\ttwo"

    def test_indented_tabular_keeps_data_tabs(self):
        line = self._run("\tone\ttwo")
        assert line.tabular
        assert not line.quoted
        assert line.indent == 4
        assert line.text == "one\ttwo"

    def test_trailing_tab_is_tabular(self):
        assert self._run("word\t").tabular

    def test_tabular_and_quoted_exclusive(self):
        for raw in ["a\tb", "\ta", "\ta\tb", "  \t\t", "x", "", "\t\\"]:
            line = self._run(raw)
            assert not (line.tabular and line.quoted)
            if line.blank:
                assert not line.tabular and not line.quoted


class TestLineClassifyPass:
    def test_preserves_line_count_and_order(self):
        raws = ["one", "", "\tq", "a\tb"]
        lines = LineClassifyPass(tabstop=4).run(raws)
        assert [l.kind for l in lines] == ["PROSE", "BLANK", "QUOTED", "TABULAR"]

    def test_uses_configured_tabstop(self):
        lines = LineClassifyPass(tabstop=3).run(["\tx"])
        assert lines[0].indent == 3


# ─────────────────────────────────────────────────────────────────────────────
# LogicalLine.concat
# ─────────────────────────────────────────────────────────────────────────────


class TestConcat:
    def test_text_joined_with_single_space(self):
        merged = LogicalLine("a b", incomplete=True).concat(LogicalLine("c d"))
        assert merged.text == "a b c d"
        assert not merged.incomplete

    def test_incomplete_taken_from_right(self):
        merged = LogicalLine("a", incomplete=True).concat(LogicalLine("b", incomplete=True))
        assert merged.incomplete

    def test_quoted_right_makes_tabular(self):
        merged = classify_line("x", 4).concat(classify_line("\tquoted", 4))
        assert merged.tabular
        assert not merged.quoted

    def test_quoted_left_prose_right_stays_quoted(self):
        merged = classify_line("\tquoted", 4).concat(classify_line("more", 4))
        assert merged.quoted
        assert not merged.tabular

    def test_quoted_left_tabular_right_becomes_tabular(self):
        merged = classify_line("\tquoted", 4).concat(classify_line("a\tb", 4))
        assert merged.tabular
        assert not merged.quoted

    def test_indent_kept_from_left(self):
        merged = classify_line("  left", 4).concat(classify_line("\t\tright\tcol", 4))
        assert merged.indent == 2
        assert merged.indented

    def test_original_lines_untouched(self):
        left = LogicalLine("a", incomplete=True)
        left.concat(LogicalLine("b"))
        assert left.text == "a"
        assert left.incomplete

    @pytest.mark.parametrize(
        "left, right",
        [("x", "a\tb"), ("a\tb", "y"), ("\tq", "z"), ("x", "\tq"), ("p", "r")],
    )
    def test_reclassifying_merged_text_is_consistent(self, left, right):
        merged = classify_line(left, 4).concat(classify_line(right, 4))
        again = classify_line(merged.text, 4)
        # Data tabs survive the merge, so a tabular reclassification implies
        # the merged flags said tabular too.
        if again.tabular:
            assert merged.tabular
        assert not (merged.tabular and merged.quoted)


# ─────────────────────────────────────────────────────────────────────────────
# LineJoinPass
# ─────────────────────────────────────────────────────────────────────────────


class TestLineJoinPass:
    def _run(self, raws, join_short_lines=False):
        classified = LineClassifyPass(tabstop=4).run(raws)
        return LineJoinPass(join_short_lines).run(classified)

    def test_continuation_merged(self):
        result = self._run(["a b\\", "c d"])
        assert len(result) == 1
        assert result[0].text == "a b c d"
        assert not result[0].incomplete

    def test_multiple_continuations_merged(self):
        result = self._run(["a\\", "b\\", "c", "d"])
        assert [l.text for l in result] == ["a b c", "d"]

    def test_short_lines_separate_by_default(self):
        result = self._run(["short one", "short two"])
        assert [l.text for l in result] == ["short one", "short two"]

    def test_short_lines_joined_when_enabled(self):
        result = self._run(["short one", "short two"], join_short_lines=True)
        assert [l.text for l in result] == ["short one short two"]

    def test_blank_stops_continuation(self):
        result = self._run(["a\\", "", "b"])
        assert [l.kind for l in result] == ["PROSE", "BLANK", "PROSE"]
        assert result[0].text == "a"

    @pytest.mark.parametrize("join_short_lines", [False, True])
    def test_no_merge_across_blank(self, join_short_lines):
        result = self._run(["para one", "", "para two"], join_short_lines)
        assert [l.text for l in result] == ["para one", "", "para two"]

    def test_blank_does_not_absorb_next_line(self):
        result = self._run(["", "b", "c"], join_short_lines=True)
        assert [l.text for l in result] == ["", "b c"]
        assert result[0].blank

    def test_trailing_continuation_kept_incomplete(self):
        result = self._run(["end\\"])
        assert len(result) == 1
        assert result[0].incomplete

    def test_continuation_into_quoted_becomes_tabular(self):
        result = self._run(["x\\", "\tquoted"])
        assert len(result) == 1
        assert result[0].tabular
        assert result[0].text == "x quoted"

    def test_empty_input(self):
        assert self._run([]) == []

    def test_input_lines_not_mutated(self):
        classified = LineClassifyPass(tabstop=4).run(["a\\", "b"])
        join_lines(classified)
        assert classified[0].text == "a"
        assert classified[0].incomplete


class TestJoinStep:
    def test_first_line_becomes_pending(self):
        line = LogicalLine("a")
        state = join_step(JoinState(), line, join_short_lines=False)
        assert state.pending is line
        assert state.finished == []

    def test_unjoined_line_finishes_pending(self):
        state = JoinState(pending=LogicalLine("a"))
        state = join_step(state, LogicalLine("b"), join_short_lines=False)
        assert [l.text for l in state.finished] == ["a"]
        assert state.pending.text == "b"

    def test_step_returns_new_state(self):
        start = JoinState(pending=LogicalLine("a", incomplete=True))
        after = join_step(start, LogicalLine("b"), join_short_lines=False)
        assert start.pending.text == "a"
        assert after.pending.text == "a b"
        assert after.lines() == [after.pending]

    def test_step_appends_without_copying(self):
        state = JoinState(pending=LogicalLine("a"))
        finished = state.finished
        after = join_step(state, LogicalLine("b"), join_short_lines=False)
        assert after.finished is finished
        assert [l.text for l in finished] == ["a"]

    def test_large_input_joins_in_linear_time(self):
        lines = [classify_line("x", 4)] * 100_000
        started = time.perf_counter()
        result = join_lines(lines)
        elapsed = time.perf_counter() - started
        assert len(result) == 100_000
        assert elapsed < 10.0

    def test_large_continued_input_collapses(self):
        lines = [classify_line("x\\", 4)] * 5_000 + [classify_line("end", 4)]
        result = join_lines(lines)
        assert len(result) == 1
        assert result[0].text.endswith("x end")
