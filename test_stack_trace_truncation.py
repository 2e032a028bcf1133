#!/usr/bin/env python3
"""Tests for shortening stack traces in failure blocks."""

import pytest

from ktreport.formatters import is_stack_frame, truncate_stack_trace


def frames(count, start=0):
    return [f"    at com.example.Frame{i}.call(Frame{i}.kt:{i + 1})" for i in range(start, start + count)]


def throwable(*parts):
    lines = []
    for part in parts:
        lines.extend([part] if isinstance(part, str) else part)
    return "\n".join(lines)


def test_long_run_is_collapsed():
    text = throwable("java.lang.AssertionError: expected 2", frames(10))

    lines = truncate_stack_trace(text, 7)

    assert lines == ["java.lang.AssertionError: expected 2"] + frames(7) + ["... (3 lines omitted)"]


@pytest.mark.parametrize("count", [0, 1, 6, 7])
def test_short_runs_are_kept_whole(count):
    text = throwable("java.lang.AssertionError", frames(count))

    lines = truncate_stack_trace(text, 7)

    assert lines == ["java.lang.AssertionError"] + frames(count)
    assert not any("lines omitted" in line for line in lines)


def test_limit_resets_after_non_frame_line():
    text = throwable(
        "java.lang.IllegalStateException: outer",
        frames(8),
        "Caused by: java.lang.RuntimeException: inner",
        frames(8, start=100),
    )

    lines = truncate_stack_trace(text, 7)

    assert lines == (
        ["java.lang.IllegalStateException: outer"]
        + frames(7)
        + ["... (1 lines omitted)", "Caused by: java.lang.RuntimeException: inner"]
        + frames(7, start=100)
        + ["... (1 lines omitted)"]
    )
    assert lines.count("... (1 lines omitted)") == 2


def test_trace_starting_with_frames():
    shown = frames(7)

    lines = truncate_stack_trace(throwable(frames(9)), 7)

    # the whole text is stripped, so the first frame loses its indentation
    assert lines == [shown[0].lstrip()] + shown[1:] + ["... (2 lines omitted)"]


def test_zero_limit_omits_every_frame():
    text = throwable("boom", frames(3))

    assert truncate_stack_trace(text, 0) == ["boom", "... (3 lines omitted)"]


def test_surrounding_whitespace_is_stripped_from_whole_text():
    text = "\n\n  java.lang.Error: boom\n\tat A.b(A.kt:1)\n\n"

    assert truncate_stack_trace(text, 7) == ["java.lang.Error: boom", "\tat A.b(A.kt:1)"]


def test_inner_lines_are_kept_verbatim():
    text = "Error: first\n    indented detail\n\tat A.b(A.kt:1)"

    assert truncate_stack_trace(text, 7) == ["Error: first", "    indented detail", "\tat A.b(A.kt:1)"]


def test_default_limit_is_seven():
    lines = truncate_stack_trace(throwable("boom", frames(8)))

    assert lines[-1] == "... (1 lines omitted)"
    assert len(lines) == 9


@pytest.mark.parametrize("line,expected", [
    ("at com.example.A.b(A.kt:1)", True),
    ("\tat com.example.A.b(A.kt:1)", True),
    ("        at com.example.A.b(A.kt:1)", True),
    ("attempt failed", False),
    ("java.lang.AssertionError: at the end", False),
    ("... 12 more", False),
    ("", False),
])
def test_is_stack_frame(line, expected):
    assert is_stack_frame(line) is expected
