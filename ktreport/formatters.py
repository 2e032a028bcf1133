"""Console renderers for ktreport.

This module turns a sorted ``Report`` into the pytest-like page printed by
the CLI:

- a header banner
- one line of pass/fail glyphs per spec
- a failures section with truncated stack traces, only when something failed
- a short summary line

Example:
    >>> from ktreport.config import ReportConfig
    >>> from ktreport.loader import load_report, sort_results
    >>> from ktreport.styles import make_console, RichStyler
    >>> renderer = ReportRenderer(make_console(), RichStyler(), ReportConfig())
    >>> renderer.render(sort_results(load_report()))
"""

from typing import List, Optional

from rich.console import Console
from rich.text import Text

from .config import ReportConfig
from .grouping import GroupSummary, grouped_summaries
from .models import Report, TestResult
from .styles import Styler
from .types import (
    DEFAULT_STACK_LINES,
    SECTION_BANNER_WIDTH,
    STACK_FRAME_PREFIX,
    SUMMARY_BANNER_WIDTH,
    TestOutcome,
)


def banner(name: Optional[str] = None, width: int = SECTION_BANNER_WIDTH) -> str:
    """Section banner such as ``= failures ====...``, or a plain rule."""
    if name is None:
        return "=" * width
    return f"= {name} ".ljust(width, "=")


def format_seconds(seconds: float) -> str:
    return f"{seconds:.3f}s"


def is_stack_frame(line: str) -> bool:
    return line.strip().startswith(STACK_FRAME_PREFIX)


def omitted_marker(count: int) -> str:
    return f"... ({count} lines omitted)"


def truncate_stack_trace(text: str, limit: int = DEFAULT_STACK_LINES) -> List[str]:
    """Shorten a rendered throwable.

    Each run of consecutive stack frame lines keeps its first ``limit`` lines;
    the rest of the run is replaced by a single omission marker. Any other
    line is kept verbatim and starts a new run.

    Args:
        text: Throwable text, usually a message followed by ``at ...`` frames
        limit: Frame lines shown per run

    Returns:
        The lines to print
    """
    lines: List[str] = []
    shown = 0
    omitted = 0
    for line in text.strip().split("\n"):
        if not is_stack_frame(line):
            if omitted > 0:
                lines.append(omitted_marker(omitted))
            lines.append(line)
            shown = 0
            omitted = 0
        elif shown < limit:
            lines.append(line)
            shown += 1
        else:
            omitted += 1

    if omitted > 0:
        lines.append(omitted_marker(omitted))
    return lines


def format_group(summary: GroupSummary, styler: Styler) -> Text:
    """Grouped view line, e.g. ``MySpec ...F. (0.123s)``."""
    line = Text(f"{summary.spec_id} ")
    for outcome in summary.outcomes:
        if outcome is TestOutcome.PASS:
            line.append_text(styler.paint_pass(outcome.value))
        else:
            line.append_text(styler.paint_fail(outcome.value))
    line.append(f" ({format_seconds(summary.time)})")
    return line


def format_failure_header(result: TestResult, styler: Styler) -> Text:
    return Text.assemble(
        styler.paint_bold(result.unique_id),
        f" ({format_seconds(result.duration_seconds)})",
    )


def format_summary(report: Report, styler: Styler) -> Text:
    """Final pass/fail line built from the report's own counters."""
    failed = report.failed
    if failed > 0:
        line = Text.assemble(styler.paint_fail("FAILED"), " ")
    else:
        line = Text.assemble(styler.paint_pass("PASSED"), " ")

    line.append(f"{report.total_tests - failed} passed")
    if failed > 0:
        line.append(f", {failed} failed")
    line.append(f" in {format_seconds(report.total_duration_seconds)}")
    return line


class ReportRenderer:
    """Prints a report on a rich console.

    The report is expected to be sorted by unique id already.
    """

    def __init__(self, console: Console, styler: Styler, config: ReportConfig):
        """Initialize the renderer.

        Args:
            console: Rich console receiving the output
            styler: Styler used for colored fragments
            config: Rendering options
        """
        self.console = console
        self.styler = styler
        self.config = config

    def _print(self, line="") -> None:
        if isinstance(line, str):
            line = Text(line)
        self.console.print(line)

    def _write_verbatim(self, line: str) -> None:
        # rich would expand tabs and drop carriage returns
        self.console.file.write(line + "\n")

    def render(self, report: Report) -> None:
        """Render all sections of the page."""
        self.render_header()
        self.render_groups(report)

        failed_results = report.failed_results()
        if failed_results:
            self._print()
            self._print(banner("failures"))
            self.render_failures(failed_results)

        self._print()
        self._print(banner("short test summary info", SUMMARY_BANNER_WIDTH))
        self.render_summary(report)
        self._print(banner(width=SUMMARY_BANNER_WIDTH))

    def render_header(self) -> None:
        self._print(banner("ktreport"))
        self._print()

    def render_groups(self, report: Report) -> None:
        for summary in grouped_summaries(report.test_results, self.config.grouping):
            self._print(format_group(summary, self.styler))

    def render_failures(self, failed_results: List[TestResult]) -> None:
        for index, result in enumerate(failed_results):
            if index > 0:
                self._print()
                self._print("***")
            self._render_failure(result)

    def _render_failure(self, result: TestResult) -> None:
        self._print()
        self._print(format_failure_header(result, self.styler))
        self._print()

        if result.throwable:
            for line in truncate_stack_trace(result.throwable, self.config.stack_lines):
                self._write_verbatim(line)

        self._render_stream("STDOUT", result.stdout)
        self._render_stream("STDERR", result.stderr)

    def _render_stream(self, label: str, text: str) -> None:
        text = text.rstrip("\r\n")
        if not text:
            return
        self._print()
        self._print(f"{label}:")
        self._write_verbatim(text)

    def render_summary(self, report: Report) -> None:
        self._print(format_summary(report, self.styler))
