"""Output styling for ktreport.

Renderers never emit escape codes themselves. They ask a ``Styler`` for
``rich.text.Text`` fragments and print them on a ``rich`` console, so colors
can be switched off or inspected in tests.
"""

from abc import ABC, abstractmethod
from typing import IO, Optional

from rich.console import Console
from rich.text import Text


class Styler(ABC):
    """Paints report fragments."""

    @abstractmethod
    def paint_pass(self, text: str) -> Text:
        """Style text marking a passed test."""

    @abstractmethod
    def paint_fail(self, text: str) -> Text:
        """Style text marking a failed test."""

    @abstractmethod
    def paint_bold(self, text: str) -> Text:
        """Style emphasized text such as failure headers."""


class RichStyler(Styler):
    """Green passes, red failures, bold headers."""

    PASS_STYLE = "green"
    FAIL_STYLE = "red"
    BOLD_STYLE = "bold"

    def paint_pass(self, text: str) -> Text:
        return Text(text, style=self.PASS_STYLE)

    def paint_fail(self, text: str) -> Text:
        return Text(text, style=self.FAIL_STYLE)

    def paint_bold(self, text: str) -> Text:
        return Text(text, style=self.BOLD_STYLE)


class PlainStyler(Styler):
    """Leaves text unstyled."""

    def paint_pass(self, text: str) -> Text:
        return Text(text)

    def paint_fail(self, text: str) -> Text:
        return Text(text)

    def paint_bold(self, text: str) -> Text:
        return Text(text)


def make_styler(color: bool) -> Styler:
    return RichStyler() if color else PlainStyler()


def make_console(color: bool = True, file: Optional[IO[str]] = None) -> Console:
    """Create the console the report is printed on.

    Markup, emoji codes and highlighting are disabled because identifiers and
    stack traces are printed verbatim. Soft wrapping keeps long lines intact.

    Args:
        color: Emit ANSI colors when True
        file: Output stream, standard output by default

    Returns:
        A configured console
    """
    return Console(
        file=file,
        color_system="standard" if color else None,
        force_terminal=True if color else None,
        no_color=not color,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
