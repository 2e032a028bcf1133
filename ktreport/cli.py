"""Command line interface for ktreport.

Renders ``build/test-results/ktreport.json`` as a pytest-like summary.

Example:
    $ ktreport
    $ ktreport -stack 3
    $ ktreport -s 20 --no-color
"""

from pathlib import Path
from typing import Optional, Union

import click
from rich.console import Console

from . import __version__
from .config import ReportConfig
from .errors import KtReportError
from .formatters import ReportRenderer
from .loader import load_report, sort_results
from .logger import configure_logging, get_logger
from .styles import make_console, make_styler
from .types import DEFAULT_STACK_LINES, REPORT_PATH, GroupingMode

logger = get_logger("cli")


def run_report(
    config: ReportConfig,
    path: Union[str, Path] = REPORT_PATH,
    console: Optional[Console] = None,
) -> bool:
    """Load, sort and render the report.

    Load and parse errors are printed as a single localized line and end the
    run without rendering anything else.

    Args:
        config: Rendering options
        path: Report location
        console: Output console, created from ``config`` when omitted

    Returns:
        True if the report was rendered, False if it could not be loaded
    """
    if console is None:
        console = make_console(color=config.color)

    try:
        report = sort_results(load_report(path))
    except KtReportError as e:
        logger.debug(f"Failed to load report: {e.details}", exc_info=True)
        click.echo(f"エラー: {e.message}", file=console.file)
        return False

    logger.debug(f"Rendering {len(report.test_results)} results, grouping={config.grouping.value}")
    renderer = ReportRenderer(console, make_styler(config.color), config)
    renderer.render(report)
    return True


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-stack', '--stack', '-s', 'stack_lines', type=int,
              default=DEFAULT_STACK_LINES, show_default=True,
              help='Number of stack trace lines shown per run of frames')
@click.option('--no-color', is_flag=True, help='Disable ANSI colors')
@click.option('--merge-groups', is_flag=True,
              help='Render each spec once, even if its tests are not adjacent after sorting')
@click.option('--verbose', '-v', is_flag=True, help='Log debug information to stderr')
@click.version_option(version=__version__, prog_name='ktreport')
def cli(stack_lines: int, no_color: bool, merge_groups: bool, verbose: bool) -> None:
    """Summarize build/test-results/ktreport.json on the console."""
    config = ReportConfig(
        stack_lines=stack_lines,
        color=not no_color,
        grouping=GroupingMode.FIRST_OCCURRENCE if merge_groups else GroupingMode.ADJACENT,
        verbose=verbose,
    )
    configure_logging(config.verbose)
    run_report(config)


if __name__ == '__main__':
    cli()
