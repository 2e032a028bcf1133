"""
Rendering configuration for ktreport.
"""
from dataclasses import dataclass

from .types import DEFAULT_STACK_LINES, GroupingMode


@dataclass
class ReportConfig:
    """Options controlling how a report is rendered.

    Attributes:
        stack_lines: Maximum frame lines shown per run of stack frames
        color: Whether output is colorized
        grouping: Order in which spec groups are rendered
        verbose: Whether debug logging is enabled
    """
    stack_lines: int = DEFAULT_STACK_LINES
    color: bool = True
    grouping: GroupingMode = GroupingMode.ADJACENT
    verbose: bool = False

