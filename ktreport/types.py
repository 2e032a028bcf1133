"""Enums and constants for report rendering.

This module defines enums and constants used throughout ktreport.

The module provides:
- TestOutcome: Per-test marker used by the grouped view
- GroupingMode: Policy for the order in which groups are rendered
- Default configuration values and layout constants

Example:
    >>> from ktreport.types import GroupingMode, TestOutcome
    >>> mode = GroupingMode.FIRST_OCCURRENCE
    >>> print(f"Mode: {mode.value}, Glyph: {TestOutcome.FAIL.value}")
    Mode: FIRST_OCCURRENCE, Glyph: F
"""

from enum import Enum
from typing import Final


class TestOutcome(str, Enum):
    """Outcome marker of a single test inside a group.

    The value doubles as the glyph printed in the grouped view.
    """

    PASS = '.'
    FAIL = 'F'


class GroupingMode(str, Enum):
    """Order in which spec groups are rendered.

    Attributes:
        ADJACENT: Flush a group every time the spec id changes from the
            previous result. A spec id that reappears after another one is
            rendered again.
        FIRST_OCCURRENCE: Render each group once, ordered by the first
            appearance of its spec id.
    """

    ADJACENT = 'ADJACENT'
    FIRST_OCCURRENCE = 'FIRST_OCCURRENCE'


# Status string written by the JUnit listener for failed tests
FAILED_STATUS: Final[str] = 'FAILED'

# Prefix of a stack frame line once surrounding whitespace is removed
STACK_FRAME_PREFIX: Final[str] = 'at '

# Location of the report written by the Gradle test task
REPORT_PATH: Final[str] = 'build/test-results/ktreport.json'

# Default values for rendering configuration
DEFAULT_STACK_LINES: Final[int] = 7

# Header and failures banners are one character narrower than the summary ones
SECTION_BANNER_WIDTH: Final[int] = 106
SUMMARY_BANNER_WIDTH: Final[int] = 107
