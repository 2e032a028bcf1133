"""Report loading and ordering.

Reads the JSON report from disk, decodes it into a ``Report`` and orders its
results by unique id. Every failure surfaces as a ``LoadError`` or a
``ParseError``; nothing past this module is expected to fail.
"""

import json
from dataclasses import replace
from pathlib import Path
from typing import Union

from .errors import LoadError, ParseError
from .logger import get_logger
from .models import Report
from .types import REPORT_PATH

logger = get_logger("loader")

PathLike = Union[str, Path]


def read_report_bytes(path: PathLike = REPORT_PATH) -> bytes:
    """Read the raw report file.

    Args:
        path: Report location, the fixed Gradle output path by default

    Returns:
        The file content

    Raises:
        LoadError: If the file cannot be opened or read
    """
    logger.debug(f"Reading report from {path}")
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise LoadError(str(path), e) from e


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant: {name}")


def decode_report(data: bytes, path: PathLike = REPORT_PATH) -> Report:
    """Decode raw report content.

    Args:
        data: Raw file content
        path: Location the content was read from, used in error messages

    Returns:
        The decoded report

    Raises:
        ParseError: If the content is not a valid report document
    """
    # JSONDecodeError and UnicodeDecodeError are ValueErrors
    try:
        document = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
        report = Report.from_dict(document)
    except (ValueError, TypeError) as e:
        raise ParseError(str(path), e) from e

    logger.debug(f"Decoded {len(report.test_results)} test results")
    return report


def load_report(path: PathLike = REPORT_PATH) -> Report:
    """Read and decode the report at ``path``."""
    return decode_report(read_report_bytes(path), path)


def sort_results(report: Report) -> Report:
    """Return a copy of the report with results ordered by unique id."""
    ordered = sorted(report.test_results, key=lambda result: result.unique_id)
    return replace(report, test_results=tuple(ordered))
