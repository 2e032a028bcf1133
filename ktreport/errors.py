"""Error types for ktreport.

This module defines the exceptions raised while loading a report. Both
concrete errors are fatal to a run: the CLI prints them and stops before any
section is rendered.
"""

from typing import Optional, Any


class KtReportError(Exception):
    """Base class for all ktreport errors.

    Attributes:
        message: A descriptive error message
        details: Optional additional error details
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        """Initialize a new KtReportError.

        Args:
            message: A descriptive error message
            details: Optional additional error details
        """
        self.message = message
        self.details = details
        super().__init__(self.message)


class LoadError(KtReportError):
    """Error raised when the report file cannot be read.

    This error is raised when:
    - The report file does not exist
    - The report file is not readable
    - Reading fails with an I/O error

    Example:
        >>> raise LoadError("build/test-results/ktreport.json", FileNotFoundError(2, "No such file"))
    """

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(
            f"JSONファイル '{path}' の読み込み中にエラーが発生しました: {cause}",
            {"path": path},
        )


class ParseError(KtReportError):
    """Error raised when the report file is not a valid report.

    This error is raised when:
    - The content is not valid UTF-8 or not valid JSON
    - The JSON root is not an object
    - A field holds a value of the wrong type
    """

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(
            f"JSONファイル '{path}' のパース中にエラーが発生しました: {cause}",
            {"path": path},
        )
