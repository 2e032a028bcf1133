"""Report data model.

The JSON report written by the Kotlin test listener is decoded into frozen
dataclasses. Missing or null fields take empty/zero defaults and unknown
fields are ignored. A field of the wrong type raises ``TypeError``, which the
loader turns into a ``ParseError``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

from .types import FAILED_STATUS


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def _get_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field '{key}' must be an integer, got {type(value).__name__}")
    return value


def _get_object(data: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"field '{key}' must be an object, got {type(value).__name__}")
    return value


def _get_list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field '{key}' must be an array, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TestIdentifier:
    """Identity of a test as reported by the JUnit platform.

    Attributes:
        display_name: Human readable test name
        type: Test descriptor type (TEST, CONTAINER, ...)
        tags: Tags attached to the test
        test_source_name: Short name of the test source, if any
        test_source_full: Full description of the test source, if any
    """
    __test__ = False

    display_name: str = ""
    type: str = ""
    tags: Tuple[str, ...] = ()
    test_source_name: str = ""
    test_source_full: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TestIdentifier':
        tags = _get_list(data, 'tags')
        for tag in tags:
            if not isinstance(tag, str):
                raise TypeError(f"field 'tags' must contain strings, got {type(tag).__name__}")
        return cls(
            display_name=_get_str(data, 'displayName'),
            type=_get_str(data, 'type'),
            tags=tuple(tags),
            test_source_name=_get_str(data, 'testSourceName'),
            test_source_full=_get_str(data, 'testSourceFull'),
        )


@dataclass(frozen=True)
class TestResult:
    """A single test execution record.

    Attributes:
        identifier: Test identity
        unique_id: Unique id, used as sort key and failure header
        spec_id: Id of the spec (test class) the test belongs to; empty
            results are left out of the grouped view
        status: Execution status name (SUCCESSFUL, FAILED, ABORTED, ...)
        start_time: Start timestamp in epoch milliseconds
        end_time: End timestamp in epoch milliseconds
        duration_ms: Execution time in milliseconds
        stdout: Captured standard output
        stderr: Captured standard error
        throwable: Rendered failure cause, usually a stack trace
    """
    __test__ = False

    identifier: TestIdentifier = field(default_factory=TestIdentifier)
    unique_id: str = ""
    spec_id: str = ""
    status: str = ""
    start_time: int = 0
    end_time: int = 0
    duration_ms: int = 0
    stdout: str = ""
    stderr: str = ""
    throwable: str = ""

    @property
    def is_failed(self) -> bool:
        """A result fails on a FAILED status or on any throwable text."""
        return self.status == FAILED_STATUS or self.throwable != ""

    @property
    def duration_seconds(self) -> float:
        return self.duration_ms / 1000.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TestResult':
        return cls(
            identifier=TestIdentifier.from_dict(_get_object(data, 'identifier')),
            unique_id=_get_str(data, 'uniqueId'),
            spec_id=_get_str(data, 'specId'),
            status=_get_str(data, 'status'),
            start_time=_get_int(data, 'startTime'),
            end_time=_get_int(data, 'endTime'),
            duration_ms=_get_int(data, 'durationMs'),
            stdout=_get_str(data, 'stdout'),
            stderr=_get_str(data, 'stderr'),
            throwable=_get_str(data, 'throwable'),
        )


def is_failed(result: TestResult) -> bool:
    """Return True if the result counts as a failure."""
    return result.is_failed


@dataclass(frozen=True)
class Report:
    """Root of a decoded test report.

    The counters are taken from the file as-is and never reconciled with
    ``test_results``.
    """
    test_results: Tuple[TestResult, ...] = ()
    total_tests: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    start_time: int = 0
    end_time: int = 0
    total_duration_ms: int = 0

    @property
    def total_duration_seconds(self) -> float:
        return self.total_duration_ms / 1000.0

    def failed_results(self) -> List[TestResult]:
        """Return the failed results in their current order."""
        return [result for result in self.test_results if result.is_failed]

    @classmethod
    def from_dict(cls, data: Any) -> 'Report':
        """Build a report from decoded JSON.

        Args:
            data: The decoded JSON document

        Returns:
            New report instance

        Raises:
            TypeError: If the document or one of its fields has the wrong type
        """
        # a null document decodes to an empty report
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(f"report root must be an object, got {type(data).__name__}")

        results = []
        for index, item in enumerate(_get_list(data, 'testResults')):
            if item is None:
                results.append(TestResult())
                continue
            if not isinstance(item, dict):
                raise TypeError(f"testResults[{index}] must be an object, got {type(item).__name__}")
            results.append(TestResult.from_dict(item))

        return cls(
            test_results=tuple(results),
            total_tests=_get_int(data, 'totalTests'),
            passed=_get_int(data, 'passed'),
            failed=_get_int(data, 'failed'),
            skipped=_get_int(data, 'skipped'),
            start_time=_get_int(data, 'startTime'),
            end_time=_get_int(data, 'endTime'),
            total_duration_ms=_get_int(data, 'totalDurationMs'),
        )
