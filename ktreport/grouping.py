"""Per-spec aggregation for the grouped view.

Aggregation and render order are kept apart: ``summarize_groups`` folds the
sorted results into one ``GroupSummary`` per spec id, and ``render_order``
decides which summaries are printed, and how often, for a ``GroupingMode``.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from .logger import get_logger
from .models import TestResult
from .types import GroupingMode, TestOutcome

logger = get_logger("grouping")


@dataclass
class GroupSummary:
    """Aggregated results of one spec.

    Attributes:
        spec_id: Spec the results belong to
        test_count: Number of results
        pass_count: Number of passed results
        fail_count: Number of failed results
        time: Sum of member durations in seconds
        outcomes: Pass/fail marker per result, in encounter order
    """
    spec_id: str
    test_count: int = 0
    pass_count: int = 0
    fail_count: int = 0
    time: float = 0.0
    outcomes: List[TestOutcome] = field(default_factory=list)

    def add(self, result: TestResult) -> None:
        self.test_count += 1
        if result.is_failed:
            self.fail_count += 1
            self.outcomes.append(TestOutcome.FAIL)
        else:
            self.pass_count += 1
            self.outcomes.append(TestOutcome.PASS)
        self.time += result.duration_seconds


def summarize_groups(results: Iterable[TestResult]) -> Dict[str, GroupSummary]:
    """Fold results into one summary per spec id.

    Results with an empty spec id are skipped. The returned dict is keyed in
    order of first occurrence.
    """
    summaries: Dict[str, GroupSummary] = {}
    for result in results:
        if not result.spec_id:
            continue
        summary = summaries.get(result.spec_id)
        if summary is None:
            summary = summaries[result.spec_id] = GroupSummary(spec_id=result.spec_id)
        summary.add(result)
    return summaries


def adjacent_spec_runs(results: Iterable[TestResult]) -> List[str]:
    """Spec ids in the order they are flushed by the adjacent-run walk.

    A group is flushed whenever the spec id differs from the previous
    non-empty one, so a spec id that comes back after another spec is listed
    again.
    """
    runs: List[str] = []
    current = ""
    for result in results:
        if not result.spec_id or result.spec_id == current:
            continue
        current = result.spec_id
        runs.append(current)
    return runs


def render_order(results: Sequence[TestResult], mode: GroupingMode) -> List[str]:
    """Spec ids to render, in order, for the given grouping mode.

    Args:
        results: Results in sorted order
        mode: Grouping policy

    Returns:
        Spec ids, possibly repeated in ADJACENT mode
    """
    if mode is GroupingMode.FIRST_OCCURRENCE:
        # dict.fromkeys keeps first-occurrence order
        return list(dict.fromkeys(r.spec_id for r in results if r.spec_id))

    runs = adjacent_spec_runs(results)
    if len(runs) != len(set(runs)):
        repeated = sorted({spec_id for spec_id in runs if runs.count(spec_id) > 1})
        logger.warning(
            f"Spec ids not contiguous after sorting, rendered more than once: {', '.join(repeated)}"
        )
    return runs


def grouped_summaries(results: Sequence[TestResult], mode: GroupingMode) -> List[GroupSummary]:
    """Summaries in render order for the given grouping mode."""
    summaries = summarize_groups(results)
    return [summaries[spec_id] for spec_id in render_order(results, mode)]
