"""Aggregation of probe results into a deterministic report."""

import math
from datetime import datetime, timezone
from typing import Dict, Iterable, List

from dns_check.models.dns_server import Category
from dns_check.models.probe_result import ProbeResult
from dns_check.models.report import CategoryStats, Report, Summary


class IncompleteRunError(RuntimeError):
    """Raised when the result stream does not hold exactly one result per job."""


def collect_results(stream: Iterable[ProbeResult], expected: int) -> List[ProbeResult]:
    """Drain a result stream, blocking until it ends.

    Args:
        stream: Results in completion order; ends when the pool has finished.
        expected: Number of jobs dispatched (servers x domains).

    Returns:
        List[ProbeResult]: All results in arrival order.

    Raises:
        IncompleteRunError: If the stream ended with a different count.
    """
    results = list(stream)
    if len(results) != expected:
        raise IncompleteRunError(
            f"Expected {expected} results, received {len(results)}"
        )
    return results


def sort_results(results: Iterable[ProbeResult]) -> List[ProbeResult]:
    """Stable sort by (server ip, domain), ascending."""
    return sorted(results, key=lambda r: (r.server.ip, r.domain))


def _success_rate(successful: int, total: int) -> float:
    return successful / total * 100


def calculate_summary(results: Iterable[ProbeResult]) -> Summary:
    """Compute global and per-category statistics.

    Only categories that occur in the results get an entry, so every
    category total is at least 1.

    Args:
        results: Probe results of a run, in any order.

    Returns:
        Summary: Aggregated statistics. success_rate is None for an empty
            run; average_response_time covers successful results only.
    """
    total = 0
    successful = 0
    response_times: List[float] = []
    by_category: Dict[Category, List[ProbeResult]] = {}

    for result in results:
        total += 1
        by_category.setdefault(result.category, []).append(result)
        if result.success:
            successful += 1
            response_times.append(result.response_time)

    category_stats: Dict[Category, CategoryStats] = {}
    for category, cat_results in by_category.items():
        cat_total = len(cat_results)
        cat_successful = sum(1 for r in cat_results if r.success)
        category_stats[category] = CategoryStats(
            total_tests=cat_total,
            successful_tests=cat_successful,
            failed_tests=cat_total - cat_successful,
            success_rate=_success_rate(cat_successful, cat_total),
        )

    return Summary(
        total_tests=total,
        successful_tests=successful,
        failed_tests=total - successful,
        success_rate=_success_rate(successful, total) if total else None,
        average_response_time=(
            math.fsum(response_times) / successful if successful else 0.0
        ),
        category_stats=category_stats,
    )


def build_report(
    results: Iterable[ProbeResult], timestamp: datetime | None = None
) -> Report:
    """Sort results and summarize them into an immutable Report.

    Args:
        results: All results of a completed run.
        timestamp: Report timestamp; defaults to now (UTC).

    Returns:
        Report: Sorted results plus summary.
    """
    ordered = sort_results(results)
    return Report(
        timestamp=timestamp or datetime.now(timezone.utc),
        results=tuple(ordered),
        summary=calculate_summary(ordered),
    )
