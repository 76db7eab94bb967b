"""Aggregated statistics and report models.

This module provides the immutable data structures produced at the end of a
run and handed to the renderers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Tuple

from dns_check.models.dns_server import CATEGORY_ORDER, Category
from dns_check.models.probe_result import ProbeResult


@dataclass(frozen=True)
class CategoryStats:
    """Success statistics for one category.

    Attributes:
        total_tests: Number of results in the category.
        successful_tests: Number of successful results.
        failed_tests: Number of failed results.
        success_rate: successful_tests / total_tests * 100.

    Invariants:
        - total_tests = successful_tests + failed_tests
        - total_tests >= 1 (categories without results are never built)
    """

    total_tests: int
    successful_tests: int
    failed_tests: int
    success_rate: float

    def to_json(self) -> dict:
        return {
            "total_tests": self.total_tests,
            "successful_tests": self.successful_tests,
            "failed_tests": self.failed_tests,
            "success_rate": self.success_rate,
        }


@dataclass(frozen=True)
class Summary:
    """Global statistics for a run.

    Attributes:
        total_tests: Number of results.
        successful_tests: Number of successful results.
        failed_tests: Number of failed results.
        success_rate: Percentage of successful results, None when there
            are no results.
        average_response_time: Mean response time in seconds over successful
            results only, 0.0 when there are none.
        category_stats: Stats per category observed in the results.

    Invariants:
        - sum(s.total_tests for s in category_stats.values()) == total_tests
    """

    total_tests: int
    successful_tests: int
    failed_tests: int
    success_rate: float | None
    average_response_time: float
    category_stats: Mapping[Category, CategoryStats] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view so the frozen summary cannot be edited in place
        object.__setattr__(
            self, "category_stats", MappingProxyType(dict(self.category_stats))
        )

    def ordered_categories(self) -> list[tuple[Category, CategoryStats]]:
        """Return (category, stats) pairs in display order."""
        return [
            (category, self.category_stats[category])
            for category in CATEGORY_ORDER
            if category in self.category_stats
        ]

    def to_json(self) -> dict:
        data = {
            "total_tests": self.total_tests,
            "successful_tests": self.successful_tests,
            "failed_tests": self.failed_tests,
            "average_response_time_ms": round(self.average_response_time * 1000, 3),
            "category_stats": {
                category.value: stats.to_json()
                for category, stats in self.ordered_categories()
            },
        }
        if self.success_rate is not None:
            data["success_rate"] = self.success_rate
        return data


@dataclass(frozen=True)
class Report:
    """Final immutable artifact of one run.

    Attributes:
        timestamp: When the report was produced (UTC).
        results: All probe results sorted by (server ip, domain).
        summary: Global and per-category statistics.
    """

    timestamp: datetime
    results: Tuple[ProbeResult, ...]
    summary: Summary

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: JSON-serializable representation matching report-schema.json.
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "results": [r.to_json() for r in self.results],
            "summary": self.summary.to_json(),
        }
