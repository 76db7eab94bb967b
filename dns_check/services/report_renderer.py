"""Report rendering service for text, JSON and YAML outputs.

Converts a Report into formatted output for humans and tooling, and
writes it to its destination.
"""

import json
import sys
from pathlib import Path
from typing import Dict, List

import yaml

from dns_check.models.dns_server import CATEGORY_ORDER, Category
from dns_check.models.probe_result import ProbeResult
from dns_check.models.report import Report, Summary


OUTPUT_FORMATS = ("text", "json", "yaml")


def format_rate(rate: float | None) -> str:
    """Format a success rate percentage, "n/a" when undefined."""
    if rate is None:
        return "n/a"
    return f"{rate:.2f}%"


def _format_ms(seconds: float) -> str:
    return f"{seconds * 1000:.0f}ms"


class ReportRenderer:
    """Generates formatted reports from a completed run.

    Provides static methods for each output format.
    """

    @staticmethod
    def generate_json_report(report: Report) -> str:
        """Generate JSON-formatted report.

        Args:
            report: Completed run report.

        Returns:
            str: Pretty-printed JSON string with sorted keys for determinism.
        """
        return json.dumps(report.to_json(), indent=2, sort_keys=True, ensure_ascii=False)

    @staticmethod
    def generate_yaml_report(report: Report) -> str:
        """Generate YAML-formatted report.

        Args:
            report: Completed run report.

        Returns:
            str: YAML document with the same structure as the JSON report.
        """
        return yaml.safe_dump(
            report.to_json(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    @staticmethod
    def generate_text_report(report: Report) -> str:
        """Generate human-readable text report.

        Layout: summary, detailed results per server grouped by category,
        then the summary again.

        Example:
            DNS Check Results
            =================
            Timestamp: 2025-01-01 12:00:00

            Summary:
              Total Tests: 4
              ...

            DNS Server: 1.1.1.1 (Cloudflare)
              General:
                google.com             [  OK]    12ms 142.250.0.1
        """
        lines: List[str] = [
            "DNS Check Results",
            "=================",
            f"Timestamp: {report.timestamp.strftime('%Y-%m-%d %H:%M:%S')}",
            "",
        ]
        lines.extend(_summary_lines(report.summary))

        lines.append("Detailed Results:")
        lines.append("-----------------")

        by_server: Dict[str, List[ProbeResult]] = {}
        for result in report.results:
            by_server.setdefault(result.server.display_name(), []).append(result)

        for server_name in sorted(by_server):
            server_results = by_server[server_name]
            lines.append("")
            lines.append(f"DNS Server: {server_name}")

            by_category: Dict[Category, List[ProbeResult]] = {}
            for result in server_results:
                by_category.setdefault(result.category, []).append(result)

            server_successful = 0
            for category in CATEGORY_ORDER:
                cat_results = by_category.get(category)
                if not cat_results:
                    continue
                lines.append(f"  {category.value}:")
                cat_successful = 0
                for result in cat_results:
                    if result.success:
                        status, details = "OK", result.resolved_ip
                        cat_successful += 1
                    else:
                        status, details = "FAIL", result.error
                    lines.append(
                        f"    {result.domain:<22} [{status:>4}] "
                        f"{_format_ms(result.response_time):>8} {details or ''}".rstrip()
                    )
                server_successful += cat_successful
                rate = cat_successful / len(cat_results) * 100
                lines.append(
                    f"    {category.value} Success Rate: {format_rate(rate)} "
                    f"({cat_successful}/{len(cat_results)})"
                )
                lines.append("")

            overall = server_successful / len(server_results) * 100
            lines.append(
                f"  Overall Success Rate: {format_rate(overall)} "
                f"({server_successful}/{len(server_results)})"
            )

        lines.append("")
        lines.append("=================")
        lines.extend(_summary_lines(report.summary))
        return "\n".join(lines)

    @staticmethod
    def render(report: Report, output_format: str) -> str:
        """Render a report in the requested format.

        Raises:
            ValueError: If output_format is not text, json or yaml.
        """
        if output_format == "text":
            return ReportRenderer.generate_text_report(report)
        if output_format == "json":
            return ReportRenderer.generate_json_report(report)
        if output_format == "yaml":
            return ReportRenderer.generate_yaml_report(report)
        raise ValueError(f"Unsupported format: {output_format}")


def _summary_lines(summary: Summary) -> List[str]:
    lines = [
        "Summary:",
        f"  Total Tests: {summary.total_tests}",
        f"  Successful: {summary.successful_tests}",
        f"  Failed: {summary.failed_tests}",
        f"  Overall Success Rate: {format_rate(summary.success_rate)}",
        f"  Average Response Time: {_format_ms(summary.average_response_time)}",
        "",
        "  Category Success Rates:",
    ]
    for category, stats in summary.ordered_categories():
        lines.append(
            f"    {category.value:<12}: {format_rate(stats.success_rate)} "
            f"({stats.successful_tests}/{stats.total_tests})"
        )
    lines.append("")
    return lines


def write_output(text: str, output_file: str | Path | None = None) -> None:
    """Write rendered output to a file, or to stdout when no file is given.

    Raises:
        OSError: If the file cannot be written.
    """
    if not text.endswith("\n"):
        text += "\n"

    if output_file:
        Path(output_file).write_text(text, encoding="utf-8")
        return

    sys.stdout.write(text)
    sys.stdout.flush()
