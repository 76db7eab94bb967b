"""Unit tests for ReportRenderer and write_output."""

import json
from datetime import datetime, timezone

import pytest
import yaml

from dns_check.models.dns_server import Category, DNSServer
from dns_check.models.probe_result import ProbeResult
from dns_check.services.aggregator import build_report
from dns_check.services.report_renderer import (
    ReportRenderer,
    format_rate,
    write_output,
)


TIMESTAMP = datetime(2025, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_report():
    cloudflare = DNSServer("1.1.1.1", "Cloudflare")
    broken = DNSServer("10.255.255.1")
    results = [
        ProbeResult(cloudflare, "google.com", Category.GENERAL, True, 0.012, resolved_ip="142.250.0.1"),
        ProbeResult(cloudflare, "doubleclick.net", Category.AD_SERVER, True, 0.020, resolved_ip="142.250.0.2"),
        ProbeResult(broken, "google.com", Category.GENERAL, False, 2.0, error="Timeout after 2s"),
        ProbeResult(broken, "doubleclick.net", Category.AD_SERVER, False, 2.0, error="Timeout after 2s"),
    ]
    return build_report(results, timestamp=TIMESTAMP)


def test_format_rate():
    assert format_rate(50.0) == "50.00%"
    assert format_rate(100) == "100.00%"
    assert format_rate(None) == "n/a"


class TestTextReport:
    """Test generate_text_report()."""

    def test_header_and_summary(self, sample_report):
        text = ReportRenderer.generate_text_report(sample_report)

        assert text.startswith("DNS Check Results\n=================\nTimestamp: 2025-03-01 09:30:00\n")
        assert "  Total Tests: 4" in text
        assert "  Successful: 2" in text
        assert "  Failed: 2" in text
        assert "  Overall Success Rate: 50.00%" in text
        assert "  Average Response Time: 16ms" in text
        assert "    General     : 50.00% (1/2)" in text
        assert "    Ad-server   : 50.00% (1/2)" in text

    def test_summary_repeated_at_end(self, sample_report):
        text = ReportRenderer.generate_text_report(sample_report)

        assert text.count("Summary:") == 2

    def test_server_sections(self, sample_report):
        text = ReportRenderer.generate_text_report(sample_report)

        assert "DNS Server: 1.1.1.1 (Cloudflare)" in text
        assert "DNS Server: 10.255.255.1" in text
        assert "    google.com             [  OK]     12ms 142.250.0.1" in text
        assert "    google.com             [FAIL]   2000ms Timeout after 2s" in text
        assert "  Overall Success Rate: 100.00% (2/2)" in text
        assert "  Overall Success Rate: 0.00% (0/2)" in text

    def test_categories_in_display_order(self, sample_report):
        text = ReportRenderer.generate_text_report(sample_report)
        section = text.split("DNS Server: 1.1.1.1 (Cloudflare)")[1]

        assert section.index("  General:") < section.index("  Ad-server:")

    def test_empty_report(self):
        text = ReportRenderer.generate_text_report(build_report([], timestamp=TIMESTAMP))

        assert "  Total Tests: 0" in text
        assert "  Overall Success Rate: n/a" in text
        assert "DNS Server:" not in text


class TestStructuredReports:
    """Test JSON and YAML outputs."""

    def test_json_report(self, sample_report):
        data = json.loads(ReportRenderer.generate_json_report(sample_report))

        assert data["timestamp"] == "2025-03-01T09:30:00+00:00"
        assert data["summary"]["success_rate"] == 50.0
        assert data["results"][0]["server"] == {"ip": "1.1.1.1", "description": "Cloudflare"}
        assert data["results"][0]["domain"] == "doubleclick.net"

    def test_json_keys_sorted(self, sample_report):
        output = ReportRenderer.generate_json_report(sample_report)

        assert output.index('"results"') < output.index('"summary"') < output.index('"timestamp"')

    def test_yaml_matches_json(self, sample_report):
        from_yaml = yaml.safe_load(ReportRenderer.generate_yaml_report(sample_report))
        from_json = json.loads(ReportRenderer.generate_json_report(sample_report))

        assert from_yaml == from_json


class TestRender:
    """Test render() dispatch."""

    @pytest.mark.parametrize("fmt", ["text", "json", "yaml"])
    def test_supported_formats(self, sample_report, fmt):
        assert ReportRenderer.render(sample_report, fmt)

    def test_unsupported_format(self, sample_report):
        with pytest.raises(ValueError, match="Unsupported format: xml"):
            ReportRenderer.render(sample_report, "xml")


class TestWriteOutput:
    """Test write_output()."""

    def test_writes_file(self, tmp_path):
        path = tmp_path / "results.txt"

        write_output("hello", path)

        assert path.read_text(encoding="utf-8") == "hello\n"

    def test_writes_stdout(self, capsys):
        write_output("hello\n")

        assert capsys.readouterr().out == "hello\n"

    def test_unwritable_destination_raises(self, tmp_path):
        with pytest.raises(OSError):
            write_output("hello", tmp_path / "missing" / "results.txt")
