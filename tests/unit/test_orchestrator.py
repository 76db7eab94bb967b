"""Unit tests for run orchestration."""

import threading
import time
from unittest.mock import patch

import pytest

from dns_check.models.dns_server import Category, DNSServer, DomainEntry
from dns_check.models.probe_result import ProbeOutcome
from dns_check.services.aggregator import IncompleteRunError
from dns_check.services.orchestrator import DNSCheckRun, RunState, run_dns_tests


def alive_run_threads():
    return [
        t
        for t in threading.enumerate()
        if t.name.startswith("dns-check-") and t.is_alive()
    ]


class TestDNSCheckRun:
    """Test DNSCheckRun lifecycle."""

    def test_initial_state(self, two_servers, two_general_domains, simulated_probe):
        run = DNSCheckRun(two_servers, two_general_domains, timeout=1, workers=2, probe=simulated_probe())

        assert run.state is RunState.IDLE
        assert run.total_jobs == 4
        assert run.report is None

    def test_run_reaches_done(self, two_servers, two_general_domains, simulated_probe, progress_stream):
        run = DNSCheckRun(
            two_servers,
            two_general_domains,
            timeout=1,
            workers=2,
            probe=simulated_probe(healthy_ips={"1.1.1.1"}),
            progress_stream=progress_stream,
        )

        report = run.run()

        assert run.state is RunState.DONE
        assert run.report is report
        assert run.counter.load() == 4

    def test_run_only_once(self, two_servers, two_general_domains, simulated_probe, progress_stream):
        run = DNSCheckRun(
            two_servers,
            two_general_domains,
            timeout=1,
            workers=2,
            probe=simulated_probe(),
            progress_stream=progress_stream,
        )
        run.run()

        with pytest.raises(RuntimeError, match="already started"):
            run.run()

    def test_state_sequence(self, two_servers, two_general_domains, simulated_probe):
        run = DNSCheckRun(
            two_servers, two_general_domains, timeout=1, workers=2,
            probe=simulated_probe(), show_progress=False,
        )
        seen = []
        real_transition = run._transition

        def record(state):
            seen.append(state)
            real_transition(state)

        run._transition = record
        run.run()

        assert seen == [
            RunState.DISPATCHING,
            RunState.PROBING,
            RunState.DRAINING,
            RunState.DONE,
        ]

    def test_monitor_stopped_when_collection_fails(
        self, two_servers, two_general_domains, simulated_probe, progress_stream
    ):
        run = DNSCheckRun(
            two_servers,
            two_general_domains,
            timeout=1,
            workers=2,
            probe=simulated_probe(),
            progress_stream=progress_stream,
        )

        with patch(
            "dns_check.services.orchestrator.collect_results",
            side_effect=IncompleteRunError("Expected 4 results, received 3"),
        ):
            with pytest.raises(IncompleteRunError):
                run.run()

        # The monitor wrote its final line and exited
        assert progress_stream.getvalue().endswith("\n")
        assert run.state is RunState.PROBING
        assert alive_run_threads() == []

    def test_interrupt_cancels_remaining_jobs(self, progress_stream):
        calls = []

        def slow_probe(server, domain, timeout):
            calls.append((server.ip, domain))
            time.sleep(0.02)
            return ProbeOutcome(success=True, response_time=0.02, resolved_ip="192.0.2.1")

        def interrupted_collect(stream, expected):
            next(stream)
            raise KeyboardInterrupt

        servers = [DNSServer(f"10.0.0.{i}") for i in range(10)]
        domains = [DomainEntry(f"d{i}.com") for i in range(10)]
        run = DNSCheckRun(
            servers, domains, timeout=1, workers=2, probe=slow_probe,
            progress_stream=progress_stream,
        )

        with patch(
            "dns_check.services.orchestrator.collect_results",
            side_effect=interrupted_collect,
        ):
            with pytest.raises(KeyboardInterrupt):
                run.run()

        assert len(calls) < 10
        assert run.counter.load() == len(calls)
        assert run.report is None
        assert alive_run_threads() == []


class TestRunDNSTests:
    """Test run_dns_tests() end to end with a simulated probe."""

    def test_two_by_two_scenario(self, two_servers, two_general_domains, simulated_probe, progress_stream):
        """Server A succeeds on both domains, server B fails on both."""
        report = run_dns_tests(
            two_servers,
            two_general_domains,
            timeout=1,
            workers=4,
            probe=simulated_probe(healthy_ips={"1.1.1.1"}),
            progress_stream=progress_stream,
        )

        summary = report.summary
        assert summary.total_tests == 4
        assert summary.successful_tests == 2
        assert summary.failed_tests == 2
        assert summary.success_rate == 50.0
        assert set(summary.category_stats) == {Category.GENERAL}
        general = summary.category_stats[Category.GENERAL]
        assert general.total_tests == 4
        assert general.successful_tests == 2
        assert general.failed_tests == 2
        assert general.success_rate == 50.0

    def test_results_sorted_regardless_of_completion(self, two_servers, two_general_domains, simulated_probe):
        report = run_dns_tests(
            two_servers,
            two_general_domains,
            timeout=1,
            workers=4,
            probe=simulated_probe(),
            show_progress=False,
        )

        assert [(r.server.ip, r.domain) for r in report.results] == [
            ("1.1.1.1", "a.com"),
            ("1.1.1.1", "b.com"),
            ("2.2.2.2", "a.com"),
            ("2.2.2.2", "b.com"),
        ]

    def test_zero_domains(self, simulated_probe, progress_stream):
        """Test 3 servers x 0 domains completes immediately."""
        servers = [DNSServer("1.1.1.1"), DNSServer("8.8.8.8"), DNSServer("9.9.9.9")]

        report = run_dns_tests(
            servers, [], timeout=1, workers=2, probe=simulated_probe(), progress_stream=progress_stream
        )

        assert report.results == ()
        assert report.summary.total_tests == 0
        assert report.summary.success_rate is None
        assert report.summary.category_stats == {}
        assert "0/0 (100.0%)" in progress_stream.getvalue()

    def test_single_worker(self, mixed_domains, simulated_probe):
        servers = [DNSServer("1.1.1.1"), DNSServer("8.8.8.8")]

        report = run_dns_tests(
            servers, mixed_domains, timeout=1, workers=1, probe=simulated_probe(), show_progress=False
        )

        assert report.summary.total_tests == 6

    def test_categories_preserved(self, simulated_probe):
        domains = [
            DomainEntry("google.com", Category.GENERAL),
            DomainEntry("google-analytics.com", Category.AD_SERVER),
        ]

        report = run_dns_tests(
            [DNSServer("1.1.1.1")], domains, timeout=1, workers=2,
            probe=simulated_probe(), show_progress=False,
        )

        assert {r.domain: r.category for r in report.results} == {
            "google.com": Category.GENERAL,
            "google-analytics.com": Category.AD_SERVER,
        }
