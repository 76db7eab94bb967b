"""pytest fixtures for testing."""

import io

import pytest

from dns_check.models.dns_server import Category, DNSServer, DomainEntry
from dns_check.models.probe_result import ProbeOutcome, ProbeResult


class SimulatedProbe:
    """Probe function stand-in: succeeds only for the given server IPs."""

    def __init__(self, healthy_ips=(), response_time=0.01):
        self.healthy_ips = set(healthy_ips)
        self.response_time = response_time
        self.calls = []

    def __call__(self, server, domain, timeout):
        self.calls.append((server.ip, domain, timeout))
        if server.ip in self.healthy_ips:
            return ProbeOutcome(
                success=True,
                response_time=self.response_time,
                resolved_ip="192.0.2.10",
            )
        return ProbeOutcome(
            success=False,
            response_time=self.response_time,
            error=f"Timeout after {timeout:g}s",
        )


@pytest.fixture
def simulated_probe():
    """Factory for simulated probe functions."""
    return SimulatedProbe


@pytest.fixture
def two_servers():
    return [DNSServer("2.2.2.2", "Server B"), DNSServer("1.1.1.1", "Server A")]


@pytest.fixture
def two_general_domains():
    return [
        DomainEntry("b.com", Category.GENERAL),
        DomainEntry("a.com", Category.GENERAL),
    ]


@pytest.fixture
def mixed_domains():
    return [
        DomainEntry("google.com", Category.GENERAL),
        DomainEntry("doubleclick.net", Category.AD_SERVER),
        DomainEntry("pastebin.com", Category.OTHER),
    ]


@pytest.fixture
def progress_stream():
    return io.StringIO()


@pytest.fixture
def make_result():
    """Factory for ProbeResult objects."""

    def _make(
        ip="1.1.1.1",
        domain="example.com",
        category=Category.GENERAL,
        success=True,
        response_time=0.02,
    ):
        return ProbeResult(
            server=DNSServer(ip),
            domain=domain,
            category=category,
            success=success,
            response_time=response_time,
            resolved_ip="192.0.2.1" if success else None,
            error=None if success else "No answer received",
        )

    return _make
