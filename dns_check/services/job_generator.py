"""Probe job generation."""

from typing import Iterator, Sequence

from dns_check.models.dns_server import DNSServer, DomainEntry
from dns_check.models.probe_result import ProbeJob


def generate_jobs(
    servers: Sequence[DNSServer], domains: Sequence[DomainEntry]
) -> Iterator[ProbeJob]:
    """Yield the cross product of servers and domains as probe jobs.

    Servers are the outer loop and domains the inner loop, both in input
    order. This fixes dispatch order only; results may complete in any order.

    Args:
        servers: DNS servers under test.
        domains: Test domains with their categories.

    Yields:
        ProbeJob: len(servers) * len(domains) jobs; none if either is empty.
    """
    for server in servers:
        for entry in domains:
            yield ProbeJob(server=server, entry=entry)
