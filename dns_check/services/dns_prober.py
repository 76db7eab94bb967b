"""DNS prober: one A-record query against one server."""

import logging
import time

import dns.exception
import dns.message
import dns.query
import dns.rdatatype

from dns_check.models.dns_server import DNSServer
from dns_check.models.probe_result import ProbeOutcome
from dns_check.utils.ip_utils import to_fqdn


logger = logging.getLogger(__name__)

DNS_PORT = 53


def extract_a_record(response: dns.message.Message) -> str | None:
    """Return the first A record address in the answer section.

    Args:
        response: Parsed DNS response.

    Returns:
        str | None: Address of the first A record, or None if there is none.
    """
    for rrset in response.answer:
        if rrset.rdtype != dns.rdatatype.A:
            continue
        for rdata in rrset:
            return rdata.address
    return None


def probe_dns(server: DNSServer, domain: str, timeout: float) -> ProbeOutcome:
    """Query a single server for the A record of a single domain.

    Performs exactly one attempt over UDP. Never raises: every failure is
    reported as an unsuccessful ProbeOutcome with an error reason.

    Args:
        server: DNS server to query (port 53).
        domain: Domain name to resolve.
        timeout: Query timeout in seconds.

    Returns:
        ProbeOutcome: Success with the resolved address, or failure with reason.
    """
    start = time.perf_counter()
    try:
        query = dns.message.make_query(to_fqdn(domain), dns.rdatatype.A)
        response = dns.query.udp(query, server.ip, timeout=timeout, port=DNS_PORT)
    except dns.exception.Timeout:
        elapsed = time.perf_counter() - start
        return _failure(server, domain, elapsed, f"Timeout after {timeout:g}s")
    except (OSError, ValueError, dns.exception.DNSException) as e:
        # Socket errors, unparsable replies, bad names
        elapsed = time.perf_counter() - start
        return _failure(server, domain, elapsed, str(e) or type(e).__name__)

    elapsed = time.perf_counter() - start

    if not response.answer:
        return _failure(server, domain, elapsed, "No answer received")

    address = extract_a_record(response)
    if address is None:
        return _failure(server, domain, elapsed, "No A record found in response")

    return ProbeOutcome(success=True, response_time=elapsed, resolved_ip=address)


def _failure(
    server: DNSServer, domain: str, elapsed: float, reason: str
) -> ProbeOutcome:
    logger.debug(f"Probe {server.ip} -> {domain} failed: {reason}")
    return ProbeOutcome(success=False, response_time=elapsed, error=reason)
