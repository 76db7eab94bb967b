"""Loaders for line-oriented server and domain list files.

Both formats share the same rules: one entry per line, fields separated by
whitespace, blank lines and lines starting with "#" ignored.

    # servers.txt
    1.1.1.1 Cloudflare DNS
    8.8.8.8

    # domains.txt
    google.com general
    doubleclick.net ad-server
"""

import logging
from pathlib import Path
from typing import Iterator, List

from dns_check.models.dns_server import DNSServer, DomainEntry, parse_category
from dns_check.utils.ip_utils import is_valid_ip


logger = logging.getLogger(__name__)


def _iter_fields(path: str | Path) -> Iterator[list[str]]:
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            yield line.split()


def load_dns_servers_from_file(path: str | Path) -> List[DNSServer]:
    """Load DNS servers from a list file.

    Each line holds an IP address, optionally followed by a description.
    Lines with an invalid IP address are skipped with a warning.

    Args:
        path: Path to the server list file.

    Returns:
        List[DNSServer]: Servers in file order.

    Raises:
        OSError: If the file cannot be read.
    """
    servers: List[DNSServer] = []
    for fields in _iter_fields(path):
        ip = fields[0]
        if not is_valid_ip(ip):
            logger.warning(
                "Invalid IP address, skipping", extra={"ip": ip, "file": str(path)}
            )
            continue
        servers.append(DNSServer(ip=ip, description=" ".join(fields[1:])))

    logger.info(f"Loaded {len(servers)} DNS servers from {path}")
    return servers


def load_domains_from_file(path: str | Path) -> List[DomainEntry]:
    """Load test domains from a list file.

    Each line holds a domain, optionally followed by a category label
    (general, ad-server/adserver, adult, other). Missing or unknown labels
    map to Other.

    Args:
        path: Path to the domain list file.

    Returns:
        List[DomainEntry]: Domains in file order.

    Raises:
        OSError: If the file cannot be read.
    """
    domains = [
        DomainEntry(
            domain=fields[0],
            category=parse_category(fields[1] if len(fields) > 1 else None),
        )
        for fields in _iter_fields(path)
    ]

    logger.info(f"Loaded {len(domains)} domains from {path}")
    return domains
