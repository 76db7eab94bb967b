"""Address and domain name utilities for DNS probes."""

import ipaddress


def is_valid_ip(ip: str) -> bool:
    """Validate if string is a valid IPv4 or IPv6 address.

    Args:
        ip: IP address string to validate.

    Returns:
        bool: True if valid, False otherwise.

    Examples:
        >>> is_valid_ip("203.0.113.45")
        True
        >>> is_valid_ip("2606:4700:4700::1111")
        True
        >>> is_valid_ip("256.0.0.1")
        False
    """
    try:
        ipaddress.ip_address(ip)
        return True
    except ValueError:
        return False


def to_fqdn(domain: str) -> str:
    """Return the domain as a fully qualified name with a trailing dot.

    Args:
        domain: Domain name, with or without trailing dot.

    Returns:
        str: Fully qualified domain name.

    Raises:
        ValueError: If domain is empty.

    Examples:
        >>> to_fqdn("example.com")
        'example.com.'
        >>> to_fqdn("example.com.")
        'example.com.'
    """
    domain = domain.strip()
    if not domain or domain == ".":
        raise ValueError("Domain cannot be empty")

    if domain.endswith("."):
        return domain
    return f"{domain}."
