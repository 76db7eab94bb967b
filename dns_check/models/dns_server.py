"""DNS server and domain input models."""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Fixed classification attached to a test domain."""

    GENERAL = "General"
    AD_SERVER = "Ad-server"
    OTHER = "Other"
    ADULT = "Adult"


# Display order used by renderers
CATEGORY_ORDER = (
    Category.GENERAL,
    Category.AD_SERVER,
    Category.OTHER,
    Category.ADULT,
)

_CATEGORY_ALIASES = {
    "general": Category.GENERAL,
    "ad-server": Category.AD_SERVER,
    "adserver": Category.AD_SERVER,
    "adult": Category.ADULT,
    "other": Category.OTHER,
}


def parse_category(label: str | None) -> Category:
    """Map a free-form category label to a Category.

    Args:
        label: Label as found in a domain list file (case-insensitive).

    Returns:
        Category: Matching category, or Category.OTHER when the label is
            missing or not recognized.

    Examples:
        >>> parse_category("AdServer")
        <Category.AD_SERVER: 'Ad-server'>
        >>> parse_category(None)
        <Category.OTHER: 'Other'>
    """
    if not label:
        return Category.OTHER
    return _CATEGORY_ALIASES.get(label.strip().lower(), Category.OTHER)


@dataclass(frozen=True)
class DNSServer:
    """A DNS server under test.

    Attributes:
        ip: IP literal of the server (queried on port 53).
        description: Optional human-readable label.
    """

    ip: str
    description: str = ""

    def display_name(self) -> str:
        """Return "ip (description)", or just the ip when unlabeled."""
        if self.description:
            return f"{self.ip} ({self.description})"
        return self.ip

    def to_json(self) -> dict:
        data = {"ip": self.ip}
        if self.description:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class DomainEntry:
    """A test domain together with its category."""

    domain: str
    category: Category = Category.OTHER
