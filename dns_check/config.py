"""Configuration module for DNS Check.

Loads and validates settings from environment variables; command-line flags
are applied on top with Config.with_overrides().
"""

import os
from dataclasses import dataclass, replace

from dns_check.services.report_renderer import OUTPUT_FORMATS


DEFAULT_TIMEOUT = 15.0
DEFAULT_WORKERS = 50
DEFAULT_FORMAT = "text"

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    # Probe Configuration
    timeout: float
    workers: int

    # Input Configuration
    server_list: str | None
    domain_list: str | None

    # Output Configuration
    output_format: str
    output_file: str | None

    # Operational Configuration
    show_progress: bool
    verbose: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If a variable is invalid.

        Returns:
            Config: Validated configuration instance.
        """
        timeout = cls._parse_number(
            "DNS_CHECK_TIMEOUT", os.getenv("DNS_CHECK_TIMEOUT"), float, DEFAULT_TIMEOUT
        )
        workers = cls._parse_number(
            "DNS_CHECK_WORKERS", os.getenv("DNS_CHECK_WORKERS"), int, DEFAULT_WORKERS
        )

        config = cls(
            timeout=timeout,
            workers=workers,
            server_list=os.getenv("DNS_CHECK_SERVER_LIST") or None,
            domain_list=os.getenv("DNS_CHECK_DOMAIN_LIST") or None,
            output_format=os.getenv("DNS_CHECK_FORMAT", DEFAULT_FORMAT).lower(),
            output_file=os.getenv("DNS_CHECK_OUTPUT") or None,
            show_progress=os.getenv("DNS_CHECK_PROGRESS", "true").lower()
            in _TRUE_VALUES,
            verbose=os.getenv("VERBOSE", "false").lower() in _TRUE_VALUES,
        )
        config.validate()
        return config

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with non-None overrides applied, re-validated.

        Raises:
            ValueError: If an overridden value is invalid.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        config = replace(self, **changes)
        config.validate()
        return config

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ValueError: If any value is out of range.
        """
        if not 0 < self.timeout <= 300:
            raise ValueError("DNS_CHECK_TIMEOUT must be between 0 and 300 seconds")
        if not 1 <= self.workers <= 1000:
            raise ValueError("DNS_CHECK_WORKERS must be between 1 and 1000")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"DNS_CHECK_FORMAT must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @staticmethod
    def _parse_number(key: str, value: str | None, kind: type, default):
        """Parse a numeric environment variable.

        Raises:
            ValueError: If the value is not a valid number.
        """
        if value is None or value.strip() == "":
            return default
        try:
            return kind(value)
        except ValueError:
            raise ValueError(f"{key} must be a number, got {value!r}") from None
