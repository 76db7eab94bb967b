"""Probe job and result models."""

from dataclasses import dataclass

from dns_check.models.dns_server import Category, DNSServer, DomainEntry


@dataclass(frozen=True)
class ProbeJob:
    """One unit of work: a single server paired with a single domain entry."""

    server: DNSServer
    entry: DomainEntry


@dataclass(frozen=True)
class ProbeOutcome:
    """Outcome of one resolution attempt, as returned by a probe function.

    Attributes:
        success: True if the server answered with an A record.
        response_time: Measured round-trip time in seconds.
        resolved_ip: First A record address (success only).
        error: Human-readable failure reason (failure only).
    """

    success: bool
    response_time: float
    resolved_ip: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class ProbeResult:
    """Result of a single probe job.

    Exactly one ProbeResult exists per ProbeJob; failures are recorded here
    rather than dropped.

    Attributes:
        server: Server that was queried.
        domain: Domain that was queried.
        category: Category of the originating domain entry.
        success: True if an A record was resolved.
        response_time: Measured round-trip time in seconds.
        resolved_ip: Resolved address (success only).
        error: Failure reason (failure only).
    """

    server: DNSServer
    domain: str
    category: Category
    success: bool
    response_time: float
    resolved_ip: str | None = None
    error: str | None = None

    @classmethod
    def from_outcome(cls, job: ProbeJob, outcome: ProbeOutcome) -> "ProbeResult":
        """Build the result for a job from its probe outcome.

        The category is taken from the job, never re-derived from the domain.
        """
        return cls(
            server=job.server,
            domain=job.entry.domain,
            category=job.entry.category,
            success=outcome.success,
            response_time=outcome.response_time,
            resolved_ip=outcome.resolved_ip,
            error=outcome.error,
        )

    @classmethod
    def failure(cls, job: ProbeJob, error: str, response_time: float = 0.0) -> "ProbeResult":
        """Build a failed result for a job."""
        return cls(
            server=job.server,
            domain=job.entry.domain,
            category=job.entry.category,
            success=False,
            response_time=response_time,
            error=error,
        )

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: Result with response time in milliseconds; resolved_ip and
                error are omitted when empty.
        """
        data = {
            "server": self.server.to_json(),
            "domain": self.domain,
            "category": self.category.value,
            "success": self.success,
            "response_time_ms": round(self.response_time * 1000, 3),
        }
        if self.resolved_ip:
            data["resolved_ip"] = self.resolved_ip
        if self.error:
            data["error"] = self.error
        return data
