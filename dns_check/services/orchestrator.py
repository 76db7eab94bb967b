"""Run orchestration: wires generator, pool, monitor and aggregator together."""

import logging
import sys
from enum import Enum
from typing import Sequence, TextIO

from dns_check.models.dns_server import DNSServer, DomainEntry
from dns_check.models.report import Report
from dns_check.services.aggregator import build_report, collect_results
from dns_check.services.dns_prober import probe_dns
from dns_check.services.job_generator import generate_jobs
from dns_check.services.progress_monitor import DEFAULT_INTERVAL, ProgressMonitor
from dns_check.services.worker_pool import ProbeFunction, WorkerPool
from dns_check.utils.completion_counter import CompletionCounter


logger = logging.getLogger(__name__)


class RunState(Enum):
    """Lifecycle of a single run."""

    IDLE = "idle"
    DISPATCHING = "dispatching"
    PROBING = "probing"
    DRAINING = "draining"
    DONE = "done"


class DNSCheckRun:
    """One test run over servers x domains.

    A run moves IDLE -> DISPATCHING -> PROBING -> DRAINING -> DONE and can be
    executed only once.

    Attributes:
        state: Current RunState.
        counter: Completion counter shared by workers and the monitor.
        total_jobs: len(servers) * len(domains).
    """

    def __init__(
        self,
        servers: Sequence[DNSServer],
        domains: Sequence[DomainEntry],
        timeout: float,
        workers: int,
        probe: ProbeFunction = probe_dns,
        progress_stream: TextIO | None = None,
        progress_interval: float = DEFAULT_INTERVAL,
        show_progress: bool = True,
    ):
        self._servers = tuple(servers)
        self._domains = tuple(domains)
        self._timeout = timeout
        self._workers = workers
        self._probe = probe
        self._progress_stream = progress_stream
        self._progress_interval = progress_interval
        self._show_progress = show_progress

        self.state = RunState.IDLE
        self.counter = CompletionCounter()
        self.total_jobs = len(self._servers) * len(self._domains)
        self.report: Report | None = None

    def _transition(self, new_state: RunState) -> None:
        logger.debug(f"Run state {self.state.value} -> {new_state.value}")
        self.state = new_state

    def run(self) -> Report:
        """Execute every probe job and return the aggregated report.

        If the run is interrupted (KeyboardInterrupt or an error while
        collecting), jobs not yet started are cancelled and in-flight probes
        are awaited before the exception propagates.

        Returns:
            Report: Sorted results and statistics.

        Raises:
            RuntimeError: If the run was already executed.
            IncompleteRunError: If the pool produced fewer or more results
                than jobs.
        """
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"Run already started (state={self.state.value})")

        monitor = None
        if self._show_progress:
            monitor = ProgressMonitor(
                self.counter,
                self.total_jobs,
                interval=self._progress_interval,
                stream=self._progress_stream or sys.stderr,
            )

        pool = WorkerPool(self._probe, self._timeout, self._workers, self.counter)

        self._transition(RunState.DISPATCHING)
        if monitor is not None:
            monitor.start()
        finished = False
        try:
            pool.start(generate_jobs(self._servers, self._domains))
            self._transition(RunState.PROBING)

            results = collect_results(pool.results(), self.total_jobs)
            self._transition(RunState.DRAINING)
            pool.join()
            finished = True
        finally:
            if not finished:
                # Interrupted or failed: skip the remaining jobs
                logger.warning(
                    "Run aborted, cancelling remaining jobs",
                    extra={"completed": self.counter.load(), "total_jobs": self.total_jobs},
                )
                pool.cancel()
                pool.join()
            if monitor is not None:
                monitor.stop()

        self.report = build_report(results)
        self._transition(RunState.DONE)
        return self.report


def run_dns_tests(
    servers: Sequence[DNSServer],
    domains: Sequence[DomainEntry],
    timeout: float,
    workers: int,
    probe: ProbeFunction = probe_dns,
    progress_stream: TextIO | None = None,
    progress_interval: float = DEFAULT_INTERVAL,
    show_progress: bool = True,
) -> Report:
    """Test every server against every domain and return the report.

    Args:
        servers: DNS servers under test.
        domains: Test domains with categories.
        timeout: Per-query timeout in seconds (> 0).
        workers: Max concurrent probes (>= 1).
        probe: Probe function, probe_dns by default.
        progress_stream: Where the progress bar is drawn (stderr by default).
        progress_interval: Seconds between progress redraws.
        show_progress: Disable to run without a progress bar.

    Returns:
        Report: Sorted results and statistics.
    """
    return DNSCheckRun(
        servers,
        domains,
        timeout=timeout,
        workers=workers,
        probe=probe,
        progress_stream=progress_stream,
        progress_interval=progress_interval,
        show_progress=show_progress,
    ).run()
