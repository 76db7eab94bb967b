"""Bounded worker pool executing probe jobs concurrently."""

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable, Iterator

from dns_check.models.dns_server import DNSServer
from dns_check.models.probe_result import ProbeJob, ProbeOutcome, ProbeResult
from dns_check.utils.completion_counter import CompletionCounter


logger = logging.getLogger(__name__)

ProbeFunction = Callable[[DNSServer, str, float], ProbeOutcome]

# Queue markers
_STOP_WORKER = object()
_END_OF_RESULTS = object()


class WorkerPool:
    """Fixed-size pool of workers consuming probe jobs from a queue.

    At most `workers` probes are in flight at any time and exactly one
    ProbeResult is emitted per job consumed. Results are emitted in
    completion order; the result stream ends only after every worker has
    exited. After cancel(), jobs not yet claimed are skipped and produce no
    result.

    Example:
        >>> pool = WorkerPool(probe_dns, timeout=5, workers=10, counter=counter)
        >>> pool.start(generate_jobs(servers, domains))
        >>> results = list(pool.results())
        >>> pool.join()
    """

    def __init__(
        self,
        probe: ProbeFunction,
        timeout: float,
        workers: int,
        counter: CompletionCounter,
    ):
        """Initialize the pool.

        Args:
            probe: Probe function called as probe(server, domain, timeout).
            timeout: Per-probe timeout in seconds.
            workers: Number of concurrent workers (>= 1).
            counter: Shared completion counter, incremented once per job.

        Raises:
            ValueError: If workers < 1.
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")

        self._probe = probe
        self._timeout = timeout
        self._workers = workers
        self._counter = counter
        self._jobs: "queue.Queue[object]" = queue.Queue(maxsize=workers * 2)
        self._results: "queue.Queue[object]" = queue.Queue()
        self._cancelled = threading.Event()
        self._executor: ThreadPoolExecutor | None = None
        self._dispatcher: threading.Thread | None = None
        self._closer: threading.Thread | None = None

    @property
    def workers(self) -> int:
        return self._workers

    def start(self, jobs: Iterable[ProbeJob]) -> None:
        """Start dispatching jobs and executing them.

        Args:
            jobs: Job sequence, consumed exactly once.

        Raises:
            RuntimeError: If the pool was already started.
        """
        if self._executor is not None:
            raise RuntimeError("WorkerPool already started")

        self._executor = ThreadPoolExecutor(
            max_workers=self._workers, thread_name_prefix="dns-check-worker"
        )
        futures = [
            self._executor.submit(self._worker_loop) for _ in range(self._workers)
        ]

        self._dispatcher = threading.Thread(
            target=self._dispatch, args=(jobs,), name="dns-check-dispatcher", daemon=True
        )
        self._dispatcher.start()

        self._closer = threading.Thread(
            target=self._close_when_done,
            args=(futures,),
            name="dns-check-closer",
            daemon=True,
        )
        self._closer.start()

        logger.debug(f"Started {self._workers} workers")

    def results(self) -> Iterator[ProbeResult]:
        """Yield results as workers complete them, until all workers exit."""
        while True:
            item = self._results.get()
            if item is _END_OF_RESULTS:
                return
            yield item  # type: ignore[misc]

    def cancel(self) -> None:
        """Stop dispatching and let workers exit without probing queued jobs.

        Probes already in flight finish (bounded by the probe timeout); their
        results are still emitted. Call join() afterwards to wait for them.
        """
        if not self._cancelled.is_set():
            logger.info("Cancelling worker pool")
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def join(self) -> None:
        """Wait for the dispatcher, all workers and the closer to finish."""
        if self._dispatcher is not None:
            self._dispatcher.join()
        if self._closer is not None:
            self._closer.join()
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def _dispatch(self, jobs: Iterable[ProbeJob]) -> None:
        dispatched = 0
        try:
            for job in jobs:
                if self._cancelled.is_set():
                    break
                self._jobs.put(job)
                dispatched += 1
        finally:
            # One stop marker per worker, even if the job source failed
            for _ in range(self._workers):
                self._jobs.put(_STOP_WORKER)
            logger.debug(f"Dispatched {dispatched} jobs")

    def _worker_loop(self) -> None:
        while True:
            job = self._jobs.get()
            if job is _STOP_WORKER:
                return
            if self._cancelled.is_set():
                # Keep draining so the dispatcher and stop markers get through
                continue
            result = self._execute(job)  # type: ignore[arg-type]
            self._counter.increment_and_get()
            self._results.put(result)

    def _execute(self, job: ProbeJob) -> ProbeResult:
        try:
            outcome = self._probe(job.server, job.entry.domain, self._timeout)
        except Exception as e:
            # Unexpected error - record as a failed probe
            logger.error(
                f"Unexpected error probing {job.server.ip} for {job.entry.domain}: {e}",
                exc_info=True,
            )
            return ProbeResult.failure(job, f"Worker failed: {e}")
        return ProbeResult.from_outcome(job, outcome)

    def _close_when_done(self, futures: list) -> None:
        wait(futures)
        for future in futures:
            exc = future.exception()
            if exc is not None:
                logger.error(f"Worker exited with error: {exc}")
        # All worker loops returned; release the executor threads before
        # signalling the end of the stream
        self._executor.shutdown(wait=True)  # type: ignore[union-attr]
        self._results.put(_END_OF_RESULTS)
