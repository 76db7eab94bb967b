"""Periodic progress bar rendering for a running test."""

import sys
import threading
import time
from typing import Callable, TextIO

from dns_check.utils.completion_counter import CompletionCounter


DEFAULT_INTERVAL = 0.1  # seconds between samples
BAR_WIDTH = 40


def format_duration(seconds: float) -> str:
    """Format a duration compactly.

    Examples:
        >>> format_duration(12.34)
        '12.3s'
        >>> format_duration(125)
        '2m5s'
    """
    seconds = max(0.0, seconds)
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m{secs}s"


def estimate_remaining(completed: int, total: int, elapsed: float) -> float | None:
    """Estimate time to completion from the average time per finished job.

    Returns:
        float | None: Seconds remaining, or None while nothing has completed.
    """
    if completed <= 0:
        return None
    return (elapsed / completed) * max(total - completed, 0)


def render_progress(
    completed: int, total: int, elapsed: float, width: int = BAR_WIDTH
) -> str:
    """Render one progress line.

    A run with zero total jobs is rendered as complete.

    Args:
        completed: Jobs finished so far.
        total: Total jobs in the run.
        elapsed: Seconds since the run started.
        width: Bar width in characters.

    Returns:
        str: e.g. "[████░░░░] 2/4 (50.0%) | Elapsed: 1.0s | ETA: 1.0s"
    """
    fraction = 1.0 if total == 0 else min(completed / total, 1.0)
    filled = int(fraction * width)
    bar = "█" * filled + "░" * (width - filled)

    eta = estimate_remaining(completed, total, elapsed)
    eta_str = format_duration(eta) if eta is not None else "--"

    return (
        f"[{bar}] {completed}/{total} ({fraction * 100:.1f}%) | "
        f"Elapsed: {format_duration(elapsed)} | ETA: {eta_str}"
    )


class ProgressMonitor:
    """Samples a completion counter on a timer and redraws a progress line.

    The monitor runs on its own daemon thread and never touches job
    execution. stop() joins the thread and writes one final line, so no tick
    can render after it.

    Example:
        >>> with ProgressMonitor(counter, total=100):
        ...     run_jobs()
    """

    def __init__(
        self,
        counter: CompletionCounter,
        total: int,
        interval: float = DEFAULT_INTERVAL,
        stream: TextIO | None = None,
        width: int = BAR_WIDTH,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._counter = counter
        self._total = total
        self._interval = interval
        self._stream = stream if stream is not None else sys.stderr
        self._width = width
        self._clock = clock
        self._stop_event = threading.Event()
        self._render_lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._start_time: float | None = None
        self._stopped = False

    def start(self) -> None:
        """Start the sampling thread."""
        if self._thread is not None:
            raise RuntimeError("ProgressMonitor already started")

        self._start_time = self._clock()
        self._thread = threading.Thread(
            target=self._run, name="dns-check-progress", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop sampling and write the final progress line.

        Safe to call more than once; only the first call renders.
        """
        with self._render_lock:
            if self._stopped:
                return
            self._stopped = True
            self._stop_event.set()

        if self._thread is not None:
            self._thread.join()

        if self._start_time is not None:
            self._render(self._counter.load())
            self._stream.write("\n")
            self._stream.flush()

    def __enter__(self) -> "ProgressMonitor":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            with self._render_lock:
                # A tick that lost the race with stop() must not draw
                if self._stopped:
                    return
                self._render(self._counter.load())

    def _render(self, completed: int) -> None:
        elapsed = self._clock() - self._start_time  # type: ignore[operator]
        line = render_progress(completed, self._total, elapsed, self._width)
        self._stream.write("\r" + line)
        self._stream.flush()
