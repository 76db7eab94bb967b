"""Thread-safe completion counter shared by workers and the progress monitor."""

import threading


class CompletionCounter:
    """Monotonic counter of completed probe jobs.

    Workers call increment_and_get() once per finished job; the progress
    monitor reads it with load(). The value never decreases.
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment_and_get(self) -> int:
        """Increment by one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value
