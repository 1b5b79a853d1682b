"""
In-memory exchange rate cache for FX Rate Service.
"""

import threading


class ExchangeRateCache:
    """Latest known exchange rate, shared between the fetcher and the metrics route.

    The fetcher is the only writer. Reads and writes are serialized by a lock so
    a reader sees either the previous or the new value.
    """

    def __init__(self, value: float = 0.0):
        self._value = float(value)
        self._lock = threading.Lock()

    def get(self) -> float:
        """Return the current rate."""
        with self._lock:
            return self._value

    def set(self, value: float) -> None:
        """Replace the current rate."""
        with self._lock:
            self._value = float(value)
