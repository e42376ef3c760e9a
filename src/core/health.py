"""Last-observed upstream health, kept for diagnostics only."""

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class HealthSnapshot:
    healthy: Optional[bool] = None
    last_check: Optional[datetime] = None
    last_error: Optional[str] = None


class HealthMonitor:
    """
    Thread-safe cell holding the outcome of the most recent upstream call.

    Writers race freely and the last write wins. Nothing reads this to make
    control decisions; it only feeds the health endpoint.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = HealthSnapshot()

    def record_success(self) -> None:
        with self._lock:
            self._snapshot = HealthSnapshot(healthy=True, last_check=datetime.now(timezone.utc))

    def record_failure(self, error: str) -> None:
        with self._lock:
            self._snapshot = HealthSnapshot(
                healthy=False,
                last_check=datetime.now(timezone.utc),
                last_error=error,
            )

    def snapshot(self) -> HealthSnapshot:
        with self._lock:
            return self._snapshot

    def reset(self) -> None:
        with self._lock:
            self._snapshot = HealthSnapshot()


_health_monitor = HealthMonitor()


def get_health_monitor() -> HealthMonitor:
    """Get the process-wide health monitor."""
    return _health_monitor
