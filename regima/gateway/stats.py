"""In-memory request statistics for the gateway."""
from __future__ import annotations

import threading
from typing import Dict


class RequestStats:
    """Counts requests overall, per logical service, and failed responses."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.total = 0
        self.errors = 0
        self.by_service: Dict[str, int] = {}

    def record_request(self) -> None:
        with self._lock:
            self.total += 1

    def record_response(self, status_code: int) -> None:
        if status_code >= 400:
            with self._lock:
                self.errors += 1

    def update_service(self, service_name: str) -> None:
        with self._lock:
            self.by_service[service_name] = self.by_service.get(service_name, 0) + 1

    def error_rate(self) -> float:
        with self._lock:
            return self.errors / self.total if self.total > 0 else 0

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "total": self.total,
                "byService": dict(self.by_service),
                "errors": self.errors,
            }

    def reset(self) -> None:
        with self._lock:
            self.total = 0
            self.errors = 0
            self.by_service = {}
