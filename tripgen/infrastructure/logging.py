"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import threading
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """Writes JSON lines tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._local = threading.local()

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, ValueError, TypeError) as exc:
            # Last-resort fallback to avoid silent logger failures.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def _timers(self) -> dict[str, float]:
        # Step timers are per thread.
        timers = getattr(self._local, "timers", None)
        if timers is None:
            timers = self._local.timers = {}
        return timers

    def event(self, name: str, **extra: Any) -> None:
        self._emit({"event": name, **extra})

    def start(self, step: str, **extra: Any) -> None:
        self._timers()[step] = time.time()
        self._emit({"event": f"{step}_start", **extra})

    def end(self, step: str, **extra: Any) -> None:
        start = self._timers().pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": f"{step}_end", "duration_ms": duration_ms, **extra})

    def warning(self, step: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "step": step, "message": message, **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": error, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger


__all__ = ["StructuredLogger", "get_logger"]
