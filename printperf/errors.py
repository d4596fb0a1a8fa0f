"""Exceptions raised by printperf timers."""

from __future__ import annotations


class TimerClosedError(RuntimeError):
    """A measurement was requested on a timer that has already ended."""

    def __init__(self, label: str, operation: str) -> None:
        super().__init__(f"timer '{label}' already ended; cannot {operation}()")
        self.label = label
        self.operation = operation


class DiagnosticWriteError(RuntimeError):
    """Writing a timer line to stderr failed (e.g. broken pipe)."""


__all__ = ["TimerClosedError", "DiagnosticWriteError"]
