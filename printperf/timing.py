from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic_ns
from typing import Optional

from .errors import TimerClosedError
from .render import compose, emit


@dataclass(eq=False)
class Perf:
    """An open timer that reports to stderr.

    You normally get one from :func:`printperf.perf`, which fills in
    ``origin_tag`` with the caller's ``[file:line]``.

    * ``split(msg)`` reports time since the timer started.
    * ``lap(msg)`` reports time since the previous lap (or the start) and
      numbers the laps from 1.
    * ``end()`` reports time since the start together with the origin tag
      and closes the timer; any later call raises :class:`TimerClosedError`.

    Each call also returns the elapsed nanoseconds it printed.
    """

    label: str
    origin_tag: str
    start_ns: int = field(init=False, default_factory=lambda: monotonic_ns())
    last_lap_ns: Optional[int] = field(init=False, default=None)
    lap_count: int = field(init=False, default=1)
    closed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.label = str(self.label)
        self.origin_tag = str(self.origin_tag)

    def split(self, msg: str) -> int:
        self._check_open("split")
        elapsed = monotonic_ns() - self.start_ns
        emit(*compose(elapsed, self.label, str(msg)))
        return elapsed

    def lap(self, msg: str) -> int:
        self._check_open("lap")
        anchor = self.start_ns if self.last_lap_ns is None else self.last_lap_ns
        elapsed = monotonic_ns() - anchor
        emit(*compose(elapsed, self.label, str(msg), f"lap {self.lap_count}"))
        # next lap measures from here, after the write
        self.last_lap_ns = monotonic_ns()
        self.lap_count += 1
        return elapsed

    def end(self) -> int:
        self._check_open("end")
        elapsed = monotonic_ns() - self.start_ns
        self.closed = True
        emit(*compose(elapsed, self.label, "end", origin_tag=self.origin_tag))
        return elapsed

    @property
    def elapsed_ns(self) -> int:
        """Nanoseconds since the start, without printing anything."""
        return monotonic_ns() - self.start_ns

    @property
    def is_open(self) -> bool:
        return not self.closed

    def _check_open(self, operation: str) -> None:
        if self.closed:
            raise TimerClosedError(self.label, operation)

    def __enter__(self) -> "Perf":
        return self

    def __exit__(self, *_exc: object) -> None:
        if not self.closed:
            self.end()


__all__ = ["Perf"]
