"""
Print-optimisation: the timing sibling of print debugging.

    from printperf import perf

    p = perf("load config")
    cfg = load()
    p.lap("parsed")
    validate(cfg)
    p.end()

Every call writes one line to stderr.  The exact output is not stable and
should not be parsed.
"""

from .callsite import origin_tag, perf
from .errors import DiagnosticWriteError, TimerClosedError
from .timing import Perf

__all__ = ["Perf", "perf", "origin_tag", "TimerClosedError", "DiagnosticWriteError"]
