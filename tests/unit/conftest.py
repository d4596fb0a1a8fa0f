import re

import pytest

import printperf.config
import printperf.timing

LINE_RE = re.compile(r"^(\d+)\.(\d{9}) \((.*)\)(?: @ (.*))?$")


class FakeClock:
    """Stand-in for time.monotonic_ns that only moves when told to."""

    def __init__(self, now: int = 5_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


def parse_lines(text: str):
    """
    Split captured stderr into (elapsed_ns, inner, origin_tag) tuples.
    inner is whatever sits between the parentheses, e.g. "work - a - lap 1".
    """
    out = []
    for line in text.splitlines():
        m = LINE_RE.match(line)
        assert m, f"unexpected timer line: {line!r}"
        secs, nanos, inner, origin = m.groups()
        out.append((int(secs) * 1_000_000_000 + int(nanos), inner, origin))
    return out


@pytest.fixture(autouse=True)
def _plain_env(monkeypatch):
    """
    Keep decoration off and the cached config fresh so captured output is plain text.
    """
    monkeypatch.delenv("PRINTPERF_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    printperf.config._config_singleton = None
    yield
    printperf.config._config_singleton = None


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(printperf.timing, "monotonic_ns", fake)
    return fake
