"""Line formatting and the single stderr write shared by every timer call.

A timer line has two halves.  The *head* carries the measurement and the
label, ``0.100140446 (add fn - end)``, and is the part that gets decorated
(bold yellow) on terminals that can show it.  The *tail* is the origin tag
``@ [src/app.py:9]`` and is always written plain.  Whether to decorate is
decided on every write by :func:`use_color`; decoration never alters the
text itself.
"""

from __future__ import annotations

import os
import sys
from typing import IO, Optional, Tuple

import typer

from .config import PerfConfig, get_config
from .errors import DiagnosticWriteError

NS_PER_S = 1_000_000_000


def format_elapsed(elapsed_ns: int) -> str:
    """Render nanoseconds as ``<seconds>.<9-digit nanoseconds>``."""

    secs, nanos = divmod(elapsed_ns, NS_PER_S)
    return f"{secs}.{nanos:09d}"


def compose(
    elapsed_ns: int,
    label: str,
    *parts: str,
    origin_tag: Optional[str] = None,
) -> Tuple[str, str]:
    """Build the (head, tail) pair for one timer line."""

    inner = " - ".join((label, *parts))
    head = f"{format_elapsed(elapsed_ns)} ({inner})"
    tail = f"@ {origin_tag}" if origin_tag is not None else ""
    return head, tail


def use_color(stream: IO[str], config: Optional[PerfConfig] = None) -> bool:
    cfg = config or get_config()
    if cfg.color == "always":
        return True
    if cfg.color == "never" or cfg.no_color:
        return False
    if os.getenv("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:  # closed stream
        return False


def emit(head: str, tail: str = "") -> None:
    """Write one timer line to the current ``sys.stderr`` and flush it.

    Raises :class:`DiagnosticWriteError` if the stream rejects the write.
    """

    stream = sys.stderr
    decorate = use_color(stream)
    if decorate:
        head = typer.style(head, fg=typer.colors.YELLOW, bold=True)
    line = f"{head} {tail}" if tail else head
    try:
        # styling was decided above; never strip the caller's own text
        typer.echo(line, file=stream, color=True)
    except OSError as exc:
        raise DiagnosticWriteError(f"failed to write timer output to stderr: {exc}") from exc


__all__ = ["NS_PER_S", "format_elapsed", "compose", "use_color", "emit"]
