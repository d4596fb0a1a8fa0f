"""Create a timer tagged with the caller's file and line."""

from __future__ import annotations

import sys
from pathlib import Path

from .timing import Perf


def _display_path(filename: str) -> str:
    """Show ``filename`` relative to the working directory when it lives below it."""
    path = Path(filename)
    try:
        return path.resolve().relative_to(Path.cwd().resolve()).as_posix()
    except (OSError, ValueError):
        return filename


def origin_tag(stacklevel: int = 1) -> str:
    """
    Return ``[file:line]`` for the frame ``stacklevel`` levels above the caller.
    stacklevel=1 describes whoever called origin_tag().
    """
    try:
        frame = sys._getframe(stacklevel)
    except ValueError:  # stack shallower than stacklevel
        return "[<unknown>]"
    return f"[{_display_path(frame.f_code.co_filename)}:{frame.f_lineno}]"


def perf(label: object, stacklevel: int = 1) -> Perf:
    """
    Start a timer labelled ``label`` and tagged with the caller's location.

        p = perf("add fn")
        result = add(4, 4)
        p.end()
        # stderr: 0.100140446 (add fn - end) @ [src/main.py:9]

    Helpers that wrap perf() can pass stacklevel=2 to tag their own caller.
    """
    return Perf(str(label), origin_tag(stacklevel + 1))


__all__ = ["origin_tag", "perf"]
