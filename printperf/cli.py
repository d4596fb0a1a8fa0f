from __future__ import annotations

from time import sleep

import typer

from .callsite import perf

app = typer.Typer(add_completion=False)


def add(a: int, b: int, delay_s: float) -> int:
    sleep(delay_s)
    return a + b


@app.command()
def main(
    label: str = typer.Option("add fn", "--label", "-l", help="Timer label shown in every line"),
    sleep_ms: int = typer.Option(100, "--sleep-ms", min=0, help="Simulated work per lap, in milliseconds"),
    laps: int = typer.Option(2, "--laps", min=0, help="Number of laps before the end line"),
) -> None:
    """Time a slow add and print the lap, split and end lines to stderr."""

    delay_s = sleep_ms / 1000
    p = perf(label)
    result = 0
    for i in range(laps):
        result = add(result, i + 1, delay_s)
        p.lap(f"add {i + 1}")
    p.split("all laps done")
    p.end()

    typer.echo(f"result: {result}")


if __name__ == "__main__":
    app()
