"""Comparing the two players' runs and writing the summary and logs."""

from __future__ import annotations

import difflib
import signal
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Sequence, TextIO

from fillit.tester.tasks import UnitTest

_MAX_LOGS = 5
_RULE = "===================================================\n"


@dataclass(frozen=True)
class PlayerStats:
    """Totals for one of the two binaries."""

    binary: str
    total: float
    average: float
    minimum: float
    maximum: float
    crashes: int
    error_outputs: int
    timeouts: int


@dataclass(frozen=True)
class ReportSummary:
    """Statistics of both players and the number of differing outputs."""

    players: tuple[PlayerStats, PlayerStats]
    diffs: int


def format_duration(seconds: float) -> str:
    """Render a duration in s, ms or us with up to six significant digits."""
    nanos = round(seconds * 1e9)
    if nanos >= 1_000_000_000:
        return f"{nanos // 1_000_000 / 1000:g}s"
    if nanos >= 1_000_000:
        return f"{nanos // 1_000 / 1000:g}ms"
    return f"{nanos / 1000:g}us"


def escape(name: str) -> str:
    """Make a string usable inside a file name."""
    return name.replace("/", "_").replace(" ", "_")


def _signal_name(returncode: int) -> str:
    signum = -returncode
    name = None
    if signum > 0:
        try:
            name = signal.strsignal(signum)
        except ValueError:
            name = None
    return name or f"Signal {signum}"


def _report_crash(test: UnitTest, logdir: Path) -> None:
    crash = _signal_name(test.returncode)
    path = logdir / f"CRASH_{escape(crash)}_{escape(test.binary_path)}.txt"
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(f"{test.binary_path}\n")
        handle.write(f"{crash}\n")
        handle.write(f'over: "{test.argv1}"\n')
        handle.write(f"ran for: {format_duration(test.duration)}\n")


def _report_diff(a: UnitTest, b: UnitTest, logdir: Path) -> None:
    path = logdir / f"DIFF_{escape(a.argv1)}.txt"
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(f'over: "{a.argv1}"\n')
        for test in (a, b):
            handle.write(_RULE)
            handle.write(f"{test.binary_path} output:\n")
            handle.write(f"ran for: {format_duration(test.duration)}\n")
            handle.write(_RULE)
            handle.write(test.output)
        handle.write(_RULE)
        handle.write("diff:\n")
        handle.write(_RULE)
        for line in difflib.unified_diff(
            a.output.splitlines(keepends=True),
            b.output.splitlines(keepends=True),
            fromfile=a.binary_path,
            tofile=b.binary_path,
        ):
            handle.write(line if line.endswith("\n") else line + "\n")


def report(
    tests: Sequence[UnitTest],
    npcs: int,
    logdir: str | PathLike[str] = "log",
    timeout: float = 1.0,
    workers: int = 1,
    out: TextIO | None = None,
) -> ReportSummary:
    """Print the comparison of paired runs and log crashes and differences."""
    if not tests or len(tests) % 2:
        raise ValueError("tests must come in a non-empty list of pairs")
    out = out if out is not None else sys.stdout
    logs = Path(logdir)
    logs.mkdir(parents=True, exist_ok=True)
    pairs = list(zip(tests[::2], tests[1::2]))
    crashes = [0, 0]
    errors = [0, 0]
    timeouts = [0, 0]
    diffs = 0
    for pair in pairs:
        for side, test in enumerate(pair):
            crashes[side] += test.err
            timeouts[side] += test.timed_out
            if test.output == "error\n":
                errors[side] += 1
        for side, test in enumerate(pair):
            if test.err and errors[side] <= _MAX_LOGS:
                _report_crash(test, logs)
        a, b = pair
        if not a.timed_out and not b.timed_out and a.output != b.output:
            diffs += 1
            if diffs <= _MAX_LOGS and not a.err and not b.err:
                _report_diff(a, b, logs)

    players = []
    for side in (0, 1):
        durations = [pair[side].duration for pair in pairs]
        total = sum(durations)
        players.append(
            PlayerStats(
                binary=pairs[0][side].binary_path,
                total=total,
                average=total / len(pairs),
                minimum=min(durations),
                maximum=max(durations),
                crashes=crashes[side],
                error_outputs=errors[side],
                timeouts=timeouts[side],
            )
        )

    print(f"{len(pairs)} map(s) of size {npcs} generated in ./map", file=out)
    print(
        f"WORK_TIMEOUT set to {format_duration(timeout)} ; "
        f"{workers} programs running in parallel",
        file=out,
    )
    print(file=out)
    for index, stats in enumerate(players):
        print(
            f"Player #{index}({stats.binary}); "
            f"{format_duration(stats.total)}(total) "
            f"{format_duration(stats.average)}(avg) "
            f"{format_duration(stats.minimum)}(min) "
            f"{format_duration(stats.maximum)}(max)",
            file=out,
        )
        print(f"{stats.crashes} crash(s)", file=out)
        print(f'{stats.error_outputs} "error\\n" output(s)', file=out)
        print(f"{stats.timeouts} time out(s)", file=out)
    print(file=out)
    print(f"\033[41m{diffs} diffs\033[0m", file=out)
    print(file=out)
    print("See ./log directory for fatal errors or diffs details", file=out)
    print("(a maximum of 5 files each are created in ./log)", file=out)
    return ReportSummary((players[0], players[1]), diffs)