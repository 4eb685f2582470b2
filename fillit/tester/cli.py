"""Command that compares two fillit binaries over random maps."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from fillit.tester.report import report
from fillit.tester.runner import WORK_TIMEOUT, default_workers, run_all
from fillit.tester.tasks import LOG_DIR, build_tasks


def main(argv: Sequence[str] | None = None) -> int:
    """Generate maps, run both binaries on each, and report the differences."""
    parser = argparse.ArgumentParser(
        prog="fillit-tester",
        description="Run two fillit binaries over random maps and compare them.",
    )
    parser.add_argument("npcs", type=int, help="number of pieces in each map")
    parser.add_argument("ntests", type=int, help="number of maps to generate")
    parser.add_argument("binary_a", help="first binary to run")
    parser.add_argument("binary_b", help="second binary to run")
    args = parser.parse_args(argv)

    print("\rGenerating map files", end="", flush=True)
    try:
        tests = build_tasks(
            args.binary_a, args.binary_b, args.npcs, args.ntests, ".", random.Random()
        )
    except ValueError as exc:
        print(file=sys.stdout)
        print(exc, file=sys.stderr)
        return 1
    workers = default_workers()
    run_all(tests, workers, WORK_TIMEOUT)
    print("\r", end="")
    report(tests, args.npcs, LOG_DIR, WORK_TIMEOUT, workers)
    return 0


if __name__ == "__main__":
    sys.exit(main())