"""Running the binaries under test, in parallel and with a time limit."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from fillit.tester.tasks import UnitTest

WORK_TIMEOUT = 1.0
_REPORT_INTERVAL = 0.25


def default_workers() -> int:
    """One worker per available processor, at least one."""
    return max(1, os.cpu_count() or 1)


def run_test(test: UnitTest, timeout: float = WORK_TIMEOUT) -> UnitTest:
    """Run one binary on its map, killing it after timeout seconds."""
    start = time.perf_counter()
    try:
        proc = subprocess.Popen(
            [test.binary_path, test.argv1],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
        )
    except OSError:
        print(f'Could not run "{test.binary_path}"', file=sys.stderr)
        test.returncode = 1
        test.duration = time.perf_counter() - start
        return test
    try:
        output, _ = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        proc.kill()
        output, _ = proc.communicate()
        test.timed_out = True
    test.duration = time.perf_counter() - start
    test.returncode = proc.returncode
    test.err = proc.returncode < 0 and not test.timed_out
    test.output = output.decode("utf-8", errors="replace")
    return test


def run_all(
    tests: Sequence[UnitTest],
    workers: int | None = None,
    timeout: float = WORK_TIMEOUT,
) -> Sequence[UnitTest]:
    """Run every test on a pool of workers, printing how many are left."""
    remaining = len(tests)
    last_report = time.monotonic()
    lock = threading.Lock()

    def job(test: UnitTest) -> UnitTest:
        nonlocal remaining, last_report
        with lock:
            remaining -= 1
            now = time.monotonic()
            if now - last_report > _REPORT_INTERVAL:
                sys.stdout.write(" " * 20 + "\r" + f"{remaining} tasks left")
                sys.stdout.flush()
                last_report = now
        return run_test(test, timeout)

    with ThreadPoolExecutor(max_workers=workers or default_workers()) as pool:
        list(pool.map(job, tests))
    return tests