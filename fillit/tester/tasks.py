"""Generating map files and the paired test runs that go with them."""

from __future__ import annotations

import random
import shutil
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from string import ascii_lowercase, ascii_uppercase, digits
from typing import Sequence

from fillit.tester.combos import ComboGenerator, ExhaustiveHeap, SuperficialHSet
from fillit.tester.pieces import Piece, PiecesStash

BASE62 = digits + ascii_lowercase + ascii_uppercase
MAP_DIR = "map"
LOG_DIR = "log"
_NAME_LIMIT = 200


@dataclass
class UnitTest:
    """One run of a binary over one map file, and what came of it."""

    binary_path: str
    argv1: str
    timed_out: bool = False
    returncode: int = 0
    err: bool = False
    duration: float = 0.0
    output: str = ""


def to_base62(value: int) -> str:
    """Write a non-negative integer with the digits 0-9, a-z, A-Z."""
    if value < 0:
        raise ValueError("value must not be negative")
    if value == 0:
        return "0"
    chars = []
    while value:
        value, rest = divmod(value, 62)
        chars.append(BASE62[rest])
    return "".join(reversed(chars))


def map_filename(pieces: Sequence[Piece]) -> str:
    """Relative path of the map file holding these pieces."""
    name = "./map/" + "".join(to_base62(piece.uid()) + "_" for piece in pieces)
    if len(name) > _NAME_LIMIT:
        name = name[:_NAME_LIMIT] + "..."
    return name + ".fillit"


def choose_generator(
    stash: PiecesStash,
    npcs: int,
    ntests: int,
    rng: random.Random | None = None,
) -> tuple[ComboGenerator, int]:
    """Pick a generator for the request and the number of maps it can give.

    When more than half of all combinations are wanted, every combination is
    enumerated; otherwise random draws are remembered to avoid repeats.
    """
    max_tests = len(stash) ** npcs
    count = min(ntests, max_tests)
    if count * 2 > max_tests:
        generator: ComboGenerator = ExhaustiveHeap(stash, npcs, rng)
    else:
        generator = SuperficialHSet(stash, npcs, rng)
    return generator, count


def build_tasks(
    binary_a: str,
    binary_b: str,
    npcs: int,
    ntests: int,
    workdir: str | PathLike[str] = ".",
    rng: random.Random | None = None,
) -> list[UnitTest]:
    """Recreate the map and log directories, write the maps, pair up the runs."""
    if npcs < 0:
        raise ValueError(f"Bad grids per tests {npcs}")
    if ntests <= 0:
        raise ValueError(f"Bad num tests {ntests}")
    root = Path(workdir)
    for sub in (MAP_DIR, LOG_DIR):
        shutil.rmtree(root / sub, ignore_errors=True)
        (root / sub).mkdir(parents=True, exist_ok=True)
    generator, count = choose_generator(PiecesStash(), npcs, ntests, rng)
    tasks: list[UnitTest] = []
    for _ in range(count):
        pieces = generator.next_combo()
        path = root / map_filename(pieces)
        path.write_text(
            "\n".join(piece.dump() for piece in pieces),
            encoding="ascii",
            newline="",
        )
        tasks.append(UnitTest(binary_a, str(path)))
        tasks.append(UnitTest(binary_b, str(path)))
    return tasks