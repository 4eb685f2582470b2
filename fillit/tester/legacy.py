"""Early tester: random maps on stdout, piped into one or two binaries."""

from __future__ import annotations

import random
import subprocess
import sys
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

from fillit.tester.pieces import Piece, PiecesStash

Command = Union[str, "PathLike[str]", Sequence[str]]

_USAGE = "usage: legacy [SIZE [BINARY [BINARY]]]"
_BANNER = "**********************"


def random_pieces(
    stash: PiecesStash, count: int, rng: random.Random | None = None
) -> list[Piece]:
    """count pieces, each of a uniformly drawn shape, then a uniform placement."""
    rng = rng if rng is not None else random.Random()
    return [
        rng.choice(stash.pieces_of_shape(rng.choice(stash.shapes)))
        for _ in range(count)
    ]


def dump_pieces(pieces: Sequence[Piece]) -> str:
    """Each piece's grid followed by an empty line."""
    return "".join(piece.dump() + "\n" for piece in pieces)


def _command(binary: Command) -> list[str]:
    if isinstance(binary, (str, PathLike)):
        return [str(binary)]
    return [str(part) for part in binary]


def run_binary(binary: Command, pieces: Sequence[Piece]) -> str:
    """Run a binary with the pieces on its standard input; return what it printed."""
    result = subprocess.run(
        _command(binary),
        input=dump_pieces(pieces),
        stdout=subprocess.PIPE,
        text=True,
        check=False,
    )
    return result.stdout


def compare_binaries(
    binary_a: Command, binary_b: Command, pieces: Sequence[Piece]
) -> tuple[str, str]:
    """Outputs of two binaries fed the same pieces."""
    return run_binary(binary_a, pieces), run_binary(binary_b, pieces)


def write_shape_files(
    stash: PiecesStash, directory: str | PathLike[str] = "."
) -> list[Path]:
    """Write one '<shape>.txt' per shape listing all its placements."""
    root = Path(directory)
    paths = []
    for shape in stash.shapes:
        path = root / f"{shape}.txt"
        path.write_text(dump_pieces(stash.pieces_of_shape(shape)), encoding="ascii")
        paths.append(path)
    return paths


def main(argv: Sequence[str] | None = None) -> int:
    """No argument: shape files; SIZE: print a map; with binaries: run them on it."""
    args = list(sys.argv[1:] if argv is None else argv)
    stash = PiecesStash()
    if not args:
        write_shape_files(stash, ".")
        return 0
    if len(args) > 3:
        print(_USAGE, file=sys.stderr)
        return 2
    try:
        size = int(args[0])
    except ValueError:
        print(_USAGE, file=sys.stderr)
        return 2
    pieces = random_pieces(stash, size)
    if len(args) == 1:
        sys.stdout.write(dump_pieces(pieces))
        return 0
    sys.stdout.write(f"\033[31m{_BANNER}\n{dump_pieces(pieces)}{_BANNER}\033[0m\n")
    try:
        outputs = [run_binary(binary, pieces) for binary in args[1:]]
    except OSError as exc:
        print(f"Could not run {exc.filename or args[1]}", file=sys.stderr)
        return 1
    for output in outputs:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())