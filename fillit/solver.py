"""Fitting tetrominoes into the smallest square."""

from __future__ import annotations

import sys
from typing import Sequence

from fillit.parser import FillitError, Tetromino, load_file

EMPTY = "."
USAGE = "usage: fillit <FILE_MAP>"


def minimal_size(count: int) -> int:
    """Smallest square side (at least 2) with room for count pieces."""
    size = 2
    while size * size < count * 4:
        size += 1
    return size


def _place(grid: list[list[str]], pieces: Sequence[Tetromino], index: int) -> bool:
    if index == len(pieces):
        return True
    size = len(grid)
    piece = pieces[index]
    for row in range(size - piece.height + 1):
        for col in range(size - piece.width + 1):
            cells = [(row + dr, col + dc) for dr, dc in piece.cells]
            if all(grid[y][x] == EMPTY for y, x in cells):
                for y, x in cells:
                    grid[y][x] = piece.letter
                if _place(grid, pieces, index + 1):
                    return True
                for y, x in cells:
                    grid[y][x] = EMPTY
    return False


def solve(pieces: Sequence[Tetromino]) -> list[list[str]]:
    """Place pieces in order, first fit row by row, in the smallest square."""
    size = max(
        [minimal_size(len(pieces))]
        + [max(p.width, p.height) for p in pieces]
    )
    while True:
        grid = [[EMPTY] * size for _ in range(size)]
        if _place(grid, pieces, 0):
            return grid
        size += 1


def render(grid: Sequence[Sequence[str]]) -> str:
    """Text of a grid, one line per row."""
    return "".join("".join(row) + "\n" for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the map file named on the command line and print the square."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        pieces = load_file(args[0])
    except OSError:
        print(USAGE)
        return 0
    except FillitError:
        print("error")
        return 0
    sys.stdout.write(render(solve(pieces)))
    return 0


if __name__ == "__main__":
    sys.exit(main())