"""A bitmask solver working from the 19 fixed tetromino templates."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from math import isqrt
from pathlib import Path
from string import ascii_uppercase
from typing import Sequence

from fillit.tester.pieces import Piece

BLOCK_SIZE = 20
MAX_PIECES = 26
EMPTY = "."


@dataclass(frozen=True)
class Template:
    """One of the 19 tetromino shapes; cells are (x, y) from the bounding box corner."""

    sid: int
    width: int
    height: int
    cells: tuple[tuple[int, int], ...]

    def mask(self, stride: int) -> int:
        """The cells as bits, row y starting at bit y * stride."""
        return sum(1 << (y * stride + x) for x, y in self.cells)


TEMPLATES: tuple[Template, ...] = (
    Template(0, 2, 3, ((1, 0), (0, 1), (1, 1), (0, 2))),
    Template(1, 3, 2, ((1, 0), (0, 1), (1, 1), (2, 1))),
    Template(2, 2, 3, ((1, 0), (1, 1), (0, 2), (1, 2))),
    Template(3, 2, 3, ((1, 0), (0, 1), (1, 1), (1, 2))),
    Template(4, 3, 2, ((1, 0), (2, 0), (0, 1), (1, 1))),
    Template(5, 2, 3, ((0, 0), (0, 1), (1, 1), (0, 2))),
    Template(6, 3, 2, ((0, 0), (1, 0), (2, 0), (1, 1))),
    Template(7, 3, 2, ((0, 0), (0, 1), (1, 1), (2, 1))),
    Template(8, 3, 2, ((0, 0), (1, 0), (1, 1), (2, 1))),
    Template(9, 1, 4, ((0, 0), (0, 1), (0, 2), (0, 3))),
    Template(10, 2, 3, ((0, 0), (1, 0), (0, 1), (0, 2))),
    Template(11, 3, 2, ((0, 0), (1, 0), (2, 0), (2, 1))),
    Template(12, 2, 3, ((0, 0), (0, 1), (0, 2), (1, 2))),
    Template(13, 2, 2, ((0, 0), (1, 0), (0, 1), (1, 1))),
    Template(14, 2, 3, ((0, 0), (1, 0), (1, 1), (1, 2))),
    Template(15, 3, 2, ((0, 0), (1, 0), (2, 0), (0, 1))),
    Template(16, 3, 2, ((2, 0), (0, 1), (1, 1), (2, 1))),
    Template(17, 2, 3, ((0, 0), (0, 1), (1, 1), (1, 2))),
    Template(18, 4, 1, ((0, 0), (1, 0), (2, 0), (3, 0))),
)


def sqrt_floor(v: int) -> int:
    """Largest i with i * i <= v."""
    if v < 0:
        raise ValueError("square root of a negative number")
    return isqrt(v)


def sqrt_ceil(v: int) -> int:
    """Smallest non-negative i with i * i >= v."""
    if v <= 0:
        return 0
    root = isqrt(v)
    return root if root * root == v else root + 1


def _rows(block: str) -> tuple[str, ...]:
    """Check the block layout and return its four rows."""
    if len(block) != BLOCK_SIZE:
        raise ValueError("a block is 20 characters long")
    rows = tuple(block[y * 5:y * 5 + 4] for y in range(4))
    if any(block[y * 5 + 4] != "\n" for y in range(4)):
        raise ValueError("each row must end with a newline")
    if any(set(row) - {".", "#"} for row in rows):
        raise ValueError("invalid character in block")
    if sum(row.count("#") for row in rows) != 4:
        raise ValueError("a block must hold exactly four '#'")
    return rows


def match_template(block: str) -> Template:
    """The template whose shape is drawn in a 20-character block."""
    rows = _rows(block)
    filled = [(x, y) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == "#"]
    left = min(x for x, _ in filled)
    top = min(y for _, y in filled)
    for template in TEMPLATES:
        if all(
            left + dx < 4 and top + dy < 4 and rows[top + dy][left + dx] == "#"
            for dx, dy in template.cells
        ):
            return template
    raise ValueError("block matches no tetromino")


def parse(text: str) -> list[Template]:
    """Read blocks separated by single newlines; a trailing partial block is ignored."""
    templates: list[Template] = []
    pos = 0
    while len(text) - pos >= BLOCK_SIZE:
        block = text[pos:pos + BLOCK_SIZE]
        rows = _rows(block)
        if Piece(rows).adj_diff() < 3:
            raise ValueError("piece is not connected")
        templates.append(match_template(block))
        end = pos + BLOCK_SIZE
        if end == len(text):
            break
        if text[end] != "\n":
            raise ValueError("pieces must be separated by an empty line")
        pos = end + 1
    if len(templates) > MAX_PIECES:
        raise ValueError("too many pieces")
    return templates


def _search(
    board: int,
    templates: Sequence[Template],
    bases: Sequence[int],
    size: int,
    index: int,
    positions: list[tuple[int, int]],
) -> bool:
    template = templates[index]
    for cy in range(size - template.height + 1):
        for cx in range(size - template.width + 1):
            placed = bases[index] << (cy * size + cx)
            if placed & board:
                continue
            if index == len(templates) - 1 or _search(
                board | placed, templates, bases, size, index + 1, positions
            ):
                positions[index] = (cx, cy)
                return True
    return False


def solve(templates: Sequence[Template]) -> list[str]:
    """Rows of the smallest square holding the pieces, lettered from 'A' in order."""
    if not templates:
        raise ValueError("no pieces to place")
    if len(templates) > MAX_PIECES:
        raise ValueError("too many pieces")
    size = sqrt_ceil(len(templates) * 4)
    while True:
        bases = [template.mask(size) for template in templates]
        positions = [(0, 0)] * len(templates)
        if _search(0, templates, bases, size, 0, positions):
            break
        size += 1
    grid = [[EMPTY] * size for _ in range(size)]
    for template, (cx, cy), letter in zip(templates, positions, ascii_uppercase):
        for dx, dy in template.cells:
            grid[cy + dy][cx + dx] = letter
    return ["".join(row) for row in grid]


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the map named on the command line, or one random piece without one."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        try:
            templates = parse(Path(args[0]).read_bytes().decode("latin-1"))
            if not templates:
                raise ValueError("no pieces in file")
        except (OSError, ValueError) as exc:
            print(f"FAILED: {exc}", file=sys.stderr)
            return 1
    else:
        templates = [random.Random().choice(TEMPLATES)]
    for row in solve(templates):
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())