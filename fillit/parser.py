"""Reading and validating fillit map files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from string import ascii_uppercase

BLOCK_SIZE = 20
BLOCK_STRIDE = BLOCK_SIZE + 1
MAX_PIECES = 26
_ALLOWED = frozenset(".#\n")


class FillitError(ValueError):
    """Raised when a map file is malformed."""


@dataclass(frozen=True)
class Tetromino:
    """A lettered piece; cells are (row, col) offsets from its top-left corner."""

    letter: str
    cells: tuple[tuple[int, int], ...]

    @classmethod
    def from_block(cls, block: str, letter: str) -> "Tetromino":
        """Build a piece from a validated 20-character block."""
        grid = [ch for ch in block if ch != "\n"]
        raw = [divmod(index, 4) for index, ch in enumerate(grid) if ch == "#"]
        top = min(row for row, _ in raw)
        left = min(col for _, col in raw)
        cells = tuple(sorted((row - top, col - left) for row, col in raw))
        return cls(letter, cells)

    @property
    def width(self) -> int:
        return max(col for _, col in self.cells) + 1

    @property
    def height(self) -> int:
        return max(row for row, _ in self.cells) + 1


def _links(block: str) -> int:
    """Count '#' neighbours (both directions) inside the block."""
    total = 0
    for index, ch in enumerate(block):
        if ch != "#":
            continue
        for step in (1, -1, 5, -5):
            other = index + step
            if 0 <= other < len(block) and block[other] == "#":
                total += 1
    return total


def is_valid_block(block: str) -> bool:
    """Tell whether a 20-character block holds exactly one connected tetromino."""
    block = block[:BLOCK_SIZE]
    if (
        block.count("#") != 4
        or block.count(".") != 12
        or block.count("\n") != 4
    ):
        return False
    return _links(block) in (6, 8)


def _check_layout(text: str) -> None:
    start = 0
    while True:
        if not is_valid_block(text[start:start + BLOCK_SIZE]):
            raise FillitError("invalid piece")
        end = start + BLOCK_SIZE - 1
        if text[end:] == "\n":
            return
        if text[end:end + 2] == "\n\n" and text[end + 2:end + 3] in (".", "#") \
                and text[end + 2:end + 3]:
            start += BLOCK_STRIDE
            continue
        raise FillitError("invalid separator between pieces")


def parse_pieces(text: str) -> list[Tetromino]:
    """Validate a map text and return its pieces lettered from 'A'."""
    if any(ch not in _ALLOWED for ch in text):
        raise FillitError("invalid character")
    lines = text.count("\n") + 1
    if lines % 5 or lines // 5 > MAX_PIECES:
        raise FillitError("invalid number of lines")
    _check_layout(text)
    count = lines // 5
    return [
        Tetromino.from_block(
            text[k * BLOCK_STRIDE:k * BLOCK_STRIDE + BLOCK_SIZE], letter
        )
        for k, letter in zip(range(count), ascii_uppercase)
    ]


def load_file(path: str | PathLike[str]) -> list[Tetromino]:
    """Read and parse a map file; OSError propagates if it cannot be opened."""
    data = Path(path).read_bytes()
    return parse_pieces(data.decode("latin-1"))