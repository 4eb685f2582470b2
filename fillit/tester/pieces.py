"""Tetromino grids and the catalogue of every valid placement in a 4x4 block."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable

SIDE = 4
NUM_SHAPES = 19
NUM_VALID_UIDS = 113
_UINT_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Piece:
    """A 4x4 grid of '.' and '#' rows."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.rows) != SIDE or any(
            len(row) != SIDE or set(row) - {".", "#"} for row in self.rows
        ):
            raise ValueError("a piece is four rows of four '.' or '#' characters")

    @classmethod
    def from_cells(cls, cells: Iterable[tuple[int, int]]) -> "Piece":
        """Build a grid with '#' at the given (row, col) cells."""
        filled = set(cells)
        return cls(
            tuple(
                "".join("#" if (y, x) in filled else "." for x in range(SIDE))
                for y in range(SIDE)
            )
        )

    def _filled(self) -> list[tuple[int, int]]:
        return [
            (y, x)
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
            if ch == "#"
        ]

    def adj_diff(self) -> int:
        """Number of pairs of adjacent '#' cells; tells valid pieces apart."""
        horizontal = sum(
            a == "#" and b == "#"
            for row in self.rows
            for a, b in zip(row, row[1:])
        )
        vertical = sum(
            a == "#" and b == "#"
            for upper, lower in zip(self.rows, self.rows[1:])
            for a, b in zip(upper, lower)
        )
        return horizontal + vertical

    def shape(self) -> int:
        """Hash of the cells relative to the first one; equal for translates."""
        filled = self._filled()
        if not filled:
            return 0
        first_y, first_x = filled[0]
        value = 0
        pos = 0
        for y, x in filled[1:]:
            value += (x - first_x + 2) << (4 * pos)
            value += (y - first_y + 2) << (4 * (pos + 1))
            pos += 2
        return value & _UINT_MASK

    def uid(self) -> int:
        """The 16 cells read row by row as bits, '#' being 1."""
        bits = "".join("1" if ch == "#" else "0" for row in self.rows for ch in row)
        return int(bits, 2)

    def dump(self) -> str:
        """The grid as it appears in a map file, each row newline-terminated."""
        return "".join(row + "\n" for row in self.rows)


class PiecesStash:
    """Every placement of a tetromino inside a 4x4 block, indexed by uid and shape."""

    def __init__(self) -> None:
        pieces: dict[int, Piece] = {}
        entries: list[tuple[int, int]] = []
        for chosen in combinations(range(SIDE * SIDE), 4):
            piece = Piece.from_cells(divmod(index, SIDE) for index in chosen)
            if piece.adj_diff() >= 3:
                uid = piece.uid()
                pieces[uid] = piece
                entries.append((piece.shape(), uid))
        # Ordered by shape, keeping generation order among equal shapes.
        entries.sort(key=lambda entry: entry[0])
        self.pieces: dict[int, Piece] = pieces
        self.entries: tuple[tuple[int, int], ...] = tuple(entries)
        self.shapes: tuple[int, ...] = tuple(sorted({shape for shape, _ in entries}))
        by_shape: dict[int, list[int]] = {}
        for shape, uid in self.entries:
            by_shape.setdefault(shape, []).append(uid)
        self._by_shape = {shape: tuple(uids) for shape, uids in by_shape.items()}

    def __len__(self) -> int:
        return len(self.pieces)

    def pieces_of_shape(self, shape: int) -> tuple[Piece, ...]:
        """All placements of one shape; KeyError for an unknown shape."""
        return tuple(self.pieces[uid] for uid in self._by_shape[shape])