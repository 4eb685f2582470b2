"""Generators of random, never repeated combinations of pieces."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from bisect import bisect_right
from itertools import accumulate
from typing import Iterator

from fillit.tester.pieces import Piece, PiecesStash

_MEMORY_LIMIT = 2e9
_COUNTER_BYTES = 8


class CombosExhausted(LookupError):
    """Raised when every combination has already been handed out."""


class ComboGenerator(ABC):
    """Source of combinations of pieces, each returned at most once."""

    @abstractmethod
    def next_combo(self) -> list[Piece]:
        """Return a combination not returned before."""

    def __iter__(self) -> Iterator[list[Piece]]:
        while True:
            try:
                combo = self.next_combo()
            except CombosExhausted:
                return
            yield combo


class ExhaustiveHeap(ComboGenerator):
    """Uniform draws without replacement from every combination of npcs pieces.

    A tree of remaining-leaf counters is walked from the root; each level
    picks a branch with probability proportional to what is left under it.
    """

    def __init__(
        self, stash: PiecesStash, npcs: int, rng: random.Random | None = None
    ) -> None:
        width = len(stash)
        nodes = sum(width ** depth for depth in range(max(npcs, 0)))
        memory = nodes * width * 2 * _COUNTER_BYTES
        if not 0 < memory < _MEMORY_LIMIT:
            raise ValueError(f"cannot enumerate combinations of {npcs} pieces")
        self._stash = stash
        self._npcs = npcs
        self._rng = rng if rng is not None else random.Random()
        self._uids = tuple(sorted(stash.pieces))
        self._remaining = width ** npcs
        self._nodes: dict[tuple[int, ...], list[int]] = {}

    def _node(self, path: tuple[int, ...]) -> list[int]:
        counts = self._nodes.get(path)
        if counts is None:
            width = len(self._uids)
            counts = [width ** (self._npcs - len(path) - 1)] * width
            self._nodes[path] = counts
        return counts

    def next_combo(self) -> list[Piece]:
        if self._remaining == 0:
            raise CombosExhausted("all combinations were drawn")
        level_count = self._remaining
        self._remaining -= 1
        path: tuple[int, ...] = ()
        for _ in range(self._npcs):
            counts = self._node(path)
            choice = self._rng.randrange(level_count)
            branch = bisect_right(list(accumulate(counts)), choice)
            level_count = counts[branch]
            counts[branch] -= 1
            path += (branch,)
        return [self._stash.pieces[self._uids[branch]] for branch in path]


class SuperficialHSet(ComboGenerator):
    """Random combinations (uniform shape, then uniform placement) remembered in a set.

    A draw that was already handed out is advanced like an odometer over the
    shape-ordered catalogue until an unused combination is found.
    """

    def __init__(
        self, stash: PiecesStash, npcs: int, rng: random.Random | None = None
    ) -> None:
        if npcs < 0:
            raise ValueError(f"bad number of pieces {npcs}")
        self._stash = stash
        self._npcs = npcs
        self._rng = rng if rng is not None else random.Random()
        self._entries = stash.entries
        spans: dict[int, list[int]] = {}
        for index, (shape, _) in enumerate(self._entries):
            spans.setdefault(shape, []).append(index)
        self._spans = {shape: tuple(indices) for shape, indices in spans.items()}
        self._shapes = stash.shapes
        self._seen: set[tuple[int, ...]] = set()
        self._total = len(self._entries) ** npcs

    def _random_entry(self) -> int:
        shape = self._rng.choice(self._shapes)
        return self._rng.choice(self._spans[shape])

    def _advance(self, combo: list[int], origin: tuple[int, ...]) -> None:
        level = self._npcs
        while True:
            level -= 1
            combo[level] = (combo[level] + 1) % len(self._entries)
            if combo[level] != origin[level]:
                return

    def next_combo(self) -> list[Piece]:
        if len(self._seen) >= self._total:
            raise CombosExhausted("all combinations were drawn")
        origin = tuple(self._random_entry() for _ in range(self._npcs))
        combo = list(origin)
        while tuple(combo) in self._seen:
            self._advance(combo, origin)
        key = tuple(combo)
        self._seen.add(key)
        return [self._stash.pieces[self._entries[index][1]] for index in key]