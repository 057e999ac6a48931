"""Data models supporting the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class WordEntry:
    """A word/clue pair supplied by the caller."""

    word: str
    clue: str


@dataclass(frozen=True)
class Placement:
    """A placed word with its position and clue number."""

    word: str
    clue: str
    start_row: int
    start_col: int
    direction: Direction
    number: int

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)]

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]


@dataclass(frozen=True)
class StartPosition:
    """Anchor cell and orientation for the first word of an attempt."""

    row: int
    col: int
    direction: Direction = Direction.ACROSS


@dataclass(frozen=True)
class AttemptSeed:
    """Input that varies one attempt from another.

    Deterministic seeds carry an explicit ``word_order`` and ``start``;
    random-mode seeds carry ``word_order_seed`` (shuffle) and
    ``random_seed`` (first word orientation).
    """

    word_order: Optional[Tuple[WordEntry, ...]] = None
    start: Optional[StartPosition] = None
    random_seed: Optional[int] = None
    word_order_seed: Optional[int] = None

    @property
    def is_random(self) -> bool:
        return self.word_order_seed is not None
