"""Per-attempt placement state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from ..core.constants import Direction
from ..core.models import Placement
from .grid import CrosswordGrid


@dataclass
class AttemptResult:
    """Grid plus bookkeeping produced by a single attempt."""

    grid: CrosswordGrid
    placements: List[Placement] = field(default_factory=list)
    placed_words: Set[str] = field(default_factory=set)
    word_numbers: Dict[str, int] = field(default_factory=dict)
    next_number: int = 1

    @classmethod
    def empty(cls, size: int) -> "AttemptResult":
        return cls(grid=CrosswordGrid(size))

    @staticmethod
    def cell_key(row: int, col: int) -> str:
        return f"{row}-{col}"

    @property
    def placed_count(self) -> int:
        return len(self.placed_words)

    def reset(self) -> None:
        self.grid.reset()
        self.placements = []
        self.placed_words = set()
        self.word_numbers = {}
        self.next_number = 1

    def snapshot(self) -> "AttemptResult":
        """Detach a copy that survives the next reset of the working grid."""

        return AttemptResult(
            grid=self.grid.copy(),
            placements=list(self.placements),
            placed_words=set(self.placed_words),
            word_numbers=dict(self.word_numbers),
            next_number=self.next_number,
        )

    def number_at(self, row: int, col: int) -> Optional[int]:
        return self.word_numbers.get(self.cell_key(row, col))

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Return ``(min_row, min_col, max_row, max_col)`` over all placements."""

        if not self.placements:
            return None
        rows: List[int] = []
        cols: List[int] = []
        for placement in self.placements:
            end_row, end_col = placement.end
            rows.extend((placement.start_row, end_row))
            cols.extend((placement.start_col, end_col))
        return min(rows), min(cols), max(rows), max(cols)

    def clues(self, direction: Direction) -> List[Tuple[int, str]]:
        return sorted(
            (p.number, p.clue) for p in self.placements if p.direction == direction
        )

    def across(self) -> List[Tuple[int, str]]:
        return self.clues(Direction.ACROSS)

    def down(self) -> List[Tuple[int, str]]:
        return self.clues(Direction.DOWN)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "grid": self.grid.to_jsonable(),
            "placements": [
                {
                    "word": p.word,
                    "clue": p.clue,
                    "start": [p.start_row, p.start_col],
                    "direction": p.direction.value,
                    "number": p.number,
                }
                for p in self.placements
            ],
            "word_numbers": dict(self.word_numbers),
            "bounding_box": list(self.bounding_box() or ()),
        }
