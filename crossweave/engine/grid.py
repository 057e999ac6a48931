"""Grid representation and legality helpers."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..core.constants import EMPTY, Bounds, Direction


class CrosswordGrid:
    """Square letter buffer; empty cells hold ``EMPTY``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[str]] = [[EMPTY] * size for _ in range(size)]

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Clear every cell so the buffer can be reused by the next attempt."""

        for row in self.cells:
            for col in range(self.size):
                row[col] = EMPTY

    def copy(self) -> "CrosswordGrid":
        clone = CrosswordGrid(self.size)
        clone.cells = [list(row) for row in self.cells]
        return clone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] == EMPTY

    def is_open(self, row: int, col: int) -> bool:
        """True when the cell is outside the grid or holds no letter."""

        return not self.bounds.contains(row, col) or self.cells[row][col] == EMPTY

    def filled_cells(self) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value != EMPTY:
                    yield r, c

    def filled_count(self) -> int:
        return sum(1 for _ in self.filled_cells())

    def read_word(self, row: int, col: int, direction: Direction, length: int) -> str:
        dr, dc = direction.step
        return "".join(self.cells[row + dr * i][col + dc * i] for i in range(length))

    def fits(self, length: int, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        end_row = row + dr * (length - 1)
        end_col = col + dc * (length - 1)
        return self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def can_place_word(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Decide whether ``word`` may be written at ``(row, col)``.

        Occupied cells must already hold the matching letter. Empty cells
        must have empty neighbours on both sides perpendicular to the word,
        otherwise the word would run alongside another one. The cells just
        before the start and just after the end must be open so the word
        does not merge with a neighbour. Diagonal contact is allowed.
        """

        if not word or not self.fits(len(word), row, col, direction):
            return False

        dr, dc = direction.step
        pr, pc = direction.perpendicular.step
        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            existing = self.cells[r][c]
            if existing != EMPTY:
                if existing != letter:
                    return False
                continue
            if not self.is_open(r - pr, c - pc) or not self.is_open(r + pr, c + pc):
                return False

        if not self.is_open(row - dr, col - dc):
            return False
        end = len(word)
        if not self.is_open(row + dr * end, col + dc * end):
            return False
        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def write_word(self, word: str, row: int, col: int, direction: Direction) -> None:
        """Write letters without validation; callers check legality first."""

        dr, dc = direction.step
        for index, letter in enumerate(word):
            self.cells[row + dr * index][col + dc * index] = letter

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(self, empty: str = ".") -> List[str]:
        return ["".join(value or empty for value in row) for row in self.cells]

    def to_jsonable(self) -> List[List[Optional[str]]]:
        return [[value or None for value in row] for row in self.cells]
