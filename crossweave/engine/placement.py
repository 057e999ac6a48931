"""Intersection discovery and word placement."""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import Direction
from ..core.models import Placement
from .grid import CrosswordGrid
from .result import AttemptResult


Candidate = Tuple[int, int, Direction]


def find_intersections(word_a: str, word_b: str) -> List[Tuple[int, int]]:
    """Return every ``(index_in_a, index_in_b)`` pair holding the same letter.

    Ordered by index in ``word_a`` then index in ``word_b``; attempt
    selection relies on this order being stable.
    """

    return [
        (i, j)
        for i, letter_a in enumerate(word_a)
        for j, letter_b in enumerate(word_b)
        if letter_a == letter_b
    ]


def intersection_placements(
    grid: CrosswordGrid, new_word: str, existing: Placement
) -> List[Candidate]:
    """Legal positions where ``new_word`` crosses ``existing`` perpendicularly."""

    direction = existing.direction.perpendicular
    candidates: List[Candidate] = []
    for new_index, existing_index in find_intersections(new_word, existing.word):
        if existing.direction == Direction.ACROSS:
            start_row = existing.start_row - new_index
            start_col = existing.start_col + existing_index
        else:
            start_row = existing.start_row + existing_index
            start_col = existing.start_col - new_index
        if grid.can_place_word(new_word, start_row, start_col, direction):
            candidates.append((start_row, start_col, direction))
    return candidates


def place_word(
    result: AttemptResult,
    word: str,
    clue: str,
    start_row: int,
    start_col: int,
    direction: Direction,
) -> Placement:
    """Record a placement and write its letters.

    Does not re-check legality; call :meth:`CrosswordGrid.can_place_word`
    first.
    """

    placement = Placement(
        word=word,
        clue=clue,
        start_row=start_row,
        start_col=start_col,
        direction=direction,
        number=result.next_number,
    )
    result.grid.write_word(word, start_row, start_col, direction)
    result.placements.append(placement)
    result.placed_words.add(word)
    result.word_numbers[result.cell_key(start_row, start_col)] = placement.number
    result.next_number += 1
    return placement
