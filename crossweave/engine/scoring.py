"""Ranking of attempt results."""

from __future__ import annotations

from ..core.constants import DENSITY_WEIGHT, WORD_WEIGHT
from .result import AttemptResult


def density(result: AttemptResult) -> float:
    """Fraction of the placements' bounding box covered by letters."""

    box = result.bounding_box()
    if box is None:
        return 0.0
    min_row, min_col, max_row, max_col = box
    area = (max_row - min_row + 1) * (max_col - min_col + 1)
    filled = sum(
        1
        for r in range(min_row, max_row + 1)
        for c in range(min_col, max_col + 1)
        if not result.grid.is_empty(r, c)
    )
    return filled / area


def score_result(result: AttemptResult) -> float:
    # The density term never exceeds one word's weight, so word count dominates.
    return WORD_WEIGHT * len(result.placements) + DENSITY_WEIGHT * density(result)
