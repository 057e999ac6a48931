"""Single greedy placement attempt."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import Direction, GenerationMode
from ..core.models import AttemptSeed, StartPosition, WordEntry
from ..utils.logger import get_logger
from .placement import Candidate, find_intersections, intersection_placements, place_word
from .result import AttemptResult
from .seeds import longest_first, seeded_shuffle


LOGGER = get_logger(__name__)


def order_words(words: Sequence[WordEntry], seed: AttemptSeed) -> List[WordEntry]:
    if seed.is_random:
        return seeded_shuffle(words, seed.word_order_seed)
    if seed.word_order is not None:
        return list(seed.word_order)
    return longest_first(words)


def starting_position(seed: AttemptSeed, grid_size: int) -> Optional[StartPosition]:
    """Anchor requested by the seed; ``None`` means center the first word."""

    if seed.start is not None:
        return seed.start
    if seed.is_random:
        rng = random.Random(seed.random_seed)
        direction = Direction.ACROSS if rng.random() < 0.5 else Direction.DOWN
        center = grid_size // 2
        return StartPosition(row=center, col=center, direction=direction)
    return None


def fit_start(start: Optional[StartPosition], length: int, grid_size: int) -> StartPosition:
    """Shift the anchor back along its direction so a word of ``length`` fits."""

    if start is None:
        center = grid_size // 2
        return StartPosition(row=center, col=max(0, (grid_size - length) // 2))
    row, col = start.row, start.col
    if start.direction == Direction.ACROSS:
        col = max(0, min(col, grid_size - length))
    else:
        row = max(0, min(row, grid_size - length))
    return StartPosition(row=row, col=col, direction=start.direction)


def _select_candidate(
    result: AttemptResult, word: str, mode: GenerationMode
) -> Optional[Candidate]:
    best: Optional[Candidate] = None
    best_overlap = -1
    for existing in list(result.placements):
        candidates = intersection_placements(result.grid, word, existing)
        if not candidates:
            continue
        if mode is GenerationMode.RANDOM:
            return candidates[0]
        overlap = len(find_intersections(word, existing.word))
        if overlap > best_overlap:
            best_overlap = overlap
            best = candidates[0]
    return best


def _place_anchor(
    result: AttemptResult, pending: List[WordEntry], start: Optional[StartPosition]
) -> bool:
    size = result.grid.size
    for index, entry in enumerate(pending):
        anchor = fit_start(start, len(entry.word), size)
        if result.grid.can_place_word(entry.word, anchor.row, anchor.col, anchor.direction):
            place_word(result, entry.word, entry.clue, anchor.row, anchor.col, anchor.direction)
            del pending[index]
            return True
        LOGGER.debug("Anchor word %s does not fit a %sx%s grid", entry.word, size, size)
    return False


def run_attempt(
    words: Sequence[WordEntry],
    seed: AttemptSeed,
    mode: GenerationMode,
    result: AttemptResult,
) -> AttemptResult:
    """Greedily place ``words`` into ``result`` following ``seed``.

    The first word is anchored at the seed's start cell, then every pass
    offers each unplaced word to the placements made so far and places it
    at the first acceptable crossing. Passes repeat until one places
    nothing. Placements are never undone. ``result`` must be empty.
    """

    pending = order_words(words, seed)
    if not pending:
        return result
    if not _place_anchor(result, pending, starting_position(seed, result.grid.size)):
        return result

    progress = True
    while progress and pending:
        progress = False
        remaining: List[WordEntry] = []
        for entry in pending:
            if entry.word in result.placed_words:
                continue
            choice = _select_candidate(result, entry.word, mode)
            if choice is None:
                remaining.append(entry)
                continue
            row, col, direction = choice
            place_word(result, entry.word, entry.clue, row, col, direction)
            progress = True
        pending = remaining
    return result
