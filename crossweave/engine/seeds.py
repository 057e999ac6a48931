"""Seed construction for the systematic search.

A seed fixes everything that varies between two attempts: the order in
which words are offered and where the first word is anchored. In
``maxOverlap`` mode seeds are the cross product of a few word orderings
with a few anchor cells; in ``random`` mode they are pairs of integers
drawn from a seeded :class:`random.Random`.
"""

from __future__ import annotations

import itertools
import random
from typing import List, Optional, Sequence, Tuple

from ..core.constants import (
    RANDOM_SEED_COUNT,
    SHUFFLED_ORDER_COUNT,
    START_OFFSETS,
    START_POSITION_LIMIT,
    Direction,
    GenerationMode,
)
from ..core.models import AttemptSeed, StartPosition, WordEntry


WordOrder = Tuple[WordEntry, ...]


def seeded_shuffle(items: Sequence[WordEntry], seed: int) -> List[WordEntry]:
    """Return a shuffled copy; the same seed always yields the same order."""

    shuffled = list(items)
    random.Random(seed).shuffle(shuffled)
    return shuffled


def longest_first(words: Sequence[WordEntry]) -> List[WordEntry]:
    return sorted(words, key=lambda entry: -len(entry.word))


def word_order_variations(
    words: Sequence[WordEntry], shuffled_count: int = SHUFFLED_ORDER_COUNT
) -> List[WordOrder]:
    """Length and alphabetical orderings followed by seeded shuffles."""

    candidates: List[Sequence[WordEntry]] = [
        longest_first(words),
        sorted(words, key=lambda entry: len(entry.word)),
        sorted(words, key=lambda entry: entry.word),
        sorted(words, key=lambda entry: entry.word, reverse=True),
    ]
    candidates.extend(seeded_shuffle(words, index) for index in range(shuffled_count))

    variations: List[WordOrder] = []
    seen = set()
    for order in candidates:
        key = tuple(entry.word for entry in order)
        if key in seen:
            continue
        seen.add(key)
        variations.append(tuple(order))
    return variations


def start_position_variations(
    grid_size: int, limit: int = START_POSITION_LIMIT
) -> List[StartPosition]:
    """Center and corner anchors in both orientations, then offsets around center.

    Offsets are taken ring by ring, diagonals first within a ring, so a
    truncated list still surrounds the center on all four sides.
    """

    center = grid_size // 2
    offsets = sorted(
        itertools.product(START_OFFSETS, repeat=2),
        key=lambda offset: (
            max(abs(offset[0]), abs(offset[1])),
            abs(offset[0]) != abs(offset[1]),
            abs(offset[0]) + abs(offset[1]),
        ),
    )
    anchors = [(center, center), (0, 0)]
    for row_offset, col_offset in offsets:
        row = max(0, min(grid_size - 1, center + row_offset))
        col = max(0, min(grid_size - 1, center + col_offset))
        anchors.append((row, col))

    positions: List[StartPosition] = []
    for row, col in anchors:
        for direction in (Direction.ACROSS, Direction.DOWN):
            position = StartPosition(row=row, col=col, direction=direction)
            if position not in positions:
                positions.append(position)
        if len(positions) >= limit:
            break
    return positions[:limit]


def default_seed(words: Sequence[WordEntry]) -> AttemptSeed:
    """Longest-first order anchored at the grid center."""

    return AttemptSeed(word_order=tuple(longest_first(words)))


def build_seeds(
    words: Sequence[WordEntry],
    mode: GenerationMode,
    grid_size: int,
    rng: Optional[random.Random] = None,
) -> List[AttemptSeed]:
    """Build the full, ordered seed list consumed one per attempt."""

    if mode is GenerationMode.RANDOM:
        rng = rng or random.Random()
        return [
            AttemptSeed(
                random_seed=rng.randint(0, 1_000_000),
                word_order_seed=rng.randint(0, 1_000_000),
            )
            for _ in range(RANDOM_SEED_COUNT)
        ]

    starts = start_position_variations(grid_size)
    return [
        AttemptSeed(word_order=order, start=start)
        for order in word_order_variations(words)
        for start in starts
    ]
