"""Shared constants and enumerations for the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class GenerationMode(str, Enum):
    """Candidate selection strategy used by every attempt."""

    MAX_OVERLAP = "maxOverlap"
    RANDOM = "random"


EMPTY = ""

DEFAULT_GRID_SIZE = 25
MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 50

DEFAULT_MAX_ATTEMPTS = 1000
DEFAULT_TIMEOUT_SECONDS = 10.0

RANDOM_SEED_COUNT = 1000
SHUFFLED_ORDER_COUNT = 20
START_POSITION_LIMIT = 20
START_OFFSETS: Tuple[int, ...] = (-3, -2, -1, 1, 2, 3)
PROGRESS_INTERVAL = 10

WORD_WEIGHT = 100
DENSITY_WEIGHT = 50


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
