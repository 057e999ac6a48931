"""Systematic multi-attempt crossword search.

Each attempt is a greedy layout driven by one seed. The generator runs
seeds in order, keeps the best-scoring result and stops on the first
attempt that places every word, on the attempt cap, or once the wall-clock
budget is spent. The budget is checked between attempts only.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..core.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    PROGRESS_INTERVAL,
    GenerationMode,
)
from ..core.exceptions import ConfigurationError
from ..core.models import AttemptSeed, WordEntry
from ..utils.logger import get_logger
from .attempt import run_attempt
from .result import AttemptResult
from .scoring import score_result
from .seeds import build_seeds, default_seed
from .validator import LayoutValidator, validate_words


LOGGER = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass
class GridSizeConfig:
    default: int = DEFAULT_GRID_SIZE
    min: int = MIN_GRID_SIZE
    max: int = MAX_GRID_SIZE

    def effective(self) -> int:
        return max(self.min, min(self.max, self.default))


@dataclass
class GeneratorConfig:
    grid_size: GridSizeConfig = field(default_factory=GridSizeConfig)
    mode: GenerationMode = GenerationMode.MAX_OVERLAP
    enforce_all_words: bool = True
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.grid_size.min < 1 or self.grid_size.min > self.grid_size.max:
            raise ConfigurationError(
                f"Invalid grid size bounds: min={self.grid_size.min} max={self.grid_size.max}"
            )
        if self.max_attempts < 1:
            raise ConfigurationError("maxAttempts must be a positive integer")
        if self.timeout_seconds <= 0:
            raise ConfigurationError("timeoutSeconds must be positive")

    @property
    def effective_grid_size(self) -> int:
        return self.grid_size.effective()

    @classmethod
    def from_mapping(cls, doc: Mapping[str, Any]) -> "GeneratorConfig":
        """Build a config from the ``{"gridSize": ..., "generation": ...}`` document."""

        grid_doc = doc.get("gridSize") or {}
        generation = doc.get("generation") or {}
        if not isinstance(grid_doc, Mapping) or not isinstance(generation, Mapping):
            raise ConfigurationError("gridSize and generation must be JSON objects")
        try:
            mode = GenerationMode(generation.get("mode", GenerationMode.MAX_OVERLAP.value))
        except ValueError as exc:
            raise ConfigurationError(f"Malformed configuration: {exc}") from exc

        seed = generation.get("seed")
        if seed is not None:
            seed = _require_int(seed, "generation.seed")
        config = cls(
            grid_size=GridSizeConfig(
                default=_require_int(grid_doc.get("default", DEFAULT_GRID_SIZE), "gridSize.default"),
                min=_require_int(grid_doc.get("min", MIN_GRID_SIZE), "gridSize.min"),
                max=_require_int(grid_doc.get("max", MAX_GRID_SIZE), "gridSize.max"),
            ),
            mode=mode,
            enforce_all_words=_require_bool(
                generation.get("enforceAllWords", True), "generation.enforceAllWords"
            ),
            max_attempts=_require_int(
                generation.get("maxAttempts", DEFAULT_MAX_ATTEMPTS), "generation.maxAttempts"
            ),
            timeout_seconds=_require_number(
                generation.get("timeoutSeconds", DEFAULT_TIMEOUT_SECONDS), "generation.timeoutSeconds"
            ),
            seed=seed,
        )
        config.validate()
        return config


def _require_int(value: Any, name: str) -> int:
    # bool is a subclass of int; JSON true/false is never a count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return value


def _require_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    return float(value)


def _require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be true or false, got {value!r}")
    return value


@dataclass
class GenerationOutcome:
    result: Optional[AttemptResult]
    attempts_run: int
    perfect_solution_found: bool
    elapsed_seconds: float
    requested_words: List[WordEntry] = field(default_factory=list)
    score: float = 0.0
    validation_messages: List[str] = field(default_factory=list)

    @property
    def requested_count(self) -> int:
        return len(self.requested_words)

    @property
    def placed_count(self) -> int:
        return self.result.placed_count if self.result else 0

    @property
    def is_complete(self) -> bool:
        return self.requested_count > 0 and self.placed_count == self.requested_count

    @property
    def unplaced_words(self) -> List[str]:
        placed = self.result.placed_words if self.result else set()
        return [entry.word for entry in self.requested_words if entry.word not in placed]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "result": self.result.to_jsonable() if self.result else None,
            "attempts_run": self.attempts_run,
            "perfect_solution_found": self.perfect_solution_found,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "placed_count": self.placed_count,
            "requested_count": self.requested_count,
            "unplaced_words": self.unplaced_words,
            "score": round(self.score, 3),
            "validation": self.validation_messages,
        }


class CrosswordGenerator:
    """Runs attempts over a seed list and keeps the best layout."""

    def __init__(
        self,
        config: GeneratorConfig,
        clock: Callable[[], float] = time.monotonic,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.grid_size = config.effective_grid_size
        self.clock = clock
        self.progress = progress
        self.rng = random.Random(config.seed)
        self.validator = LayoutValidator()
        self._working = AttemptResult.empty(self.grid_size)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, entries: Sequence[WordEntry]) -> GenerationOutcome:
        words = validate_words(entries, self.config.grid_size.max)
        start = self.clock()

        if self.config.enforce_all_words:
            seeds = build_seeds(words, self.config.mode, self.grid_size, self.rng)
            budget = self.config.max_attempts
            LOGGER.info(
                "Searching %s arrangements of %s words (mode=%s, budget=%s attempts/%ss)",
                len(seeds), len(words), self.config.mode.value, budget, self.config.timeout_seconds,
            )
        else:
            seeds = [default_seed(words)]
            budget = 1

        best: Optional[AttemptResult] = None
        best_score = 0.0
        attempts = 0
        perfect = False
        for seed in seeds:
            if attempts >= budget:
                break
            if self.clock() - start > self.config.timeout_seconds:
                LOGGER.info("Generation timeout after %s attempts", attempts)
                break
            attempts += 1
            if self.progress and attempts % PROGRESS_INTERVAL == 0:
                self.progress(attempts, budget)

            result = self.run_seed(words, seed)
            score = score_result(result)
            LOGGER.debug(
                "Attempt %s placed %s/%s words (score %.1f)",
                attempts, result.placed_count, len(words), score,
            )
            if result.placed_count == len(words):
                best, best_score = result.snapshot(), score
                perfect = True
                LOGGER.info("Found perfect solution after %s attempts", attempts)
                break
            if score > best_score or not self.config.enforce_all_words:
                best, best_score = result.snapshot(), score

        elapsed = self.clock() - start
        outcome = GenerationOutcome(
            result=best,
            attempts_run=attempts,
            perfect_solution_found=perfect,
            elapsed_seconds=elapsed,
            requested_words=list(words),
            score=best_score,
        )
        if best is not None:
            outcome.validation_messages = self.validator.validate(best).messages
        if not outcome.is_complete:
            LOGGER.warning(
                "Could not place %s word(s): %s",
                len(outcome.unplaced_words), ", ".join(outcome.unplaced_words),
            )
        return outcome

    def run_seed(self, words: Sequence[WordEntry], seed: AttemptSeed) -> AttemptResult:
        """Run one attempt on the reused working grid.

        The returned result shares the working grid; take a
        :meth:`AttemptResult.snapshot` before running the next seed.
        """

        self._working.reset()
        return run_attempt(words, seed, self.config.mode, self._working)


def generate(
    entries: Sequence[WordEntry],
    config: Optional[GeneratorConfig] = None,
    progress: Optional[ProgressCallback] = None,
) -> GenerationOutcome:
    """Validate ``entries`` and search for the best layout under ``config``."""

    return CrosswordGenerator(config or GeneratorConfig(), progress=progress).generate(entries)
