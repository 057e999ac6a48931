"""Deterministic validation of word lists and generated layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from ..core.exceptions import InvalidWordListError, ValidationError
from ..core.models import WordEntry
from ..data.normalization import is_valid_word, normalize_clue, normalize_word
from ..utils.logger import get_logger
from .result import AttemptResult


LOGGER = get_logger(__name__)

MIN_WORDS = 2


def validate_words(entries: Iterable[WordEntry], max_length: int) -> List[WordEntry]:
    """Normalize the caller's entries or reject the whole list.

    Every problem is collected so the caller can report them together.
    """

    problems: List[str] = []
    cleaned: List[WordEntry] = []
    seen: Set[str] = set()
    for position, entry in enumerate(entries, start=1):
        word = normalize_word(entry.word)
        clue = normalize_clue(entry.clue)
        if not word or not clue:
            problems.append(f"Entry {position}: both word and clue are required")
            continue
        if not is_valid_word(word):
            problems.append(f"Word '{word}' must contain only letters A-Z")
            continue
        if len(word) > max_length:
            problems.append(f"Word '{word}' must be {max_length} characters or less")
            continue
        if word in seen:
            problems.append(f"Word '{word}' is listed more than once")
            continue
        seen.add(word)
        cleaned.append(WordEntry(word=word, clue=clue))

    if not problems and len(cleaned) < MIN_WORDS:
        problems.append(f"Need at least {MIN_WORDS} words to generate a crossword")
    if problems:
        raise InvalidWordListError(problems)
    return cleaned


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs integrity checks over a finished attempt."""

    def validate(self, result: AttemptResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_placements(result)
            self._check_coverage(result)
            self._check_numbering(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Layout validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_placements(self, result: AttemptResult) -> None:
        grid = result.grid
        for placement in result.placements:
            if not grid.fits(placement.length, placement.start_row, placement.start_col, placement.direction):
                raise ValidationError(
                    f"Word '{placement.word}' extends outside the grid"
                )
            text = grid.read_word(
                placement.start_row, placement.start_col, placement.direction, placement.length
            )
            if text != placement.word:
                raise ValidationError(
                    f"Word '{placement.word}' reads back as '{text}' at "
                    f"({placement.start_row},{placement.start_col})"
                )

    def _check_coverage(self, result: AttemptResult) -> None:
        covered: Set[Tuple[int, int]] = set()
        for placement in result.placements:
            covered.update(placement.cells)
        for row, col in result.grid.filled_cells():
            if (row, col) not in covered:
                raise ValidationError(f"Stray letter at ({row},{col})")

    def _check_numbering(self, result: AttemptResult) -> None:
        numbers = [p.number for p in result.placements]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValidationError(f"Clue numbers are not sequential: {numbers}")
        for placement in result.placements:
            key = result.cell_key(placement.start_row, placement.start_col)
            if key not in result.word_numbers:
                raise ValidationError(f"Start cell {key} of '{placement.word}' is not numbered")
