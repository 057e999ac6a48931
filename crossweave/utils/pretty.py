"""Pretty-print helpers for generated crosswords."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..engine.generator import GenerationOutcome
    from ..engine.result import AttemptResult


EMPTY_SYMBOL = "."
BLANK_SYMBOL = "_"


def cell_symbol(result: AttemptResult, row: int, col: int, show_answers: bool) -> str:
    letter = result.grid.letter(row, col)
    if not letter:
        return EMPTY_SYMBOL
    return letter if show_answers else BLANK_SYMBOL


def format_grid(result: AttemptResult, *, show_answers: bool = True) -> str:
    """Render the placements' bounding box; numbers are shown in puzzle view."""

    box = result.bounding_box()
    if box is None:
        return "(empty grid)"
    min_row, min_col, max_row, max_col = box
    lines: List[str] = []
    for r in range(min_row, max_row + 1):
        row_cells = []
        for c in range(min_col, max_col + 1):
            number = result.number_at(r, c)
            symbol = cell_symbol(result, r, c, show_answers)
            if number is not None and not show_answers:
                row_cells.append(f"{number:>3}")
            else:
                row_cells.append(f"{symbol:>3}")
        lines.append("".join(row_cells))
    return "\n".join(lines)


def format_clues(result: AttemptResult) -> str:
    lines: List[str] = []
    for title, direction in (("Across", Direction.ACROSS), ("Down", Direction.DOWN)):
        lines.append(f"{title}:")
        for number, clue in result.clues(direction):
            lines.append(f"  {number:>2}. {clue}")
    return "\n".join(lines)


def summary_message(outcome: GenerationOutcome) -> str:
    placed = outcome.placed_count
    total = outcome.requested_count
    attempts = outcome.attempts_run
    elapsed = f"{outcome.elapsed_seconds:.1f}s"
    if outcome.perfect_solution_found:
        return f"Perfect solution found! All {placed} words placed after {attempts} attempts ({elapsed})"
    if placed == total and total:
        return f"Successfully generated crossword with all {placed} words after {attempts} attempts ({elapsed})"
    if placed > 0 and attempts > 1:
        return f"Best result: {placed} out of {total} words after {attempts} attempts ({elapsed})"
    if placed > 0:
        return f"Generated crossword with {placed} out of {total} words"
    return (
        f"Unable to generate crossword with current words after {attempts} attempts ({elapsed}). "
        "Try different generation settings or fewer words."
    )


def print_generation_summary(
    outcome: GenerationOutcome, *, show_answers: bool = False, stream=None
) -> None:
    """Print grid, clues and search stats."""

    stream = stream or sys.stdout
    result = outcome.result
    if result is not None:
        print(format_grid(result, show_answers=show_answers), file=stream)
        print(file=stream)
        print(format_clues(result), file=stream)

    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Attempts:      {outcome.attempts_run}", file=stream)
    print(f"  Elapsed:       {outcome.elapsed_seconds:.2f}s", file=stream)
    print(f"  Placed:        {outcome.placed_count}/{outcome.requested_count}", file=stream)
    print(f"  Score:         {outcome.score:.1f}", file=stream)
    if result is not None and result.placements:
        lengths = Counter(p.length for p in result.placements)
        dist_parts = [f"{l}:{c}" for l, c in sorted(lengths.items())]
        print(f"  Lengths:       {' '.join(dist_parts)}", file=stream)
    if outcome.unplaced_words:
        print(f"  Unplaced:      {', '.join(outcome.unplaced_words)}", file=stream)

    if outcome.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in outcome.validation_messages:
            print(f"  {msg}", file=stream)

    print(file=stream)
    print(summary_message(outcome), file=stream)
