import unittest

from crossweave.core.constants import Direction, GenerationMode
from crossweave.core.models import AttemptSeed, StartPosition, WordEntry
from crossweave.engine.attempt import _select_candidate, fit_start, order_words, run_attempt
from crossweave.engine.placement import place_word
from crossweave.engine.result import AttemptResult
from crossweave.engine.seeds import default_seed


def entries(*words: str):
    return [WordEntry(word=w, clue=f"Clue for {w.lower()}") for w in words]


class SingleAttemptTests(unittest.TestCase):
    def test_cat_tiger_dog_all_placed(self) -> None:
        words = entries("CAT", "TIGER", "DOG")
        result = run_attempt(
            words, default_seed(words), GenerationMode.MAX_OVERLAP, AttemptResult.empty(10)
        )
        layout = [(p.word, p.start_row, p.start_col, p.direction, p.number) for p in result.placements]
        self.assertEqual(
            layout,
            [
                ("TIGER", 5, 2, Direction.ACROSS, 1),
                ("CAT", 3, 2, Direction.DOWN, 2),
                ("DOG", 3, 4, Direction.DOWN, 3),
            ],
        )
        self.assertEqual(result.placed_count, 3)

    def test_every_placement_reads_back(self) -> None:
        words = entries("PYTHON", "NOTEBOOK", "HONEY", "TYPE", "BOOK", "ONION")
        result = run_attempt(
            words, default_seed(words), GenerationMode.MAX_OVERLAP, AttemptResult.empty(15)
        )
        self.assertGreaterEqual(result.placed_count, 2)
        for placement in result.placements:
            text = result.grid.read_word(
                placement.start_row, placement.start_col, placement.direction, placement.length
            )
            self.assertEqual(text, placement.word)

    def test_unconnected_word_is_left_unplaced(self) -> None:
        words = entries("CAT", "DOG")
        result = run_attempt(
            words, default_seed(words), GenerationMode.MAX_OVERLAP, AttemptResult.empty(10)
        )
        self.assertEqual(result.placed_words, {"CAT"})

    def test_same_seed_after_reset_is_identical(self) -> None:
        words = entries("PYTHON", "NOTEBOOK", "HONEY", "TYPE", "BOOK", "ONION")
        seed = AttemptSeed(
            word_order=tuple(words), start=StartPosition(row=3, col=3, direction=Direction.DOWN)
        )
        working = AttemptResult.empty(15)
        first = run_attempt(words, seed, GenerationMode.MAX_OVERLAP, working).snapshot()
        working.reset()
        second = run_attempt(words, seed, GenerationMode.MAX_OVERLAP, working)
        self.assertEqual(first.placements, second.placements)
        self.assertEqual(first.grid.to_rows(), second.grid.to_rows())
        self.assertEqual(first.word_numbers, second.word_numbers)

    def test_random_mode_is_reproducible_for_fixed_seed(self) -> None:
        words = entries("PYTHON", "NOTEBOOK", "HONEY", "TYPE", "BOOK", "ONION")
        seed = AttemptSeed(random_seed=11, word_order_seed=99)
        self.assertEqual(
            [e.word for e in order_words(words, seed)],
            [e.word for e in order_words(words, seed)],
        )
        first = run_attempt(words, seed, GenerationMode.RANDOM, AttemptResult.empty(15))
        second = run_attempt(words, seed, GenerationMode.RANDOM, AttemptResult.empty(15))
        self.assertEqual(first.placements, second.placements)

    def test_oversized_first_word_falls_back_to_next(self) -> None:
        words = entries("ELEPHANT", "CAT", "ACT")
        result = run_attempt(
            words, default_seed(words), GenerationMode.MAX_OVERLAP, AttemptResult.empty(4)
        )
        self.assertEqual([p.word for p in result.placements], ["CAT", "ACT"])
        self.assertEqual(result.placements[0].start_col, 0)
        self.assertNotIn("ELEPHANT", result.placed_words)


class CandidateSelectionTests(unittest.TestCase):
    """TOT shares 2 letter pairs with CAT and BAT but 4 with ROOT."""

    def layout(self, second: str) -> AttemptResult:
        result = AttemptResult.empty(15)
        place_word(result, "CAT", "Feline", 2, 2, Direction.ACROSS)
        place_word(result, second, "Second", 8, 2, Direction.ACROSS)
        return result

    def test_max_overlap_prefers_word_with_more_intersections(self) -> None:
        result = self.layout("ROOT")
        self.assertEqual(
            _select_candidate(result, "TOT", GenerationMode.MAX_OVERLAP), (8, 5, Direction.DOWN)
        )

    def test_max_overlap_keeps_earlier_word_on_tie(self) -> None:
        result = self.layout("BAT")
        self.assertEqual(
            _select_candidate(result, "TOT", GenerationMode.MAX_OVERLAP), (2, 4, Direction.DOWN)
        )

    def test_random_mode_takes_first_legal_candidate(self) -> None:
        result = self.layout("ROOT")
        self.assertEqual(
            _select_candidate(result, "TOT", GenerationMode.RANDOM), (2, 4, Direction.DOWN)
        )

    def test_earlier_word_without_legal_crossing_is_skipped(self) -> None:
        result = self.layout("ROOT")
        # Block both crossings of CAT's T.
        place_word(result, "OX", "Draft animal", 0, 5, Direction.ACROSS)
        place_word(result, "EGG", "Laid", 4, 5, Direction.ACROSS)
        self.assertFalse(result.grid.can_place_word("TOT", 0, 4, Direction.DOWN))
        self.assertFalse(result.grid.can_place_word("TOT", 2, 4, Direction.DOWN))
        self.assertEqual(
            _select_candidate(result, "TOT", GenerationMode.RANDOM), (8, 5, Direction.DOWN)
        )

    def test_no_shared_letters_returns_none(self) -> None:
        result = self.layout("ROOT")
        self.assertIsNone(_select_candidate(result, "ZIP", GenerationMode.MAX_OVERLAP))


class StartPositionTests(unittest.TestCase):
    def test_default_start_centers_word(self) -> None:
        self.assertEqual(fit_start(None, 5, 25), StartPosition(row=12, col=10))

    def test_explicit_start_is_pulled_back_to_fit(self) -> None:
        start = StartPosition(row=20, col=22, direction=Direction.ACROSS)
        self.assertEqual(fit_start(start, 6, 25), StartPosition(row=20, col=19))
        start = StartPosition(row=22, col=5, direction=Direction.DOWN)
        self.assertEqual(
            fit_start(start, 6, 25), StartPosition(row=19, col=5, direction=Direction.DOWN)
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
