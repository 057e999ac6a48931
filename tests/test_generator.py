import itertools
import unittest

from crossweave.core.constants import GenerationMode
from crossweave.core.exceptions import ConfigurationError, InvalidWordListError
from crossweave.core.models import WordEntry
from crossweave.engine.generator import (CrosswordGenerator, GeneratorConfig, GridSizeConfig,
                                         generate)


def entries(*words: str):
    return [WordEntry(word=w, clue=f"Clue for {w.lower()}") for w in words]


ANIMALS = entries("TIGER", "CAT", "DOG", "GOAT", "HORSE", "RABBIT", "DONKEY", "TURTLE")
UNCONNECTED = entries("ABC", "DEF", "GHI")


def ticking_clock(step: float = 1.0):
    counter = itertools.count(0.0, step)
    return lambda: next(counter)


class GeneratorConfigTests(unittest.TestCase):
    def test_effective_grid_size_is_clamped(self) -> None:
        self.assertEqual(GridSizeConfig(default=5, min=10, max=50).effective(), 10)
        self.assertEqual(GridSizeConfig(default=60, min=10, max=50).effective(), 50)
        self.assertEqual(GridSizeConfig(default=20, min=10, max=50).effective(), 20)

    def test_from_mapping_reads_nested_document(self) -> None:
        config = GeneratorConfig.from_mapping(
            {
                "gridSize": {"default": 15, "min": 10, "max": 30},
                "generation": {
                    "mode": "random",
                    "enforceAllWords": False,
                    "maxAttempts": 50,
                    "timeoutSeconds": 2,
                },
            }
        )
        self.assertEqual(config.effective_grid_size, 15)
        self.assertIs(config.mode, GenerationMode.RANDOM)
        self.assertFalse(config.enforce_all_words)
        self.assertEqual(config.max_attempts, 50)
        self.assertEqual(config.timeout_seconds, 2.0)

    def test_from_mapping_uses_defaults_for_missing_keys(self) -> None:
        config = GeneratorConfig.from_mapping({})
        self.assertEqual(config.effective_grid_size, 25)
        self.assertIs(config.mode, GenerationMode.MAX_OVERLAP)
        self.assertTrue(config.enforce_all_words)
        self.assertEqual(config.max_attempts, 1000)

    def test_invalid_values_are_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            GeneratorConfig.from_mapping({"generation": {"mode": "greedy"}})
        with self.assertRaises(ConfigurationError):
            GeneratorConfig.from_mapping({"gridSize": {"min": 30, "max": 20}})
        with self.assertRaises(ConfigurationError):
            GeneratorConfig.from_mapping({"generation": {"enforceAllWords": "false"}})
        with self.assertRaises(ConfigurationError):
            GeneratorConfig.from_mapping({"generation": {"seed": [1, 2]}})
        with self.assertRaises(ConfigurationError):
            GeneratorConfig.from_mapping({"generation": {"maxAttempts": 2.7}})
        with self.assertRaises(ConfigurationError):
            CrosswordGenerator(GeneratorConfig(max_attempts=0))
        with self.assertRaises(ConfigurationError):
            CrosswordGenerator(GeneratorConfig(timeout_seconds=0))


class InputValidationTests(unittest.TestCase):
    def test_rejects_single_word(self) -> None:
        with self.assertRaises(InvalidWordListError):
            generate(entries("CAT"))

    def test_rejects_bad_characters_duplicates_and_long_words(self) -> None:
        config = GeneratorConfig(grid_size=GridSizeConfig(default=10, min=10, max=10))
        bad = [
            WordEntry("C4T", "digit"),
            WordEntry("dog", "Canine"),
            WordEntry("DOG ", "Canine again"),
            WordEntry("HIPPOPOTAMUS", "Too long"),
            WordEntry("OWL", ""),
        ]
        with self.assertRaises(InvalidWordListError) as ctx:
            CrosswordGenerator(config).generate(bad)
        problems = ctx.exception.problems
        self.assertEqual(len(problems), 4)
        self.assertTrue(any("C4T" in p for p in problems))
        self.assertTrue(any("more than once" in p for p in problems))
        self.assertTrue(any("HIPPOPOTAMUS" in p for p in problems))

    def test_words_are_normalized(self) -> None:
        outcome = generate([WordEntry(" cat ", " Feline "), WordEntry("tiger", "Big cat")])
        self.assertEqual({e.word for e in outcome.requested_words}, {"CAT", "TIGER"})
        self.assertEqual(outcome.requested_words[0].clue, "Feline")


class SearchDriverTests(unittest.TestCase):
    def test_single_attempt_when_not_enforcing(self) -> None:
        config = GeneratorConfig(enforce_all_words=False, max_attempts=500)
        outcome = CrosswordGenerator(config).generate(UNCONNECTED)
        self.assertEqual(outcome.attempts_run, 1)
        self.assertFalse(outcome.perfect_solution_found)
        self.assertIsNotNone(outcome.result)
        self.assertEqual(outcome.placed_count, 1)

    def test_perfect_solution_stops_search(self) -> None:
        outcome = generate(entries("CAT", "TIGER", "DOG"))
        self.assertTrue(outcome.perfect_solution_found)
        self.assertEqual(outcome.attempts_run, 1)
        self.assertTrue(outcome.is_complete)
        self.assertEqual(outcome.unplaced_words, [])
        self.assertEqual(outcome.validation_messages, [])

    def test_attempt_cap_is_respected(self) -> None:
        config = GeneratorConfig(max_attempts=7, timeout_seconds=600)
        outcome = CrosswordGenerator(config).generate(UNCONNECTED)
        self.assertEqual(outcome.attempts_run, 7)
        self.assertFalse(outcome.perfect_solution_found)

    def test_timeout_stops_search_between_attempts(self) -> None:
        config = GeneratorConfig(max_attempts=100_000, timeout_seconds=5)
        generator = CrosswordGenerator(config, clock=ticking_clock())
        outcome = generator.generate(UNCONNECTED)
        self.assertEqual(outcome.attempts_run, 5)
        self.assertGreater(outcome.elapsed_seconds, 5)

    def test_partial_result_keeps_best_attempt(self) -> None:
        outcome = CrosswordGenerator(GeneratorConfig(max_attempts=10)).generate(UNCONNECTED)
        self.assertEqual(outcome.placed_count, 1)
        self.assertEqual(len(outcome.unplaced_words), 2)
        self.assertEqual(outcome.requested_count, 3)
        self.assertFalse(outcome.is_complete)
        self.assertGreater(outcome.score, 100)

    def test_progress_reported_every_ten_attempts(self) -> None:
        calls = []
        config = GeneratorConfig(max_attempts=25, timeout_seconds=600)
        CrosswordGenerator(config, progress=lambda n, total: calls.append((n, total))).generate(
            UNCONNECTED
        )
        self.assertEqual(calls, [(10, 25), (20, 25)])

    def test_layout_is_legal_and_reads_back(self) -> None:
        outcome = generate(ANIMALS, GeneratorConfig(max_attempts=200, timeout_seconds=30))
        result = outcome.result
        self.assertIsNotNone(result)
        self.assertGreaterEqual(outcome.placed_count, 2)
        for placement in result.placements:
            self.assertEqual(
                result.grid.read_word(
                    placement.start_row, placement.start_col, placement.direction, placement.length
                ),
                placement.word,
            )
        self.assertEqual(outcome.validation_messages, [])

    def test_random_mode_is_reproducible_with_seed(self) -> None:
        def run():
            config = GeneratorConfig(mode=GenerationMode.RANDOM, seed=42, max_attempts=30, timeout_seconds=60)
            return CrosswordGenerator(config).generate(ANIMALS)

        first, second = run(), run()
        self.assertEqual(first.attempts_run, second.attempts_run)
        self.assertEqual(first.result.placements, second.result.placements)
        self.assertEqual(first.result.grid.to_rows(), second.result.grid.to_rows())

    def test_outcome_serializes(self) -> None:
        payload = generate(entries("CAT", "TIGER", "DOG")).to_jsonable()
        self.assertEqual(payload["placed_count"], 3)
        self.assertEqual(payload["requested_count"], 3)
        self.assertTrue(payload["perfect_solution_found"])
        self.assertEqual(len(payload["result"]["placements"]), 3)
        self.assertEqual(payload["result"]["placements"][0]["number"], 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
