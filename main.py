"""CLI entrypoint for the crossword layout generator."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

from crossweave.core.constants import GenerationMode
from crossweave.core.exceptions import (ConfigurationError, InvalidWordListError, PresetLoadError,
                                        ResourceLoadError)
from crossweave.core.models import WordEntry
from crossweave.data.presets import PresetLibrary, load_preset_file, parse_entry
from crossweave.engine.generator import CrosswordGenerator
from crossweave.io.config_loader import DEFAULT_CONFIG_LOCATION, load_configuration
from crossweave.utils.logger import configure_logging, get_logger
from crossweave.utils.pretty import print_generation_summary


LOGGER = get_logger("crossweave.cli")


def parse_inline_words(raw_words: List[str]) -> List[WordEntry]:
    """Parse ``WORD;clue`` (or ``WORD:clue``) arguments."""

    entries: List[WordEntry] = []
    for item in raw_words:
        separator = ";" if ";" in item else ":"
        entries.append(parse_entry(item, separator=separator))
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out word/clue pairs as an interlocking crossword",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="ENTRY",
        help="Inline entries in WORD;clue (or WORD:clue) form",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD;clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--preset", type=str, help="Preset key from the configuration")
    parser.add_argument("--list-presets", action="store_true", help="List configured presets and exit")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_LOCATION,
        help="Path or http(s) URL of the JSON configuration",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in GenerationMode],
        help="Candidate selection mode (overrides configuration)",
    )
    parser.add_argument("--grid-size", type=int, help="Grid size, clamped to the configured bounds")
    parser.add_argument("--max-attempts", type=int, help="Maximum number of attempts")
    parser.add_argument("--timeout", type=float, help="Search time budget in seconds")
    parser.add_argument(
        "--no-enforce-all-words",
        action="store_true",
        help="Run a single attempt instead of searching for a complete layout",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--show-answers", action="store_true", help="Print letters instead of the blank puzzle")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    app_config = load_configuration(args.config)
    library = PresetLibrary(app_config)
    if args.list_presets:
        for key, name in library.available().items():
            print(f"{key}\t{name}")
        return 0

    if not (args.words or args.words_file or args.preset):
        parser.error("provide at least one of --words, --words-file or --preset")

    entries: List[WordEntry] = []
    try:
        if args.preset:
            entries.extend(library.load(args.preset))
        if args.words_file:
            entries.extend(load_preset_file(args.words_file))
        if args.words:
            entries.extend(parse_inline_words(args.words))
    except (PresetLoadError, ResourceLoadError, ValueError) as exc:
        parser.error(str(exc))

    config = app_config.generator
    if args.mode:
        config.mode = GenerationMode(args.mode)
    if args.grid_size is not None:
        config.grid_size.default = args.grid_size
    if args.max_attempts is not None:
        config.max_attempts = args.max_attempts
    if args.timeout is not None:
        config.timeout_seconds = args.timeout
    if args.no_enforce_all_words:
        config.enforce_all_words = False
    if args.seed is not None:
        config.seed = args.seed

    def report_progress(attempts: int, budget: int) -> None:
        LOGGER.info("Attempt %s/%s...", attempts, budget)

    try:
        generator = CrosswordGenerator(config, progress=report_progress)
        outcome = generator.generate(entries)
    except InvalidWordListError as exc:
        parser.error("; ".join(exc.problems))
    except ConfigurationError as exc:
        parser.error(str(exc))

    print_generation_summary(outcome, show_answers=args.show_answers)

    if args.output:
        payload = outcome.to_jsonable()
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Wrote %s", args.output)
    return 0 if outcome.placed_count else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
