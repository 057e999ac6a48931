"""Crossword layout generator for word/clue lists.

This package exposes the public API surface via:

- ``crossweave.engine.generator.CrosswordGenerator``: runs the attempt search.
- ``crossweave.engine.generator.generate``: one-call validation plus search.
- ``crossweave.io.config_loader.load_configuration``: settings with defaults.
- ``crossweave.data.presets.PresetLibrary``: ``WORD;clue`` preset lists.
"""

from .core.constants import Direction, GenerationMode
from .core.models import Placement, WordEntry
from .engine.generator import (CrosswordGenerator, GenerationOutcome, GeneratorConfig,
                               GridSizeConfig, generate)

__all__ = [
    "CrosswordGenerator",
    "Direction",
    "GenerationMode",
    "GenerationOutcome",
    "GeneratorConfig",
    "GridSizeConfig",
    "Placement",
    "WordEntry",
    "generate",
]

__version__ = "0.1.0"
