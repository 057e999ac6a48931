"""Preset word lists stored as ``WORD;clue`` lines."""

from __future__ import annotations

from typing import Dict, List

from ..core.exceptions import PresetLoadError, ResourceLoadError
from ..core.models import WordEntry
from ..io.config_loader import AppConfig
from ..io.resources import Location, read_text
from ..utils.logger import get_logger
from .normalization import is_valid_word, normalize_clue, normalize_word


LOGGER = get_logger(__name__)


def parse_entry(line: str, separator: str = ";") -> WordEntry:
    """Parse one ``WORD<sep>clue`` entry; later separators belong to the clue."""

    word, sep, clue = line.partition(separator)
    word = normalize_word(word)
    clue = normalize_clue(clue)
    if not sep:
        raise ValueError(f"missing '{separator}' separator")
    if not word or not clue or not is_valid_word(word):
        raise ValueError("word must be letters A-Z and clue must not be empty")
    return WordEntry(word=word, clue=clue)


def parse_preset_text(text: str, source: str = "preset") -> List[WordEntry]:
    if not text or not text.strip():
        raise PresetLoadError(f"Preset file {source} is empty")

    entries: List[WordEntry] = []
    lines = text.strip().splitlines()
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            entries.append(parse_entry(line))
        except ValueError as exc:
            LOGGER.warning("Skipping invalid line in %s (%s): %r", source, exc, line)

    if not entries:
        raise PresetLoadError(f"No valid word entries found in {source}")
    LOGGER.info("Loaded %s words from %s (%s lines)", len(entries), source, len(lines))
    return entries


def load_preset_file(location: Location) -> List[WordEntry]:
    return parse_preset_text(read_text(location), source=str(location))


class PresetLibrary:
    """Resolves preset keys from the configuration and caches parsed lists."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self._cache: Dict[str, List[WordEntry]] = {}

    def available(self) -> Dict[str, str]:
        return {key: info.display_name for key, info in self.config.presets.items()}

    def load(self, key: str) -> List[WordEntry]:
        if key in self._cache:
            LOGGER.debug("Using cached preset %s", key)
            return list(self._cache[key])
        info = self.config.presets.get(key)
        if info is None:
            raise PresetLoadError(
                f"Preset {key} not found in configuration (available: {', '.join(self.config.presets) or 'none'})"
            )
        try:
            entries = load_preset_file(info.location)
        except ResourceLoadError as exc:
            raise PresetLoadError(f"Unable to load preset {key}: {exc}") from exc
        self._cache[key] = entries
        return list(entries)


def load_preset(config: AppConfig, key: str) -> List[WordEntry]:
    """One-off lookup of ``key``; use :class:`PresetLibrary` to keep a cache."""

    return PresetLibrary(config).load(key)
