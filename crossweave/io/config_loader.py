"""Load generator settings and the preset registry.

The document mirrors ``server-config.json``::

    {
      "gridSize": {"default": 25, "min": 10, "max": 50},
      "generation": {"mode": "maxOverlap", "enforceAllWords": true,
                     "maxAttempts": 1000, "timeoutSeconds": 10},
      "presets": {"animals": {"displayName": "Animals", "filePath": "presets/animals.txt"}}
    }

Any failure falls back to the built-in defaults so generation always
receives a usable configuration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..core.exceptions import ConfigurationError, ResourceLoadError
from ..engine.generator import GeneratorConfig
from ..utils.logger import get_logger
from .resources import Location, read_text, resolve_location


LOGGER = get_logger(__name__)

DEFAULT_CONFIG_LOCATION = "server-config.json"


@dataclass(frozen=True)
class PresetInfo:
    key: str
    display_name: str
    location: Location


@dataclass
class AppConfig:
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    presets: Dict[str, PresetInfo] = field(default_factory=dict)
    source: Optional[Location] = None
    is_fallback: bool = False


def default_configuration() -> AppConfig:
    return AppConfig(generator=GeneratorConfig(), presets={}, is_fallback=True)


def parse_presets(doc: Mapping[str, Any], base: Location) -> Dict[str, PresetInfo]:
    presets: Dict[str, PresetInfo] = {}
    raw = doc.get("presets") or {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError("'presets' must be an object")
    for key, entry in raw.items():
        if not isinstance(entry, Mapping) or not entry.get("filePath"):
            LOGGER.warning("Skipping preset %s without a filePath", key)
            continue
        presets[key] = PresetInfo(
            key=key,
            display_name=entry.get("displayName") or key,
            location=resolve_location(entry["filePath"], base),
        )
    return presets


def parse_configuration(doc: Mapping[str, Any], source: Location = DEFAULT_CONFIG_LOCATION) -> AppConfig:
    if not isinstance(doc, Mapping):
        raise ConfigurationError("Configuration root must be an object")
    return AppConfig(
        generator=GeneratorConfig.from_mapping(doc),
        presets=parse_presets(doc, source),
        source=source,
    )


def load_configuration(location: Location = DEFAULT_CONFIG_LOCATION) -> AppConfig:
    """Load and parse the configuration, falling back to defaults on any error."""

    try:
        doc = json.loads(read_text(location))
        config = parse_configuration(doc, location)
    except (ResourceLoadError, ConfigurationError, json.JSONDecodeError) as exc:
        LOGGER.warning("Failed to load configuration (%s); using default settings", exc)
        return default_configuration()
    LOGGER.info(
        "Configuration loaded from %s (grid %s, mode %s, %s presets)",
        location, config.generator.effective_grid_size,
        config.generator.mode.value, len(config.presets),
    )
    return config
