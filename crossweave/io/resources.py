"""Read text documents from a local path or an http(s) URL."""

from __future__ import annotations

from pathlib import Path
from typing import Union
from urllib.parse import urljoin

import requests

from ..core.exceptions import ResourceLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15.0

Location = Union[str, Path]


def is_url(location: Location) -> bool:
    return isinstance(location, str) and location.lower().startswith(("http://", "https://"))


def resolve_location(location: Location, base: Location) -> Location:
    """Resolve ``location`` relative to the document found at ``base``."""

    if is_url(location) or Path(location).is_absolute():
        return location
    if is_url(base):
        return urljoin(str(base), str(location))
    return Path(base).parent / location


def read_text(location: Location, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Return the document at ``location`` as text."""

    if is_url(location):
        LOGGER.debug("Fetching %s", location)
        try:
            response = requests.get(str(location), timeout=timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ResourceLoadError(f"Failed to load {location}: {exc}") from exc
        return response.text

    path = Path(location)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ResourceLoadError(f"Failed to load {path}: {exc}") from exc
