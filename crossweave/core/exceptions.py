"""Custom exception hierarchy for crossword generation."""

from typing import Iterable, List


class CrosswordError(Exception):
    """Base exception for generator failures."""


class ValidationError(CrosswordError):
    """Raised when crossword input or layout integrity checks fail."""


class InvalidWordListError(ValidationError):
    """Raised when the word list is rejected before any attempt runs."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems: List[str] = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid word list")


class ConfigurationError(CrosswordError):
    """Raised when generator settings are out of range."""


class ResourceLoadError(CrosswordError):
    """Raised when a local file or remote document cannot be read."""


class PresetLoadError(CrosswordError):
    """Raised when a preset word list is missing or has no usable entries."""
