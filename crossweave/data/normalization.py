"""Shared helpers for word and clue normalization."""

from __future__ import annotations

import re

WORD_RE = re.compile(r"^[A-Z]+$")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Return ``text`` trimmed and uppercased; letters are not filtered."""

    if not text:
        return ""
    return text.strip().upper()


def normalize_clue(text: str) -> str:
    if not text:
        return ""
    return WHITESPACE_RE.sub(" ", text.strip())


def is_valid_word(word: str) -> bool:
    return bool(WORD_RE.match(word))


__all__ = ["normalize_word", "normalize_clue", "is_valid_word", "WORD_RE"]
