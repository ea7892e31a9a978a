"""noitu: rule engine for the Vietnamese word-chain game (nối từ).

Players alternate two-syllable word pairs; each pair must start with the
syllable the previous pair ended on, compared without diacritics.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from .dictionary import ensure_dictionary, load_dictionary, validate_dictionary
from .models import GameState, NextWordResult, ValidationResult, WordPair
from .next_word_finder import NextWordFinder, RandomSource
from .normalize import normalize_vietnamese, pair_key
from .word_checker import WordChecker

__all__ = [
    "WordChecker",
    "NextWordFinder",
    "WordPair",
    "ValidationResult",
    "NextWordResult",
    "GameState",
    "normalize_vietnamese",
    "pair_key",
    "validate_dictionary",
    "ensure_dictionary",
    "load_dictionary",
    "create_word_checker",
    "create_next_word_finder",
]


def create_word_checker(dictionary: Mapping[str, Sequence[str]]) -> WordChecker:
    return WordChecker(dictionary)


def create_next_word_finder(
    dictionary: Mapping[str, Sequence[str]],
    rng: Optional[RandomSource] = None,
) -> NextWordFinder:
    return NextWordFinder(dictionary, rng=rng)
