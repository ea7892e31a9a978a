"""Validation of submitted word pairs and of chain connections.

The checker keeps the dictionary as supplied and a derived index keyed by the
folded first syllable. The index is built once in the constructor and never
patched afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Mapping, Optional, Sequence

from .models import (
    INVALID_FORMAT,
    NO_CONNECTION,
    WORD_NOT_FOUND,
    WORD_USED,
    ValidationResult,
    WordPair,
)
from .normalize import fold_syllable, normalize_text_nfc, pair_key

# Precomposed Vietnamese letters beyond ASCII; uppercase forms are derived.
_VIETNAMESE_LETTERS = (
    "àáảãạăằắẳẵặâầấẩẫậ"
    "đ"
    "èéẻẽẹêềếểễệ"
    "ìíỉĩị"
    "òóỏõọôồốổỗộơờớởỡợ"
    "ùúủũụưừứửữự"
    "ỳýỷỹỵ"
)
_SYLLABLE_RE = re.compile(f"[a-zA-Z{_VIETNAMESE_LETTERS}{_VIETNAMESE_LETTERS.upper()}]+")

MSG_INVALID_FORMAT = "Từ phải gồm đúng 2 chữ cách nhau bởi dấu cách"
MSG_WORD_USED = "Từ này đã được sử dụng trong game"


@dataclass
class FormatCheck:
    is_valid: bool
    words: Optional[List[str]] = None


def is_vietnamese_syllable(token: str) -> bool:
    """True if token is made only of ASCII or precomposed Vietnamese letters (any case)."""
    if not token:
        return False
    return _SYLLABLE_RE.fullmatch(token) is not None


class WordChecker:
    def __init__(self, dictionary: Mapping[str, Sequence[str]]) -> None:
        self._dictionary = dictionary
        self._index: Dict[str, List[str]] = {}
        for key, values in dictionary.items():
            # Keys that fold together share one merged entry.
            self._index.setdefault(fold_syllable(key), []).extend(
                normalize_text_nfc(v).lower() for v in values
            )

    @property
    def dictionary(self) -> Mapping[str, Sequence[str]]:
        return self._dictionary

    def validate_format(self, text: str) -> FormatCheck:
        """Check that input is exactly two Vietnamese syllables.

        Returns the tokens as authored (case and diacritics preserved).
        """
        trimmed = (text or "").strip()
        if not trimmed:
            return FormatCheck(is_valid=False)
        words = trimmed.split()
        if len(words) != 2:
            return FormatCheck(is_valid=False)
        if not all(is_vietnamese_syllable(w) for w in words):
            return FormatCheck(is_valid=False)
        return FormatCheck(is_valid=True, words=words)

    def is_in_dictionary(self, first: str, second: str) -> bool:
        """Lookup with the first syllable folded and the second only lowercased.

        Diacritics on the second syllable are significant.
        """
        seconds = self._index.get(fold_syllable(first))
        if not seconds:
            return False
        return normalize_text_nfc(second).lower() in seconds

    def validate_word(self, text: str, used_words: AbstractSet[str] = frozenset()) -> ValidationResult:
        """Validate a submitted pair: format, dictionary membership, reuse."""
        check = self.validate_format(text)
        if not check.is_valid:
            return ValidationResult(is_valid=False, reason=INVALID_FORMAT, error=MSG_INVALID_FORMAT)

        first, second = check.words
        if not self.is_in_dictionary(first, second):
            return ValidationResult(
                is_valid=False,
                reason=WORD_NOT_FOUND,
                error=f'Từ "{first} {second}" không có trong từ điển',
            )

        if pair_key(first, second) in used_words:
            return ValidationResult(is_valid=False, reason=WORD_USED, error=MSG_WORD_USED)

        return ValidationResult(is_valid=True)

    def can_connect(self, first_pair: WordPair, second_pair: WordPair) -> bool:
        return fold_syllable(first_pair.second) == fold_syllable(second_pair.first)

    def get_possible_next_words(self, ending: str) -> List[WordPair]:
        """All pairs starting with ``ending``, in authored spelling.

        Scans the raw dictionary rather than the index so returned pairs keep
        their authored diacritics. Duplicates are kept.
        """
        target = fold_syllable(ending)
        pairs: List[WordPair] = []
        for first, seconds in self._dictionary.items():
            if fold_syllable(first) != target:
                continue
            for second in seconds:
                pairs.append(WordPair(first=first, second=second))
        return pairs

    def validate_connection(self, current: Optional[WordPair], new: WordPair) -> ValidationResult:
        if current is None:
            # First move of a game.
            return ValidationResult(is_valid=True)
        if not self.can_connect(current, new):
            return ValidationResult(
                is_valid=False,
                reason=NO_CONNECTION,
                error=f'Từ "{new.first} {new.second}" không nối được với "{current.second}"',
            )
        return ValidationResult(is_valid=True)
