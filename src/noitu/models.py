"""Value types shared by the checker, the finder and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

from .normalize import pair_key

# Validation reason codes
INVALID_FORMAT = "invalid_format"
WORD_NOT_FOUND = "word_not_found"
WORD_USED = "word_used"
NO_CONNECTION = "no_connection"
INVALID_CHARACTERS = "invalid_characters"  # reserved, never produced


@dataclass(frozen=True)
class WordPair:
    """One move: an ordered pair of syllables, kept as authored."""
    first: str
    second: str

    @property
    def key(self) -> str:
        return pair_key(self.first, self.second)

    @classmethod
    def from_text(cls, text: str) -> "WordPair":
        """Build a pair from "first second"; raises ValueError otherwise."""
        parts = (text or "").split()
        if len(parts) != 2:
            raise ValueError(f"Expected two syllables, got: {text!r}")
        return cls(first=parts[0], second=parts[1])

    def __str__(self) -> str:
        return f"{self.first} {self.second}"


@dataclass
class ValidationResult:
    """Outcome of a validation call.

    Attributes:
        is_valid: Whether the input passed
        reason: One of the reason codes above when invalid, else None
        error: Vietnamese message for end-user display when invalid
    """
    is_valid: bool
    reason: Optional[str] = None
    error: Optional[str] = None


@dataclass
class NextWordResult:
    """Outcome of a next-move search.

    Attributes:
        word: Chosen pair, or None when nothing could be played
        found: Whether a pair was chosen
        alternatives: Preview of available pairs when found; the full
            unfiltered candidate list when all candidates were already used
    """
    word: Optional[WordPair]
    found: bool
    alternatives: Optional[List[WordPair]] = None


@dataclass
class GameState:
    current_word: Optional[WordPair] = None
    history: List[WordPair] = field(default_factory=list)
    used_words: Set[str] = field(default_factory=set)
    is_game_active: bool = True

    def record(self, pair: WordPair) -> None:
        self.history.append(pair)
        self.used_words.add(pair.key)
        self.current_word = pair
