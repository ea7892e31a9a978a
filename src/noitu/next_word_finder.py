"""Move selection for computer turns.

Candidates come from ``WordChecker.get_possible_next_words``; pairs already in
the game history (both syllables compared after folding) are excluded and one of the rest is
drawn uniformly. The random source is injected so games can be replayed.
"""

from __future__ import annotations

import random
from typing import List, Mapping, Optional, Protocol, Sequence

from .models import NextWordResult, WordPair
from .normalize import fold_syllable
from .word_checker import WordChecker

MAX_ALTERNATIVES = 5
MAX_OPENING_MOVES = 10


class RandomSource(Protocol):
    def randrange(self, n: int) -> int:
        ...


class NextWordFinder:
    def __init__(
        self,
        dictionary: Mapping[str, Sequence[str]],
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._dictionary = dictionary
        self._checker = WordChecker(dictionary)
        self._rng = rng if rng is not None else random.Random()

    @property
    def checker(self) -> WordChecker:
        return self._checker

    def _pick(self, items: Sequence):
        return items[self._rng.randrange(len(items))]

    def _random_opening(self) -> Optional[WordPair]:
        # None when the drawn key has no values; callers do not retry.
        first = self._pick(list(self._dictionary))
        seconds = self._dictionary.get(first)
        if not seconds:
            return None
        return WordPair(first=first, second=self._pick(seconds))

    def _available(self, candidates: List[WordPair], history: Sequence[WordPair]) -> List[WordPair]:
        # Compare field by field; syllables from the dictionary may contain the key separator.
        used = {(fold_syllable(h.first), fold_syllable(h.second)) for h in history}
        return [
            c for c in candidates
            if (fold_syllable(c.first), fold_syllable(c.second)) not in used
        ]

    def find_first_word(self) -> NextWordResult:
        """Random opening move; fails if the dictionary is empty or the drawn key has no values."""
        if not self._dictionary:
            return NextWordResult(word=None, found=False)
        pair = self._random_opening()
        if pair is None:
            return NextWordResult(word=None, found=False)
        return NextWordResult(word=pair, found=True)

    def find_next_word(
        self,
        current: Optional[WordPair],
        history: Sequence[WordPair] = (),
    ) -> NextWordResult:
        """Pick a move chaining from ``current`` that is not in ``history``.

        When every candidate was already played the result is not found and
        ``alternatives`` carries the full unfiltered candidate list. On success
        ``alternatives`` previews the first few available pairs, which may or
        may not include the chosen one.
        """
        if current is None:
            return self.find_first_word()

        candidates = self._checker.get_possible_next_words(current.second)
        if not candidates:
            return NextWordResult(word=None, found=False)

        available = self._available(candidates, history)
        if not available:
            return NextWordResult(word=None, found=False, alternatives=candidates)

        return NextWordResult(
            word=self._pick(available),
            found=True,
            alternatives=available[:MAX_ALTERNATIVES],
        )

    def get_all_possible_moves(
        self,
        current: Optional[WordPair],
        history: Sequence[WordPair] = (),
    ) -> List[WordPair]:
        if current is None:
            # Draws with replacement: may repeat pairs or return fewer than the cap.
            moves: List[WordPair] = []
            for _ in range(min(MAX_OPENING_MOVES, len(self._dictionary))):
                pair = self._random_opening()
                if pair is not None:
                    moves.append(pair)
            return moves

        candidates = self._checker.get_possible_next_words(current.second)
        return self._available(candidates, history)

    def can_continue(
        self,
        current: Optional[WordPair],
        history: Sequence[WordPair] = (),
    ) -> bool:
        return len(self.get_all_possible_moves(current, history)) > 0
