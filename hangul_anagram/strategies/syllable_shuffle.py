"""Syllable-level shuffle strategy."""

import re

from hangul_anagram.core.protocols import RandomSource
from hangul_anagram.mappings.jamo_map import is_hangul_syllable
from hangul_anagram.strategies.anagram import default_rng
from hangul_anagram.strategies.base import AnagramResult, AnagramStrategy

_WHITESPACE = re.compile(r"(\s+)")


class SyllableShuffleStrategy(AnagramStrategy):
    """Permute whole syllables inside each word.

    Unlike the jamo anagram, syllables stay intact, so the jamo multiset is
    preserved exactly. Non-Hangul characters and whitespace keep their
    positions.

    Examples:
        - 오랜만에 -> 만에오랜
        - 외국 여행 -> 국외 행여
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        """Initialize strategy.

        Args:
            rng: Entropy source; defaults to the process-wide generator
        """
        self._rng = rng

    @property
    def name(self) -> str:
        return "syllable_shuffle"

    def generate(self, text: str, num_variants: int = 1) -> list[AnagramResult]:
        """Generate syllable shuffle variants."""
        self._check_num_variants(num_variants)
        syllable_count = sum(1 for char in text if is_hangul_syllable(char))

        return [
            AnagramResult(
                original=text,
                anagram=self._shuffle_text(text),
                strategy=self.name,
                syllable_count=syllable_count,
            )
            for _ in range(num_variants)
        ]

    def _shuffle_text(self, text: str) -> str:
        return "".join(self._shuffle_word(part) for part in _WHITESPACE.split(text))

    def _shuffle_word(self, word: str) -> str:
        """Shuffle Hangul syllables among their own positions in word."""
        rng = self._rng if self._rng is not None else default_rng()

        chars = list(word)
        positions = [i for i, char in enumerate(chars) if is_hangul_syllable(char)]
        syllables = [chars[i] for i in positions]
        rng.shuffle(syllables)

        for position, syllable in zip(positions, syllables, strict=True):
            chars[position] = syllable
        return "".join(chars)
