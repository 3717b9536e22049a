"""Jamo-level anagram synthesis for Hangul words.

The word's consonants and vowels are shuffled, the consonants are sorted
into slots they may legally occupy, and the slots are reassembled into the
same number of syllables. Output syllables are always well formed.

Consonants are free to change position: an initial ㅇ of the input may close
an output syllable, and a final ㄴ may open one. Only the restricted
consonants (ㄸ ㅃ ㅉ as initials, clusters and the blank as finals) keep
their role.
"""

import random
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache

from hangul_anagram.core.config import get_settings
from hangul_anagram.core.exceptions import InvalidSymbolLookupError, SlotAllocationError
from hangul_anagram.core.logging import get_logger
from hangul_anagram.core.protocols import RandomSource
from hangul_anagram.mappings.jamo_map import (
    BLANK_FINAL,
    FINAL_ONLY,
    FINAL_TABLE,
    INITIAL_ONLY,
    INITIAL_TABLE,
    MEDIAL_TABLE,
    compose_indices,
)
from hangul_anagram.separation import DecompositionResult, separate
from hangul_anagram.strategies.base import AnagramResult, AnagramStrategy

logger = get_logger(__name__)


@lru_cache
def default_rng() -> random.Random:
    """Process-wide random source, seeded from settings when a seed is set."""
    return random.Random(get_settings().seed)


@dataclass
class ConsonantBuckets:
    """Consonants sorted by the syllable slots they may occupy."""

    initial_only: list[str] = field(default_factory=list)
    final_only: list[str] = field(default_factory=list)
    flexible: list[str] = field(default_factory=list)


def partition_consonants(consonants: Iterable[str]) -> ConsonantBuckets:
    """Sort consonants into initial-only, final-only and flexible buckets.

    Relative order is kept inside each bucket.
    """
    buckets = ConsonantBuckets()
    for consonant in consonants:
        if consonant in INITIAL_ONLY:
            buckets.initial_only.append(consonant)
        elif consonant in FINAL_ONLY:
            buckets.final_only.append(consonant)
        else:
            buckets.flexible.append(consonant)
    return buckets


def fill_slots(buckets: ConsonantBuckets, syllable_count: int) -> tuple[list[str], list[str]]:
    """Assign bucketed consonants to initial and final slots.

    Initial slots take every initial-only consonant, then leading flexible
    consonants up to ``syllable_count``. Final slots take every final-only
    consonant, then the flexible consonants left over.

    Returns:
        (initial_slots, final_slots), each exactly ``syllable_count`` long

    Raises:
        SlotAllocationError: If either slot list cannot be filled exactly.
            Only hand-built decompositions can trigger this; separate()
            never yields more restricted consonants than syllables.
    """
    taken = min(max(syllable_count - len(buckets.initial_only), 0), len(buckets.flexible))

    initial_slots = buckets.initial_only + buckets.flexible[:taken]
    final_slots = (buckets.final_only + buckets.flexible[taken:])[:syllable_count]

    if len(initial_slots) != syllable_count or len(final_slots) != syllable_count:
        logger.warning(
            "slot_allocation_failed",
            syllable_count=syllable_count,
            initial_slots=len(initial_slots),
            final_slots=len(final_slots),
        )
        raise SlotAllocationError(syllable_count, len(initial_slots), len(final_slots))

    return initial_slots, final_slots


def _lookup(table: tuple[str, ...], symbol: str, table_name: str) -> int:
    try:
        return table.index(symbol)
    except ValueError:
        raise InvalidSymbolLookupError(symbol, table_name) from None


def synthesize(decomposition: DecompositionResult, rng: RandomSource | None = None) -> str:
    """Reassemble shuffled jamo from a decomposition into new syllables.

    The decomposition itself is left untouched; shuffling works on copies.

    Args:
        decomposition: Jamo to rearrange
        rng: Entropy source; defaults to the process-wide generator

    Returns:
        A string of exactly ``decomposition.syllable_count`` syllables

    Raises:
        SlotAllocationError: If the consonants cannot fill every slot
        InvalidSymbolLookupError: If a slot holds a symbol foreign to its table
    """
    rng = rng if rng is not None else default_rng()

    consonants = list(decomposition.consonants)
    vowels = list(decomposition.vowels)
    rng.shuffle(consonants)
    rng.shuffle(vowels)

    syllable_count = len(vowels)
    initial_slots, final_slots = fill_slots(partition_consonants(consonants), syllable_count)
    rng.shuffle(initial_slots)
    rng.shuffle(final_slots)

    syllables = []
    for initial, medial, final in zip(initial_slots, vowels, final_slots, strict=True):
        initial_idx = _lookup(INITIAL_TABLE, initial, "initial")
        medial_idx = _lookup(MEDIAL_TABLE, medial, "medial")
        final_idx = 0 if final == BLANK_FINAL else _lookup(FINAL_TABLE, final, "final")
        syllables.append(compose_indices(initial_idx, medial_idx, final_idx))

    logger.debug("anagram_generated", syllable_count=syllable_count)
    return "".join(syllables)


def generate(word: str, rng: RandomSource | None = None) -> str:
    """Generate a random jamo anagram of the Hangul syllables in word.

    Non-Hangul characters are dropped, so the result has one syllable per
    Hangul syllable of the input.

    Example: 안녕하세요 -> 녕요세한아 (one possible outcome)
    """
    return synthesize(separate(word), rng)


class JamoAnagramStrategy(AnagramStrategy):
    """Jamo-level anagram strategy.

    Each variant is an independent draw of generate(), so variants may
    repeat for short words.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        """Initialize strategy.

        Args:
            rng: Entropy source; defaults to the process-wide generator
        """
        self._rng = rng

    @property
    def name(self) -> str:
        return "jamo_anagram"

    def generate(self, text: str, num_variants: int = 1) -> list[AnagramResult]:
        """Generate jamo anagram variants."""
        self._check_num_variants(num_variants)
        decomposition = separate(text)

        return [
            AnagramResult(
                original=text,
                anagram=synthesize(decomposition, self._rng),
                strategy=self.name,
                syllable_count=decomposition.syllable_count,
            )
            for _ in range(num_variants)
        ]
