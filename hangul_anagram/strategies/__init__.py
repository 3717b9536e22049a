"""Anagram strategies for Hangul text."""

from hangul_anagram.strategies.anagram import (
    ConsonantBuckets,
    JamoAnagramStrategy,
    default_rng,
    fill_slots,
    generate,
    partition_consonants,
    synthesize,
)
from hangul_anagram.strategies.base import AnagramResult, AnagramStrategy
from hangul_anagram.strategies.syllable_shuffle import SyllableShuffleStrategy

__all__ = [
    "AnagramResult",
    "AnagramStrategy",
    "ConsonantBuckets",
    "JamoAnagramStrategy",
    "SyllableShuffleStrategy",
    "default_rng",
    "fill_slots",
    "generate",
    "partition_consonants",
    "synthesize",
]
