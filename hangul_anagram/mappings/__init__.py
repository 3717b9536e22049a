"""Phoneme tables for Hangul decomposition and synthesis."""

from hangul_anagram.mappings.jamo_map import (
    BLANK_FINAL,
    FINAL_ONLY,
    FINAL_TABLE,
    HANGUL_BASE,
    HANGUL_END,
    INITIAL_ONLY,
    INITIAL_TABLE,
    MEDIAL_TABLE,
    compose_indices,
    is_hangul_syllable,
    syllable_indices,
)

__all__ = [
    "BLANK_FINAL",
    "FINAL_ONLY",
    "FINAL_TABLE",
    "HANGUL_BASE",
    "HANGUL_END",
    "INITIAL_ONLY",
    "INITIAL_TABLE",
    "MEDIAL_TABLE",
    "compose_indices",
    "is_hangul_syllable",
    "syllable_indices",
]
