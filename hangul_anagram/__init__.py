"""Hangul jamo decomposition and anagram synthesis."""

from hangul_anagram.core import (
    HangulAnagramException,
    InvalidSymbolLookupError,
    RandomSource,
    Settings,
    SlotAllocationError,
    get_logger,
    get_settings,
    setup_logging,
)
from hangul_anagram.separation import DecompositionResult, all_jamo, separate
from hangul_anagram.strategies import (
    AnagramResult,
    AnagramStrategy,
    JamoAnagramStrategy,
    SyllableShuffleStrategy,
    generate,
    synthesize,
)

__all__ = [
    "AnagramResult",
    "AnagramStrategy",
    "DecompositionResult",
    "HangulAnagramException",
    "InvalidSymbolLookupError",
    "JamoAnagramStrategy",
    "RandomSource",
    "Settings",
    "SlotAllocationError",
    "SyllableShuffleStrategy",
    "all_jamo",
    "generate",
    "get_logger",
    "get_settings",
    "separate",
    "setup_logging",
    "synthesize",
]
