"""Core module for hangul-anagram.

This module provides core functionality including:
- Configuration management (Settings, get_settings)
- Custom exceptions (HangulAnagramException and subclasses)
- Protocol definitions for dependency injection
- Logging utilities
"""

from hangul_anagram.core.config import Settings, get_settings
from hangul_anagram.core.exceptions import (
    HangulAnagramException,
    InvalidSymbolLookupError,
    SlotAllocationError,
)
from hangul_anagram.core.logging import get_logger, setup_logging
from hangul_anagram.core.protocols import RandomSource

__all__ = [
    "HangulAnagramException",
    "InvalidSymbolLookupError",
    "RandomSource",
    "Settings",
    "SlotAllocationError",
    "get_logger",
    "get_settings",
    "setup_logging",
]
