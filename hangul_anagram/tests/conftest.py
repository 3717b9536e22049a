"""Pytest fixtures for hangul-anagram tests."""

import random
from collections.abc import Generator

import pytest

from hangul_anagram.core.config import get_settings
from hangul_anagram.strategies.anagram import default_rng


@pytest.fixture
def korean_texts() -> list[str]:
    """Korean sample texts."""
    return [
        "바보",
        "안녕하세요",
        "테스트입니다",
        "타입스크립트",
        "닭볶음탕",
        "뚜껑",
        "한글 텍스트",
    ]


@pytest.fixture
def english_texts() -> list[str]:
    """Non-Hangul sample texts."""
    return [
        "hello",
        "world 123",
        "MixedCase!",
        "ㅎㅎㅋㅋ",  # compatibility jamo, not syllables
        "",
    ]


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


@pytest.fixture
def clear_caches() -> Generator[None, None, None]:
    """Clear cached settings and the default random source around a test."""
    get_settings.cache_clear()
    default_rng.cache_clear()
    yield
    get_settings.cache_clear()
    default_rng.cache_clear()
