"""Base classes for anagram strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnagramResult:
    """Result of an anagram attempt.

    Attributes:
        original: Original input text
        anagram: Rearranged text
        strategy: Name of the strategy used
        syllable_count: Number of Hangul syllables in the anagram
    """

    original: str
    anagram: str
    strategy: str
    syllable_count: int

    def __post_init__(self) -> None:
        if self.syllable_count < 0:
            raise ValueError(f"syllable_count must be non-negative, got {self.syllable_count}")


class AnagramStrategy(ABC):
    """Abstract base class for anagram strategies.

    All strategies must implement the generate method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the strategy name."""
        ...

    @abstractmethod
    def generate(self, text: str, num_variants: int = 1) -> list[AnagramResult]:
        """Generate anagram variants for the given text.

        Args:
            text: Input text to rearrange
            num_variants: Number of variants to generate

        Returns:
            List of AnagramResult objects

        Raises:
            ValueError: If num_variants is less than 1
        """
        ...

    @staticmethod
    def _check_num_variants(num_variants: int) -> None:
        if num_variants < 1:
            raise ValueError(f"num_variants must be at least 1, got {num_variants}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
