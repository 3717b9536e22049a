"""Hangul syllable decomposition into jamo.

Characters outside the syllable block (Latin, digits, punctuation,
compatibility jamo) are dropped without error.
"""

from dataclasses import dataclass

from hangul_anagram.mappings.jamo_map import (
    FINAL_TABLE,
    INITIAL_TABLE,
    MEDIAL_TABLE,
    syllable_indices,
)


@dataclass(frozen=True, slots=True)
class DecompositionResult:
    """Jamo split out of a Hangul string.

    Attributes:
        consonants: Initial then final consonant for each syllable, with
            BLANK_FINAL standing in for a missing final.
            Example: 안녕 -> (ㅇ, ㄴ, ㄴ, ㅇ)
        vowels: Medial vowel for each syllable.
            Example: 안녕 -> (ㅏ, ㅕ)
    """

    consonants: tuple[str, ...]
    vowels: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.consonants) != 2 * len(self.vowels):
            raise ValueError(
                f"expected {2 * len(self.vowels)} consonants for "
                f"{len(self.vowels)} vowels, got {len(self.consonants)}"
            )

    @property
    def syllable_count(self) -> int:
        """Number of syllables decomposed."""
        return len(self.vowels)


def separate(text: str) -> DecompositionResult:
    """Split Hangul syllables in text into consonants and vowels.

    Every syllable contributes two consonants (initial, final) and one vowel,
    so a syllable without a final still yields BLANK_FINAL.

    Example: 하세 -> consonants (ㅎ, " ", ㅅ, " "), vowels (ㅏ, ㅔ)
    """
    consonants: list[str] = []
    vowels: list[str] = []

    for char in text:
        indices = syllable_indices(char)
        if indices is None:
            continue
        initial, medial, final = indices
        consonants.append(INITIAL_TABLE[initial])
        consonants.append(FINAL_TABLE[final])
        vowels.append(MEDIAL_TABLE[medial])

    return DecompositionResult(consonants=tuple(consonants), vowels=tuple(vowels))


def all_jamo(text: str) -> list[str]:
    """Flatten Hangul syllables in text into a single jamo list.

    Unlike separate(), syllables without a final contribute nothing for it.

    Example: 안녕 -> [ㅇ, ㅏ, ㄴ, ㄴ, ㅕ, ㅇ]
    """
    components: list[str] = []

    for char in text:
        indices = syllable_indices(char)
        if indices is None:
            continue
        initial, medial, final = indices
        components.append(INITIAL_TABLE[initial])
        components.append(MEDIAL_TABLE[medial])
        if final != 0:
            components.append(FINAL_TABLE[final])

    return components
