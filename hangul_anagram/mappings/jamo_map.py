"""Hangul phoneme tables and syllable index arithmetic.

A precomposed syllable in U+AC00..U+D7A3 encodes three table indices:

    code = 0xAC00 + initial * 588 + medial * 28 + final

where 588 = 21 medials * 28 finals.
"""

# Hangul syllable Unicode range
HANGUL_BASE = 0xAC00
HANGUL_END = 0xD7A3

MEDIAL_COUNT = 21
FINAL_COUNT = 28
INITIAL_STRIDE = MEDIAL_COUNT * FINAL_COUNT

# Stands in for "no final consonant" at FINAL_TABLE[0]
BLANK_FINAL = " "

# Initial consonants (Choseong) - 19
INITIAL_TABLE: tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Medial vowels (Jungseong) - 21
MEDIAL_TABLE: tuple[str, ...] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ",
    "ㅙ", "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)

# Final consonants (Jongseong) - 28, blank first
FINAL_TABLE: tuple[str, ...] = (
    BLANK_FINAL, "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Tense consonants that never close a syllable
INITIAL_ONLY: frozenset[str] = frozenset({"ㄸ", "ㅃ", "ㅉ"})

# Blank plus the consonant clusters, which never open a syllable
FINAL_ONLY: frozenset[str] = frozenset({
    BLANK_FINAL,
    "ㄳ", "ㄵ", "ㄶ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅄ",
})


def is_hangul_syllable(char: str) -> bool:
    """Check if character is a complete Hangul syllable (가-힣)."""
    if len(char) != 1:
        return False
    return HANGUL_BASE <= ord(char) <= HANGUL_END


def syllable_indices(char: str) -> tuple[int, int, int] | None:
    """Split a Hangul syllable into its (initial, medial, final) table indices.

    Args:
        char: Single character

    Returns:
        Index triple, or None if not a Hangul syllable
    """
    if not is_hangul_syllable(char):
        return None

    offset = ord(char) - HANGUL_BASE
    initial = offset // INITIAL_STRIDE
    medial = (offset // FINAL_COUNT) % MEDIAL_COUNT
    final = offset % FINAL_COUNT

    return initial, medial, final


def compose_indices(initial: int, medial: int, final: int = 0) -> str:
    """Build the syllable for the given table indices.

    Example: (18, 0, 4) -> 한

    Raises:
        ValueError: If any index is out of range for its table
    """
    if not 0 <= initial < len(INITIAL_TABLE):
        raise ValueError(f"initial index out of range: {initial}")
    if not 0 <= medial < MEDIAL_COUNT:
        raise ValueError(f"medial index out of range: {medial}")
    if not 0 <= final < FINAL_COUNT:
        raise ValueError(f"final index out of range: {final}")

    return chr(HANGUL_BASE + initial * INITIAL_STRIDE + medial * FINAL_COUNT + final)
