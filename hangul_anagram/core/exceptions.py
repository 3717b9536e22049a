"""Custom exception hierarchy for hangul-anagram.

Decomposition never fails: non-Hangul input is filtered, not rejected.
These exceptions only surface from anagram synthesis when the consonants
handed to it cannot be placed into syllable slots.
"""


class HangulAnagramException(Exception):  # noqa: N818
    """Base exception for hangul-anagram.

    All custom exceptions in hangul-anagram inherit from this class, so
    callers can catch every library-specific failure with one except clause.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class InvalidSymbolLookupError(HangulAnagramException):
    """A jamo symbol was not found in the table for its slot.

    Unreachable for decompositions produced by ``separate``; seeing it means
    a classification set disagrees with the phoneme tables, or a
    hand-built decomposition carried a foreign symbol.
    """

    def __init__(self, symbol: str, table: str) -> None:
        """Initialize the exception.

        Args:
            symbol: The symbol that failed the lookup.
            table: Name of the table that was searched.
        """
        super().__init__(f"Symbol {symbol!r} not found in {table} table")
        self.symbol = symbol
        self.table = table


class SlotAllocationError(HangulAnagramException):
    """Consonant buckets cannot fill every syllable slot.

    Raised when the initial-only or final-only bucket alone exceeds the
    syllable count, which leaves the opposite slot list short.
    """

    def __init__(self, expected: int, initial_slots: int, final_slots: int) -> None:
        """Initialize the exception.

        Args:
            expected: Number of syllables to synthesize.
            initial_slots: Number of initial consonants available.
            final_slots: Number of final consonants available.
        """
        super().__init__(
            f"Cannot fill {expected} syllables: "
            f"{initial_slots} initial and {final_slots} final consonants available"
        )
        self.expected = expected
        self.initial_slots = initial_slots
        self.final_slots = final_slots
