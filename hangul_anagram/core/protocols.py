"""Protocol definitions for hangul-anagram.

Abstract interfaces that let callers inject their own collaborators,
chiefly the entropy source behind anagram shuffling.
"""

from collections.abc import MutableSequence
from typing import Any, Protocol


class RandomSource(Protocol):
    """Protocol for the entropy source used to shuffle jamo.

    ``random.Random`` and the ``random`` module both satisfy it. Pass a
    seeded ``random.Random`` for reproducible output.
    """

    def shuffle(self, x: MutableSequence[Any]) -> None:
        """Shuffle ``x`` in place with a uniform random permutation.

        Args:
            x: Sequence to permute.
        """
        ...
