"""Tests for custom exception hierarchy."""

import pytest

from hangul_anagram.core.exceptions import (
    HangulAnagramException,
    InvalidSymbolLookupError,
    SlotAllocationError,
)


class TestHangulAnagramException:
    """Tests for base HangulAnagramException."""

    def test_default_message(self) -> None:
        """Test exception with default empty message."""
        exc = HangulAnagramException()
        assert exc.message == ""
        assert str(exc) == ""

    def test_custom_message(self) -> None:
        """Test exception with custom message."""
        exc = HangulAnagramException("Custom error message")
        assert exc.message == "Custom error message"
        assert str(exc) == "Custom error message"

    def test_is_exception(self) -> None:
        """Test that HangulAnagramException inherits from Exception."""
        assert isinstance(HangulAnagramException("test"), Exception)


class TestInvalidSymbolLookupError:
    """Tests for InvalidSymbolLookupError."""

    def test_message_and_attributes(self) -> None:
        """Test the symbol and table are kept."""
        exc = InvalidSymbolLookupError("x", "initial")

        assert exc.symbol == "x"
        assert exc.table == "initial"
        assert exc.message == "Symbol 'x' not found in initial table"

    def test_inheritance(self) -> None:
        """Test that InvalidSymbolLookupError inherits from HangulAnagramException."""
        assert isinstance(InvalidSymbolLookupError("x", "final"), HangulAnagramException)

    def test_can_be_raised_and_caught(self) -> None:
        """Test that the exception can be caught through the base class."""
        with pytest.raises(HangulAnagramException, match="medial table"):
            raise InvalidSymbolLookupError("a", "medial")


class TestSlotAllocationError:
    """Tests for SlotAllocationError."""

    def test_message_and_attributes(self) -> None:
        """Test the slot counts are kept."""
        exc = SlotAllocationError(3, 1, 3)

        assert exc.expected == 3
        assert exc.initial_slots == 1
        assert exc.final_slots == 3
        assert exc.message == (
            "Cannot fill 3 syllables: 1 initial and 3 final consonants available"
        )

    def test_inheritance(self) -> None:
        """Test that SlotAllocationError inherits from HangulAnagramException."""
        exc = SlotAllocationError(1, 0, 1)
        assert isinstance(exc, HangulAnagramException)
        assert isinstance(exc, Exception)
