"""
Unit tests for the scalar codec.

Tests zigzag packing of single deltas and the cursor-based decoder.
"""
import pytest

import sys
sys.path.insert(0, 'src')

from polyline_codec.errors import ErrorCode, MalformedPolylineError
from polyline_codec.scalar import decode_scalar, encode_scalar


# =============================================================================
# Test encode_scalar
# =============================================================================

class TestEncodeScalar:
    """Tests for encode_scalar."""

    def test_zero(self):
        """Zero is a single '?'."""
        assert encode_scalar(0) == "?"

    def test_small_values(self):
        """Small deltas of either sign fit in one character."""
        assert encode_scalar(-1) == "@"
        assert encode_scalar(1) == "A"
        assert encode_scalar(-2) == "B"
        assert encode_scalar(15) == "]"
        assert encode_scalar(-16) == "^"

    def test_first_multi_chunk_value(self):
        """16 needs a continuation chunk."""
        assert encode_scalar(16) == "_@"

    def test_reference_latitude(self):
        """38.5 at precision 5 matches Google's worked example."""
        assert encode_scalar(3850000) == "_p~iF"

    def test_reference_longitude(self):
        """-120.2 at precision 5 matches Google's worked example."""
        assert encode_scalar(-12020000) == "~ps|U"

    def test_output_alphabet(self):
        """Every character lies in '?'..'~'."""
        for value in (0, 1, -1, 31, -32, 2 ** 31, -(2 ** 31), 10 ** 15):
            assert all("?" <= c <= "~" for c in encode_scalar(value))


# =============================================================================
# Test decode_scalar
# =============================================================================

class TestDecodeScalar:
    """Tests for decode_scalar."""

    def test_single_char(self):
        """One-char scalars advance the cursor by one."""
        assert decode_scalar("?", 0) == (0, 1)
        assert decode_scalar("@", 0) == (-1, 1)
        assert decode_scalar("A", 0) == (1, 1)

    def test_reference_latitude(self):
        """Decodes Google's worked example."""
        assert decode_scalar("_p~iF", 0) == (3850000, 5)

    def test_decodes_from_cursor(self):
        """Decoding starts at the given index."""
        assert decode_scalar("_p~iF~ps|U", 5) == (-12020000, 10)

    def test_stops_at_terminator(self):
        """Trailing characters are left for the next scalar."""
        value, index = decode_scalar("A@??", 0)
        assert value == 1
        assert index == 1

    def test_large_values(self):
        """Values beyond 64 bits survive encoding."""
        for value in (2 ** 40, -(2 ** 40), 2 ** 70 + 3, -(2 ** 70) - 3):
            encoded = encode_scalar(value)
            assert decode_scalar(encoded, 0) == (value, len(encoded))

    def test_dangling_continuation(self):
        """String ending mid-scalar is malformed."""
        with pytest.raises(MalformedPolylineError) as exc_info:
            decode_scalar("_p~i", 0)

        assert exc_info.value.position == 4
        assert exc_info.value.code == ErrorCode.MALFORMED_POLYLINE

    def test_empty_from_cursor(self):
        """Cursor at end of string is malformed."""
        with pytest.raises(MalformedPolylineError):
            decode_scalar("??", 2)

    def test_character_below_alphabet(self):
        """Characters before '?' are rejected."""
        with pytest.raises(MalformedPolylineError) as exc_info:
            decode_scalar("_ ", 0)

        assert exc_info.value.position == 1

    def test_character_above_alphabet(self):
        """Characters after '~' are rejected."""
        with pytest.raises(MalformedPolylineError):
            decode_scalar("\x7f", 0)

    def test_is_value_error(self):
        """Malformed input is also a ValueError."""
        with pytest.raises(ValueError):
            decode_scalar("_", 0)
