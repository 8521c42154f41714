"""Tests for the URL-safe text form."""

from __future__ import annotations

import pytest

from bloomcodec import (
    SCHEMA_VERSION,
    CatalogLengthExceeded,
    CorruptEncoding,
    Status,
    decode_text,
    encode,
    encode_text,
    from_text,
    to_text,
)

U = Status.UNCOLLECTED


class TestToText:
    """Test blob to text mapping."""

    def test_known_value(self, sample_vector: list[Status]) -> None:
        """The sample blob maps to a short unpadded string."""
        assert to_text(encode(sample_vector)) == "AWM"

    def test_no_padding_or_unsafe_characters(self) -> None:
        """Output never contains '=', '+' or '/'."""
        text = to_text(bytes(range(256)))

        assert "=" not in text
        assert "+" not in text
        assert "/" not in text

    def test_empty(self) -> None:
        """An empty blob is an empty string."""
        assert to_text(b"") == ""


class TestFromText:
    """Test text to blob mapping."""

    def test_reverses_to_text(self) -> None:
        """from_text undoes to_text for every padding remainder."""
        for length in range(10):
            blob = bytes(range(200, 200 + length))
            assert from_text(to_text(blob)) == blob

    def test_accepts_surrounding_whitespace(self) -> None:
        """Copy-pasted values may carry whitespace."""
        assert from_text("  AWM\n") == bytes([SCHEMA_VERSION, 0b01_10_00_11])

    @pytest.mark.parametrize("text", ["AW M", "AWM=", "AW+M", "AW/M", "äöü", "AW%4D"])
    def test_characters_outside_alphabet(self, text: str) -> None:
        """Anything outside A-Z, a-z, 0-9, '-' and '_' is corrupt."""
        with pytest.raises(CorruptEncoding, match="alphabet"):
            from_text(text)

    def test_impossible_length(self) -> None:
        """A length of 4k+1 characters cannot come from any blob."""
        with pytest.raises(CorruptEncoding, match="length"):
            from_text("AWMAA")


class TestTextCodec:
    """Test the text-level encode/decode pair."""

    def test_roundtrip(self, sample_vector: list[Status]) -> None:
        """Vectors survive the text form."""
        assert decode_text(encode_text(sample_vector), 4) == sample_vector

    def test_growth(self, sample_vector: list[Status]) -> None:
        """Catalog growth applies through the text form as well."""
        assert decode_text(encode_text(sample_vector), 6) == sample_vector + [U, U]

    @pytest.mark.parametrize("text", ["", "!!!", "AWM=", "A", "_____", "zz"])
    def test_corrupt_text_resets(self, text: str) -> None:
        """Corrupt text yields a blank vector instead of raising."""
        assert decode_text(text, 9) == [U] * 9

    def test_catalog_length_out_of_range(self) -> None:
        """Bad catalog lengths are still caller errors."""
        with pytest.raises(CatalogLengthExceeded):
            decode_text("AWM", 300)
