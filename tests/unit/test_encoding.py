"""Tests for encoding detection and input reading."""

from pathlib import Path

import pytest

from csvcursor.core.tokenizer import (
    InputTooLargeError,
    Tokenizer,
    detect_encoding,
    read_bytes,
    read_file,
)


class TestDetectEncoding:
    """Tests for detect_encoding function."""

    def test_utf8_with_bom(self, encoding_utf8_bom: Path) -> None:
        """Test detection of UTF-8 with BOM."""
        data = encoding_utf8_bom.read_bytes()
        assert detect_encoding(data) == "utf-8-sig"

    def test_windows1252(self, encoding_windows1252: Path) -> None:
        """Test detection of Windows-1252."""
        data = encoding_windows1252.read_bytes()
        encoding = detect_encoding(data)
        # charset-normalizer might detect as various single-byte encodings
        assert encoding not in ("utf-8", "utf-8-sig", "utf-16")

    def test_plain_utf8(self) -> None:
        """Test detection of plain UTF-8 without BOM."""
        assert detect_encoding(b"a,b,c\n1,2,3\n") in ("utf-8", "ascii")

    def test_empty_data(self) -> None:
        """Test with empty data falls back gracefully."""
        assert detect_encoding(b"") is not None


class TestReadInput:
    """Tests for read_bytes and read_file."""

    def test_bom_is_stripped(self, encoding_utf8_bom: Path) -> None:
        text = read_file(encoding_utf8_bom)
        assert text.startswith("Müller")

    def test_windows1252_umlauts(self, encoding_windows1252: Path) -> None:
        tok = Tokenizer.from_file(encoding_windows1252, "windows-1252")
        assert tok.extract_field() == "Name"
        assert tok.extract_field() == "Ort"
        assert tok.extract_field() == "Jürgen Müller"

    def test_explicit_encoding(self) -> None:
        assert read_bytes("é,è".encode("latin-1"), "latin-1") == "é,è"

    def test_invalid_bytes_are_replaced(self) -> None:
        assert read_bytes(b"a,\xff", "utf-8") == "a,�"

    def test_max_bytes_exceeded(self) -> None:
        with pytest.raises(InputTooLargeError) as exc_info:
            read_bytes(b"a,b,c", max_bytes=3)
        assert exc_info.value.code == "CSV-IO-001"

    def test_max_bytes_file(self, people_csv: Path) -> None:
        with pytest.raises(InputTooLargeError):
            read_file(people_csv, max_bytes=5)

    def test_max_bytes_zero_is_unlimited(self, people_csv: Path) -> None:
        assert read_file(people_csv, max_bytes=0).startswith("Alice")

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / "missing.csv")

    def test_from_bytes(self) -> None:
        tok = Tokenizer.from_bytes(b"1,2")
        assert tok.get_int() == 1
        assert tok.get_int() == 2
