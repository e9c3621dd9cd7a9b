"""
Pytest configuration and fixtures for csvcursor tests.

Provides fixtures for:
- Sample CSV files written to a temporary directory
- Large file generation for robustness tests
"""

from __future__ import annotations

from pathlib import Path

import pytest

# =============================================================================
# Sample Content
# =============================================================================

PEOPLE_CSV = 'Alice,30,true\nBob,25,false\n"Smith, Jr.",41,1\n'
QUOTED_CSV = '"say ""hi""","a,b"\n"line1\nline2",x'
BROKEN_QUOTES_CSV = 'a,"unclosed\n'
BLANK_FIELDS_CSV = "a,,c\nd, ,f\n"


def _write(path: Path, content: str, encoding: str = "utf-8") -> Path:
    path.write_bytes(content.encode(encoding))
    return path


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def people_csv(tmp_path: Path) -> Path:
    """Three records of name, age, active."""
    return _write(tmp_path / "people.csv", PEOPLE_CSV)


@pytest.fixture
def quoted_csv(tmp_path: Path) -> Path:
    """Fields with escaped quotes, commas and newlines inside quotes."""
    return _write(tmp_path / "quoted.csv", QUOTED_CSV)


@pytest.fixture
def broken_quotes(tmp_path: Path) -> Path:
    """File ending inside a quoted field."""
    return _write(tmp_path / "broken_quotes.csv", BROKEN_QUOTES_CSV)


@pytest.fixture
def blank_fields(tmp_path: Path) -> Path:
    """File with empty and whitespace-only fields."""
    return _write(tmp_path / "blank_fields.csv", BLANK_FIELDS_CSV)


@pytest.fixture
def encoding_utf8_bom(tmp_path: Path) -> Path:
    """UTF-8 with BOM encoded file."""
    return _write(tmp_path / "utf8_bom.csv", "Müller,Straße\n", encoding="utf-8-sig")


@pytest.fixture
def encoding_windows1252(tmp_path: Path) -> Path:
    """Windows-1252 encoded file with Umlaute."""
    content = "Name,Ort\n" + "Jürgen Müller,Köln\nBärbel Schäfer,Düsseldorf\n" * 20
    return _write(tmp_path / "windows1252.csv", content, encoding="windows-1252")


# =============================================================================
# Large File Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def large_file_10k(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Generate a 10k record file of int,string,double,bool."""
    tmp_dir = tmp_path_factory.mktemp("large")
    file_path = tmp_dir / "large_10k.csv"

    lines = []
    for i in range(1, 10_001):
        lines.append(f'{i},"Item {i}, lot {i % 7}",{i / 4},{"true" if i % 2 else "false"}')

    file_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return file_path
