"""Pytest configuration and fixtures for dxfparse tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from dxfparse.diagnostics import DiagnosticCollector  # noqa: E402
from dxfparse.parser import DxfParser  # noqa: E402

SAMPLE_GROUPS = [
    (0, "SECTION"),
    (2, "HEADER"),
    (9, "$ACADVER"),
    (1, "AC1015"),
    (9, "$INSBASE"),
    (10, "0.0"),
    (20, "0.0"),
    (30, "0.0"),
    (9, "$EXTMAX"),
    (10, "100.0"),
    (20, "50.0"),
    (30, "0.0"),
    (0, "ENDSEC"),
    (0, "SECTION"),
    (2, "TABLES"),
    (0, "TABLE"),
    (2, "VPORT"),
    (5, "8"),
    (70, "1"),
    (0, "VPORT"),
    (2, "*ACTIVE"),
    (12, "50.0"),
    (22, "25.0"),
    (40, "60.0"),
    (41, "2.0"),
    (0, "ENDTAB"),
    (0, "TABLE"),
    (2, "LTYPE"),
    (70, "1"),
    (0, "LTYPE"),
    (2, "CONTINUOUS"),
    (3, "Solid line"),
    (72, "65"),
    (73, "0"),
    (40, "0.0"),
    (0, "ENDTAB"),
    (0, "TABLE"),
    (2, "LAYER"),
    (70, "2"),
    (0, "LAYER"),
    (2, "0"),
    (62, "7"),
    (6, "CONTINUOUS"),
    (0, "LAYER"),
    (2, "Walls"),
    (62, "-1"),
    (6, "CONTINUOUS"),
    (0, "ENDTAB"),
    (0, "ENDSEC"),
    (0, "SECTION"),
    (2, "BLOCKS"),
    (0, "BLOCK"),
    (2, "Door"),
    (8, "0"),
    (70, "0"),
    (10, "0.0"),
    (20, "0.0"),
    (30, "0.0"),
    (0, "LINE"),
    (8, "0"),
    (10, "0.0"),
    (20, "0.0"),
    (11, "0.0"),
    (21, "2.0"),
    (0, "ENDBLK"),
    (8, "0"),
    (0, "ENDSEC"),
    (0, "SECTION"),
    (2, "ENTITIES"),
    (0, "LINE"),
    (5, "A1"),
    (8, "Walls"),
    (10, "0.0"),
    (20, "0.0"),
    (30, "0.0"),
    (11, "10.0"),
    (21, "0.0"),
    (31, "0.0"),
    (0, "CIRCLE"),
    (8, "0"),
    (62, "1"),
    (10, "5.0"),
    (20, "5.0"),
    (40, "2.5"),
    (0, "TEXT"),
    (8, "0"),
    (10, "1.0"),
    (20, "1.0"),
    (40, "0.5"),
    (1, "Hello"),
    (0, "ENDSEC"),
    (0, "EOF"),
]


def to_lines(groups: list[tuple[int, str]]) -> list[str]:
    lines = []
    for code, value in groups:
        lines.extend([str(code), str(value)])
    return lines


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def make_lines():
    """Return a function turning (code, value) pairs into DXF lines."""
    return to_lines


@pytest.fixture
def section_lines():
    """Return a function wrapping groups into one section followed by EOF."""

    def build(section: str, groups: list[tuple[int, str]]) -> list[str]:
        return to_lines([(0, "SECTION"), (2, section), *groups, (0, "ENDSEC"), (0, "EOF")])

    return build


@pytest.fixture
def collector():
    """Return an empty diagnostic collector."""
    return DiagnosticCollector()


@pytest.fixture
def parse_section(section_lines):
    """Return a function parsing groups wrapped into one section."""

    def parse(section: str, groups: list[tuple[int, str]], sink=None):
        return DxfParser(sink=sink).parse(section_lines(section, groups))

    return parse


@pytest.fixture
def sample_lines():
    """Return the lines of a small but complete DXF file."""
    return to_lines(SAMPLE_GROUPS)


@pytest.fixture
def sample_dxf_text(sample_lines):
    """Return a small but complete DXF file as text with CRLF line endings."""
    return "\r\n".join(sample_lines) + "\r\n"


@pytest.fixture
def sample_dxf_file(tmp_path, sample_lines):
    """Write the sample DXF file and return its path."""
    dxf_path = tmp_path / "sample.dxf"
    dxf_path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return dxf_path
