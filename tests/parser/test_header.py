"""Tests for the HEADER section grammar."""

from dxfparse.diagnostics import DiagnosticKind
from dxfparse.models import Point
from dxfparse.parser import parse


class TestHeader:
    """Test header variables."""

    def test_scalar_variables(self, parse_section):
        """Test variables holding one typed value."""
        document = parse_section(
            "HEADER",
            [
                (9, "$ACADVER"),
                (1, "AC1015"),
                (9, "$LTSCALE"),
                (40, "2.5"),
                (9, "$ORTHOMODE"),
                (70, "1"),
            ],
        )

        assert document.header == {"$ACADVER": "AC1015", "$LTSCALE": 2.5, "$ORTHOMODE": 1}
        assert document.diagnostics == []

    def test_point_variables(self, parse_section):
        """Test that the codes 10, 20 and 30 form a point."""
        document = parse_section(
            "HEADER",
            [
                (9, "$EXTMIN"),
                (10, "-1.0"),
                (20, "-2.0"),
                (30, "0.0"),
                (9, "$LIMMAX"),
                (10, "420.0"),
                (20, "297.0"),
            ],
        )

        assert document.header["$EXTMIN"] == Point(-1.0, -2.0, 0.0)
        assert document.header["$LIMMAX"] == Point(420.0, 297.0)
        assert document.header["$LIMMAX"].z is None

    def test_last_value_wins(self, parse_section):
        """Test that repeated values of one variable overwrite each other."""
        document = parse_section("HEADER", [(9, "$X"), (70, "1"), (70, "2")])

        assert document.header["$X"] == 2

    def test_empty_header(self, parse_section):
        """Test an empty HEADER section."""
        document = parse_section("HEADER", [])

        assert document.header == {}
        assert document.diagnostics == []

    def test_value_without_name(self, parse_section):
        """Test that a value before the first variable name is reported."""
        document = parse_section("HEADER", [(70, "1"), (9, "$A"), (70, "2")])

        assert document.header == {"$A": 2}
        assert [d.kind for d in document.diagnostics] == [DiagnosticKind.UNHANDLED_GROUP]

    def test_unterminated_header(self, make_lines):
        """Test that EOF inside the header keeps the variables read so far."""
        lines = make_lines([(0, "SECTION"), (2, "HEADER"), (9, "$INSBASE"), (10, "1.0"), (20, "2.0"), (0, "EOF")])

        document = parse(lines)

        assert document.header == {"$INSBASE": Point(1.0, 2.0)}
        assert [d.kind for d in document.diagnostics] == [DiagnosticKind.UNTERMINATED_SECTION]
