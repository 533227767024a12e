"""Tests for diagnostics and the collecting sink."""

import logging

from dxfparse.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind


class RecordingSink:
    """Sink that only keeps the reported diagnostics."""

    def __init__(self):
        self.received = []

    def report(self, diagnostic):
        self.received.append(diagnostic)


class TestDiagnostic:
    """Test Diagnostic."""

    def test_str_with_line(self):
        """Test the message includes the kind and the line."""
        diagnostic = Diagnostic(DiagnosticKind.UNKNOWN_ENTITY, "Unhandled entity HATCH", code=0, value="HATCH", line=12)

        assert str(diagnostic) == "UNKNOWN_ENTITY: Unhandled entity HATCH (line 12)"

    def test_str_without_line(self):
        """Test the message without a line number."""
        diagnostic = Diagnostic(DiagnosticKind.UNKNOWN_SECTION, "Unhandled section FOO")

        assert str(diagnostic) == "UNKNOWN_SECTION: Unhandled section FOO"


class TestDiagnosticCollector:
    """Test DiagnosticCollector."""

    def test_collects(self):
        """Test that reported diagnostics are kept in order."""
        collector = DiagnosticCollector()
        first = Diagnostic(DiagnosticKind.UNKNOWN_TABLE, "first")
        second = Diagnostic(DiagnosticKind.UNHANDLED_GROUP, "second")

        collector.report(first)
        collector.report(second)

        assert collector.diagnostics == [first, second]
        assert len(collector) == 2

    def test_forwards(self):
        """Test that a forward sink receives every diagnostic as well."""
        sink = RecordingSink()
        collector = DiagnosticCollector(forward=sink)
        diagnostic = Diagnostic(DiagnosticKind.UNKNOWN_TABLE, "table")

        collector.report(diagnostic)

        assert sink.received == [diagnostic]

    def test_ignored_kinds(self):
        """Test that ignored kinds are neither collected nor forwarded."""
        sink = RecordingSink()
        collector = DiagnosticCollector(forward=sink, ignored=[DiagnosticKind.UNHANDLED_GROUP])

        collector.report(Diagnostic(DiagnosticKind.UNHANDLED_GROUP, "ignored"))

        assert len(collector) == 0
        assert sink.received == []

    def test_log_levels(self, caplog):
        """Test the log level per kind."""
        collector = DiagnosticCollector()

        with caplog.at_level(logging.DEBUG, logger="dxfparse.diagnostics"):
            collector.report(Diagnostic(DiagnosticKind.UNHANDLED_GROUP, "unhandled"))
            collector.report(Diagnostic(DiagnosticKind.MISSING_BLOCK_NAME, "no name"))
            collector.report(Diagnostic(DiagnosticKind.TABLE_COUNT_MISMATCH, "count"))

        levels = [record.levelno for record in caplog.records]
        assert levels == [logging.DEBUG, logging.ERROR, logging.WARNING]

    def test_statistics(self):
        """Test counting per kind."""
        collector = DiagnosticCollector()
        collector.report(Diagnostic(DiagnosticKind.UNKNOWN_ENTITY, "a"))
        collector.report(Diagnostic(DiagnosticKind.UNKNOWN_ENTITY, "b"))
        collector.report(Diagnostic(DiagnosticKind.UNKNOWN_SECTION, "c"))

        assert collector.get_statistics() == {
            DiagnosticKind.UNKNOWN_ENTITY: 2,
            DiagnosticKind.UNKNOWN_SECTION: 1,
        }
        assert len(collector.by_kind(DiagnosticKind.UNKNOWN_ENTITY)) == 2
