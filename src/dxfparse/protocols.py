"""Protocol definitions for the seams around the parser.

These interfaces let callers plug in their own diagnostics handling and
document exporters without depending on the concrete classes.
"""

from typing import TYPE_CHECKING, Protocol

from .diagnostics import Diagnostic

if TYPE_CHECKING:
    from .models import Document


class IDiagnosticSink(Protocol):
    """Protocol for receiving non-fatal parse diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Receive a single diagnostic.

        Parameters
        ----------
        diagnostic : Diagnostic
            The finding reported by the parser. Implementations must not
            raise, the parser continues after every report.
        """
        ...


class IExporter(Protocol):
    """Protocol for writing a parsed document somewhere else."""

    def export_document(self, document: "Document") -> None:
        """Export the document.

        Parameters
        ----------
        document : Document
            Parsed document to export
        """
        ...

    def get_exported_statistics(self) -> dict[str, int]:
        """Get the number of exported records per category."""
        ...
