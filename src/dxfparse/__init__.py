"""Parser for the DXF text format.

The core turns the lines of a DXF file into a Document with the header
variables, the VPORT, LTYPE and LAYER tables, the block definitions and the
entities. The io package adds readers for strings, streams and files and a
JSON exporter.
"""

from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from .errors import DXFParseError, EmptyInputError, GroupValueError, ScannerError
from .io import DXFReader, JsonExporter, read_stream, read_string, readfile
from .models import Block, Document, Entity, Layer, LineType, Point, ViewPort
from .parser import DxfParser, parse
from .scanner import Group, GroupScanner

__version__ = "0.1.0"

__all__ = [
    "parse",
    "read_string",
    "read_stream",
    "readfile",
    "DxfParser",
    "DXFReader",
    "JsonExporter",
    "Document",
    "Entity",
    "Block",
    "Layer",
    "LineType",
    "ViewPort",
    "Point",
    "Group",
    "GroupScanner",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticCollector",
    "DXFParseError",
    "EmptyInputError",
    "ScannerError",
    "GroupValueError",
]
