"""Adapters between files, strings and streams and the parser core.

This package provides:
- split_lines, read_string, read_stream, readfile: text to Document
- DXFReader: file loading and querying of the parsed Document
- JsonExporter: Document to JSON
"""

from .dxf_reader import DXFReader, read_stream, read_string, readfile, split_lines
from .json_exporter import JsonExporter

__all__ = [
    "DXFReader",
    "JsonExporter",
    "split_lines",
    "read_string",
    "read_stream",
    "readfile",
]
