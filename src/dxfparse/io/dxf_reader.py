"""DXF file reader focused on file I/O and querying the parsed document.

The parser core only knows about lines. The functions in this module turn
strings, streams and files into lines and hand them to the parser.
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import IO

from ..config import ReaderConfig
from ..diagnostics import DiagnosticKind
from ..models import Block, Document, Entity
from ..parser import DxfParser
from ..protocols import IDiagnosticSink

log = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split a text on CRLF, CR and LF line endings."""
    return LINE_BREAK.split(text)


def read_string(
    text: str, sink: IDiagnosticSink | None = None, ignored: Iterable[DiagnosticKind] = ()
) -> Document:
    """Parse the complete content of a DXF file given as one string."""
    return DxfParser(sink=sink, ignored=ignored).parse(split_lines(text))


def read_stream(
    stream: IO[str] | IO[bytes],
    config: ReaderConfig | None = None,
    sink: IDiagnosticSink | None = None,
) -> Document:
    """Read a text or binary stream to its end and parse it.

    Parameters
    ----------
    stream : IO[str] | IO[bytes]
        Open stream, bytes are decoded with the configured encoding
    config : ReaderConfig | None
        Reader configuration, defaults are used if omitted
    sink : IDiagnosticSink | None
        Receives every diagnostic in addition to the document

    Returns
    -------
    Document
        Parsed document
    """
    config = config or ReaderConfig()
    content = stream.read()
    if isinstance(content, bytes):
        content = content.decode(config.encoding, errors=config.encoding_errors)
    return read_string(content, sink=sink, ignored=config.ignored_diagnostics)


def readfile(
    dxf_path: Path | str, config: ReaderConfig | None = None, sink: IDiagnosticSink | None = None
) -> Document:
    """Read and parse a DXF file.

    Raises
    ------
    FileNotFoundError
        If the DXF file does not exist
    """
    dxf_path = Path(dxf_path)
    if not dxf_path.exists():
        raise FileNotFoundError(f"DXF file not found: {dxf_path}")
    with open(dxf_path, "rb") as stream:
        return read_stream(stream, config=config, sink=sink)


class DXFReader:
    """DXF file reader focused on file I/O and querying the parsed document.

    Parameters
    ----------
    dxf_path : Path
        Path to the DXF file to read
    config : ReaderConfig | None
        Reader configuration, defaults are used if omitted
    """

    def __init__(self, dxf_path: Path, config: ReaderConfig | None = None) -> None:
        self.dxf_path = dxf_path
        self.config = config or ReaderConfig()
        self._doc: Document | None = None

    def load_file(self, sink: IDiagnosticSink | None = None) -> None:
        """Load and parse the DXF file.

        Raises
        ------
        FileNotFoundError
            If DXF file does not exist
        DXFParseError
            If the DXF content has a fatal structural error
        """
        self._doc = readfile(self.dxf_path, config=self.config, sink=sink)
        log.info(f"Successfully loaded DXF file: {self.dxf_path}")

    @property
    def document(self) -> Document:
        """Get the loaded DXF document.

        Raises
        ------
        RuntimeError
            If DXF file is not loaded
        """
        if self._doc is None:
            raise RuntimeError("DXF file not loaded. Call load_file() first.")
        return self._doc

    def is_loaded(self) -> bool:
        return self._doc is not None

    def query_entities(self, types: str | Iterable[str] | None = None) -> list[Entity]:
        """Get the top level entities of the given types, all if None."""
        return list(self.document.query(types))

    def get_layer_names(self) -> list[str]:
        """Get all layer names from the LAYER table.

        Raises
        ------
        RuntimeError
            If DXF file is not loaded
        """
        layer_table = self.document.tables.layer
        if layer_table is None:
            log.warning(f"No LAYER table in {self.dxf_path}")
            return []
        return list(layer_table.layers)

    def get_block_names(self) -> list[str]:
        return list(self.document.blocks)

    def get_block(self, name: str) -> Block | None:
        return self.document.blocks.get(name)
