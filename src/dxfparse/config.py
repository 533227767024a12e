import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .diagnostics import DiagnosticKind

log = logging.getLogger(__name__)


@dataclass
class ReaderConfig:
    """Settings of the file adapters and the command line.

    Parameters
    ----------
    encoding : str
        Text encoding of DXF files, the BOM of UTF-8 files is dropped
    encoding_errors : str
        Error handler passed to the decoder
    log_level : str
        Level name for logging.basicConfig in the command line
    ignored_diagnostics : list[DiagnosticKind]
        Diagnostic kinds that are neither collected nor logged
    """

    encoding: str = "utf-8-sig"
    encoding_errors: str = "replace"
    log_level: str = "WARNING"
    ignored_diagnostics: list[DiagnosticKind] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Encoding": self.encoding,
            "EncodingErrors": self.encoding_errors,
            "LogLevel": self.log_level,
            "IgnoredDiagnostics": [kind.value for kind in self.ignored_diagnostics],
        }


class ConfigurationHandler:
    """Loads a ReaderConfig from a JSON file.

    Parameters
    ----------
    config_path : Path
        Path to the JSON configuration file
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self.config = ReaderConfig()

    def _create_diagnostic_kinds(self, names: list[str]) -> list[DiagnosticKind]:
        kinds = []
        for name in names:
            for kind in DiagnosticKind:
                if kind.value == str(name).upper():
                    kinds.append(kind)
                    break
            else:
                log.warning(f"Unknown diagnostic kind: {name}, ignoring it")
        return kinds

    def _create_log_level(self, level: str) -> str:
        level_name = str(level).upper()
        if isinstance(logging.getLevelName(level_name), int):
            return level_name
        log.warning(f"Unknown log level: {level}, defaulting to 'WARNING'")
        return "WARNING"

    def load_config(self) -> ReaderConfig:
        """Load the reader configuration from the JSON file.

        Expected JSON format:
        {
            "Encoding": "utf-8-sig",
            "EncodingErrors": "replace",
            "LogLevel": "WARNING",
            "IgnoredDiagnostics": ["UNHANDLED_GROUP"]
        }

        Missing keys keep their default value.

        Raises
        ------
        FileNotFoundError
            If configuration file does not exist
        json.JSONDecodeError
            If configuration file is not valid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(f"Invalid JSON in configuration file: {e}", e.doc, e.pos) from e

        defaults = ReaderConfig()
        self.config = ReaderConfig(
            encoding=config_data.get("Encoding", defaults.encoding),
            encoding_errors=config_data.get("EncodingErrors", defaults.encoding_errors),
            log_level=self._create_log_level(config_data.get("LogLevel", defaults.log_level)),
            ignored_diagnostics=self._create_diagnostic_kinds(config_data.get("IgnoredDiagnostics", [])),
        )
        log.info(f"Loaded configuration from {self.config_path}")
        return self.config
