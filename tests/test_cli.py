"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from dxfparse.cli import main


@pytest.fixture
def runner():
    """Return a Click test runner."""
    return CliRunner()


@pytest.fixture
def broken_dxf_file(tmp_path, make_lines):
    """Write a DXF file that ends without EOF group."""
    dxf_path = tmp_path / "broken.dxf"
    dxf_path.write_text("\n".join(make_lines([(0, "SECTION"), (2, "ENTITIES"), (0, "ENDSEC")])), encoding="utf-8")
    return dxf_path


class TestMain:
    """Test the command group."""

    def test_help(self, runner):
        """Test that the help lists all commands."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "DXF parser." in result.output
        for command in ("inspect", "export-json", "create-config"):
            assert command in result.output


class TestInspect:
    """Test the inspect command."""

    def test_statistics(self, runner, sample_dxf_file):
        """Test the printed statistics of the sample file."""
        result = runner.invoke(main, ["inspect", str(sample_dxf_file)])

        assert result.exit_code == 0, result.output
        assert "Parsing DXF: sample.dxf" in result.output
        assert "ENTITY STATISTICS" in result.output
        assert "DOCUMENT STATISTICS" in result.output
        assert "DIAGNOSTIC STATISTICS" in result.output
        assert "CIRCLE" in result.output
        assert "Layers" in result.output

    def test_verbose_lists_diagnostics(self, runner, tmp_path, section_lines):
        """Test that verbose output contains every diagnostic."""
        dxf_path = tmp_path / "hatch.dxf"
        dxf_path.write_text("\n".join(section_lines("ENTITIES", [(0, "HATCH")])), encoding="utf-8")

        result = runner.invoke(main, ["inspect", str(dxf_path), "--verbose"])

        assert result.exit_code == 0, result.output
        assert "UNKNOWN_ENTITY: Unhandled entity HATCH" in result.output

    def test_with_config(self, runner, tmp_path, section_lines):
        """Test that ignored kinds from the configuration are not counted."""
        dxf_path = tmp_path / "hatch.dxf"
        dxf_path.write_text("\n".join(section_lines("ENTITIES", [(0, "HATCH")])), encoding="utf-8")
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"IgnoredDiagnostics": ["UNKNOWN_ENTITY"]}), encoding="utf-8")

        result = runner.invoke(main, ["inspect", str(dxf_path), "-c", str(config_path)])

        assert result.exit_code == 0, result.output
        assert "UNKNOWN_ENTITY" not in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test that a missing file is a usage error."""
        result = runner.invoke(main, ["inspect", str(tmp_path / "missing.dxf")])

        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_fatal_parse_error(self, runner, broken_dxf_file):
        """Test that fatal parse errors end with a Click error."""
        result = runner.invoke(main, ["inspect", str(broken_dxf_file)])

        assert result.exit_code == 1
        assert "Processing failed" in result.output
        assert "Traceback" not in result.output

    def test_fatal_parse_error_verbose(self, runner, broken_dxf_file):
        """Test that verbose errors include the traceback."""
        result = runner.invoke(main, ["inspect", str(broken_dxf_file), "-v"])

        assert result.exit_code == 1
        assert "Traceback" in result.output


class TestExportJson:
    """Test the export-json command."""

    def test_default_output_path(self, runner, sample_dxf_file):
        """Test that the JSON file is written next to the DXF file."""
        result = runner.invoke(main, ["export-json", str(sample_dxf_file)])

        output_path = sample_dxf_file.with_suffix(".json")
        assert result.exit_code == 0, result.output
        assert output_path.exists()
        assert f"Exported document to: {output_path}" in result.output
        assert "EXPORT STATISTICS" in result.output
        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert len(data["entities"]) == 3

    def test_output_option(self, runner, sample_dxf_file, tmp_path):
        """Test an explicit output path."""
        output_path = tmp_path / "out" / "custom.json"
        output_path.parent.mkdir()

        result = runner.invoke(main, ["export-json", str(sample_dxf_file), "-o", str(output_path)])

        assert result.exit_code == 0, result.output
        assert output_path.exists()

    def test_unwritable_output(self, runner, sample_dxf_file, tmp_path):
        """Test that a write failure ends with a Click error."""
        output_path = tmp_path / "missing" / "custom.json"

        result = runner.invoke(main, ["export-json", str(sample_dxf_file), "-o", str(output_path)])

        assert result.exit_code == 1
        assert "Cannot write JSON file" in result.output


class TestCreateConfig:
    """Test the create-config command."""

    def test_sample_config(self, runner, tmp_path):
        """Test the content of the sample configuration."""
        config_path = tmp_path / "config.json"

        result = runner.invoke(main, ["create-config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert "Sample configuration created" in result.output
        assert json.loads(config_path.read_text(encoding="utf-8")) == {
            "Encoding": "utf-8-sig",
            "EncodingErrors": "replace",
            "LogLevel": "WARNING",
            "IgnoredDiagnostics": ["UNHANDLED_GROUP"],
        }

    def test_unwritable_config(self, runner, tmp_path):
        """Test that a write failure ends with a Click error."""
        result = runner.invoke(main, ["create-config", str(tmp_path / "missing" / "config.json")])

        assert result.exit_code == 1
        assert "Cannot create configuration file" in result.output
