"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from json_bound.cli import main


class TestReformat:
    """Tests for the reformat command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_pretty_to_stdout(self, temp_dir):
        """Test pretty output of a compact file."""
        source = temp_dir / "in.json"
        source.write_text('{"a":[1,2],"b":null}', encoding="utf-8")

        result = self.runner.invoke(main, ["reformat", str(source)])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"a": [1, 2], "b": None}
        assert '\n  "a": [' in result.output

    def test_compact_to_file(self, temp_dir):
        """Test compact output written to a file."""
        source = temp_dir / "in.json"
        target = temp_dir / "out.json"
        source.write_text(json.dumps({"a": {"b": True}}, indent=4), encoding="utf-8")

        result = self.runner.invoke(main, ["reformat", str(source), "--compact", "--output", str(target)])

        assert result.exit_code == 0
        assert "json-compact" in result.output
        assert target.read_text(encoding="utf-8") == '{"a":{"b":true}}'

    def test_invalid_json(self, temp_dir):
        """Test failure report and exit status for malformed input."""
        source = temp_dir / "in.json"
        source.write_text('{"a": ', encoding="utf-8")

        result = self.runner.invoke(main, ["reformat", str(source)])

        assert result.exit_code == 1
        assert "Type: serialization" in result.output
        assert "Location: document:restore(!!)" in result.output

    def test_missing_file(self, temp_dir):
        """Test that click rejects a nonexistent input path."""
        result = self.runner.invoke(main, ["reformat", str(temp_dir / "missing.json")])
        assert result.exit_code != 0

    def test_version(self):
        """Test version option."""
        result = self.runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output
