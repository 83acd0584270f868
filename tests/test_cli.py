"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from valuation_explorer.cli import app
from valuation_explorer.core import config as config_module
from valuation_explorer.core.exceptions import ConfigurationError

runner = CliRunner()


@pytest.fixture
def source_args(data_file) -> list[str]:
    return ["--source", str(data_file)]


class TestCommands:
    """Tests for the one-shot commands."""

    def test_ask_overlap(self, source_args):
        result = runner.invoke(app, ["ask", "overlap", *source_args])
        assert result.exit_code == 0
        assert "Overlap band: £13.80m–£14.80m" in result.output

    def test_ask_winner(self, source_args):
        result = runner.invoke(app, ["ask", "WINNER", *source_args])
        assert result.exit_code == 0
        assert "Most likely winner (heuristic): Harbour Pension Fund." in result.output

    def test_ask_unknown_question(self, source_args):
        result = runner.invoke(app, ["ask", "median", *source_args])
        assert result.exit_code == 2
        assert "Unknown question" in result.output

    def test_overlap(self, source_args):
        result = runner.invoke(app, ["overlap", *source_args])
        assert result.exit_code == 0
        assert "£13.80m–£14.80m" in result.output

    def test_show(self, source_args):
        result = runner.invoke(app, ["show", "albion family office", *source_args])
        assert result.exit_code == 0
        assert "Albion Family Office" in result.output
        assert "Hold: 20y" in result.output

    def test_show_unknown_investor(self, source_args):
        result = runner.invoke(app, ["show", "Nobody Capital", *source_args])
        assert result.exit_code == 1
        assert "Investor not found" in result.output

    def test_table_plain(self, source_args):
        result = runner.invoke(app, ["table", "--plain", *source_args])
        assert result.exit_code == 0
        assert "Kestrel Opportunity Fund" in result.output
        assert "* most likely winner (heuristic)" in result.output

    def test_summary_json(self, source_args, tmp_path):
        save = tmp_path / "out" / "summary"
        result = runner.invoke(app, ["summary", "--save", str(save), *source_args])
        assert result.exit_code == 0
        saved = json.loads((tmp_path / "out" / "summary.json").read_text(encoding="utf-8"))
        assert saved["winner"] == "Harbour Pension Fund"
        assert saved["overlap_band"]["display"] == "£13.80m–£14.80m"

    def test_load_failure_exits(self, tmp_path):
        result = runner.invoke(app, ["overlap", "--source", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Could not load valuations" in result.output

    def test_bad_config_exits(self, monkeypatch, source_args):
        monkeypatch.setenv("VALUATION_HTTP_TIMEOUT", "soon")
        monkeypatch.setattr(config_module, "_config", None)
        result = runner.invoke(app, ["overlap", *source_args])
        assert result.exit_code == 1
        assert "VALUATION_HTTP_TIMEOUT" in result.output
        assert not isinstance(result.exception, ConfigurationError)

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Valuation Explorer v" in result.output


class TestInteractive:
    """Tests for the interactive session."""

    def test_select_then_ask(self, source_args):
        result = runner.invoke(
            app,
            ["interactive", *source_args],
            input="1\n1\nwinner\n9\nfoo\nq\n",
        )
        assert result.exit_code == 0
        assert "Select an investor" in result.output
        # Re-selecting the same investor does not re-render the detail
        assert result.output.count("Mandate lens:") == 1
        assert "Most likely winner (heuristic): Harbour Pension Fund." in result.output
        assert "No investor #9" in result.output
        assert "Unknown command: foo" in result.output
