"""Tests for the Typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from rutcl.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestValidateCommand:
    def test_valid_exits_zero(self, runner):
        result = runner.invoke(app, ["validate", "12.345.678-5"])
        assert result.exit_code == 0
        assert "yes" in result.stdout

    def test_invalid_exits_one(self, runner):
        result = runner.invoke(app, ["validate", "12.345.678-5", "12345678-K"])
        assert result.exit_code == 1
        assert "no" in result.stdout

    def test_json_output(self, runner):
        result = runner.invoke(app, ["validate", "--json", "12.345.678-5", "999999-9"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data[0]["valid"] is True
        assert data[1]["error_type"] == "BelowMinimumError"

    def test_bounds_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("RUTCL_RUT_MIN", "1")
        result = runner.invoke(app, ["validate", "--json", "1-9"])
        assert result.exit_code == 0

    def test_verbose_flag(self, runner):
        result = runner.invoke(app, ["-v", "validate", "--json", "12.345.678-5"])
        assert result.exit_code == 0


class TestFormatCommand:
    @pytest.mark.parametrize(
        "args,expected",
        [
            (["format", "12.345.678-K"], "12345678-K"),
            (["format", "--grouped", "12345678-5"], "12.345.678-5"),
            (["format", "-n", "9876543", "--grouped"], "9.876.543-3"),
            (["format", "--number", "12345678"], "12345678-5"),
        ],
        ids=["string_compact", "string_grouped", "number_grouped", "number_compact"],
    )
    def test_format(self, runner, args, expected):
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_default_style_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("RUTCL_DEFAULT_STYLE", "grouped")
        result = runner.invoke(app, ["format", "12345678-5"])
        assert result.stdout.strip() == "12.345.678-5"

    def test_compact_flag_overrides_environment(self, runner, monkeypatch):
        monkeypatch.setenv("RUTCL_DEFAULT_STYLE", "grouped")
        result = runner.invoke(app, ["format", "--compact", "12.345.678-5"])
        assert result.stdout.strip() == "12345678-5"

    def test_bad_number_is_usage_error(self, runner):
        result = runner.invoke(app, ["format", "-n", "12.345.678"])
        assert result.exit_code == 2

    @pytest.mark.parametrize(
        "value",
        ["1_000_000", " 1000000", "\uff11\uff12\uff13"],
        ids=["underscores", "whitespace", "fullwidth_digits"],
    )
    def test_number_must_be_ascii_digits(self, runner, value):
        result = runner.invoke(app, ["format", "--number", value])
        assert result.exit_code == 2

    def test_malformed_rut_is_usage_error(self, runner):
        result = runner.invoke(app, ["format", "abc"])
        assert result.exit_code == 2


class TestInvalidConfiguration:
    @pytest.fixture(autouse=True)
    def _bad_bounds(self, monkeypatch):
        monkeypatch.setenv("RUTCL_RUT_MIN", "10")
        monkeypatch.setenv("RUTCL_RUT_MAX", "5")

    @pytest.mark.parametrize(
        "args",
        [["validate", "12.345.678-5"], ["format", "12345678-5"], ["check-digit", "1"]],
        ids=["validate", "format", "check_digit"],
    )
    def test_exits_cleanly(self, runner, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestSmallCommands:
    def test_check_digit(self, runner):
        result = runner.invoke(app, ["check-digit", "12345678"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "5"

    def test_append_check_digit(self, runner):
        result = runner.invoke(app, ["append-check-digit", "9876543"])
        assert result.stdout.strip() == "98765433"

    def test_remove_check_digit(self, runner):
        result = runner.invoke(app, ["remove-check-digit", "12.345.678-K"])
        assert result.stdout.strip() == "12345678"

    def test_decompose_json(self, runner):
        result = runner.invoke(app, ["decompose", "--json", "12.345.678-k"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"check_digit": "K", "number": 12345678}

    def test_decompose_panel(self, runner):
        result = runner.invoke(app, ["decompose", "9876543-5"])
        assert result.exit_code == 0
        assert "9.876.543-5" in result.stdout

    def test_decompose_empty_is_usage_error(self, runner):
        result = runner.invoke(app, ["decompose", ""])
        assert result.exit_code == 2


class TestDoctor:
    def test_run(self, runner):
        result = runner.invoke(app, ["doctor", "run"])
        assert result.exit_code == 0
        assert "Check digit engine" in result.stdout

    def test_invalid_configuration(self, runner, monkeypatch):
        monkeypatch.setenv("RUTCL_RUT_MIN", "10")
        monkeypatch.setenv("RUTCL_RUT_MAX", "5")
        result = runner.invoke(app, ["doctor", "run"])
        assert result.exit_code == 1
