"""Tests for ExprForge CLI commands."""

import pytest
from click.testing import CliRunner

from exprforge.cli.main import cli


@pytest.fixture
def runner(monkeypatch):
    for name in ["EXPRFORGE_LOG_LEVEL", "EXPRFORGE_EXTENSIONS", "EXPRFORGE_FREEZE_REGISTRY"]:
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestEval:
    def test_eval_literal_expression(self, runner):
        result = runner.invoke(cli, ["eval", "1 + 2"])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_eval_with_yaml_state(self, runner, tmp_path):
        state = tmp_path / "state.yaml"
        state.write_text("user:\n  name: Ada\n  age: 36\n")

        result = runner.invoke(cli, ["eval", "user.age >= 18", "--state", str(state)])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

        result = runner.invoke(cli, ["eval", "user.name", "--state", str(state)])
        assert result.output.strip() == "'Ada'"

    def test_eval_with_json_state(self, runner, tmp_path):
        state = tmp_path / "state.json"
        state.write_text('{"items": [1, 2, 3]}')

        result = runner.invoke(cli, ["eval", "sum(items)", "--state", str(state)])
        assert result.exit_code == 0
        assert result.output.strip() == "6"

    def test_eval_json_output(self, runner):
        result = runner.invoke(cli, ["eval", "[1, 'a']", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '[1, "a"]'

    def test_eval_error_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["eval", "missing"])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_eval_invalid_expression(self, runner):
        result = runner.invoke(cli, ["eval", "1 +"])
        assert result.exit_code == 1
        assert "Invalid expression" in result.output

    def test_eval_malformed_state_file(self, runner, tmp_path):
        state = tmp_path / "state.yaml"
        state.write_text("items: [1, 2\n")

        result = runner.invoke(cli, ["eval", "items", "--state", str(state)])
        assert result.exit_code == 1
        assert "Invalid state file" in result.output
        assert "Traceback" not in result.output


class TestRender:
    def test_render(self, runner):
        result = runner.invoke(cli, ["render", "a&&b || c.d[0]"])
        assert result.exit_code == 0
        assert result.output.strip() == "((a && b) || c.d[0])"


class TestValidate:
    def test_validate_reports_return_type(self, runner):
        result = runner.invoke(cli, ["validate", "a > 1"])
        assert result.exit_code == 0
        assert "Valid" in result.output
        assert "boolean" in result.output

    def test_validate_rejects_bad_arity(self, runner):
        result = runner.invoke(cli, ["validate", "trim(a, b)"])
        assert result.exit_code == 1
        assert "Invalid expression" in result.output


class TestFunctions:
    def test_lists_all_categories(self, runner):
        result = runner.invoke(cli, ["functions"])
        assert result.exit_code == 0
        assert "logic:" in result.output
        assert "&&" in result.output

    def test_filter_by_category(self, runner):
        result = runner.invoke(cli, ["functions", "--category", "math"])
        assert result.exit_code == 0
        assert "math:" in result.output
        assert "logic:" not in result.output
