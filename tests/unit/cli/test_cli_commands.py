"""Tests for the screenflow CLI commands.

Commands run through Typer's CliRunner against real draft files in a
temporary directory.
"""

import json

import pytest
from typer.testing import CliRunner

from screenflow.cli.main import app
from screenflow.cli.utils import parse_value
from screenflow.core.flow import find_element, find_screen
from screenflow.loaders import load_draft, read_draft
from screenflow.manager import constants


@pytest.fixture
def runner():
    return CliRunner()


class TestNewCommand:
    """Test suite for `screenflow new`."""

    def test_creates_json_draft(self, runner, tmp_path):
        target = tmp_path / "signup.json"

        result = runner.invoke(app, ["new", str(target), "--name", "Signup"])

        assert result.exit_code == 0, result.output
        assert "Flow 'Signup' created" in result.output
        document = load_draft(target)
        assert document.name == "Signup"
        assert document.screen_count == 1

    def test_suffix_from_config(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv(constants.ENV_DEFAULT_FORMAT, "yaml")

        result = runner.invoke(app, ["new", str(tmp_path / "flow")])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "flow.yaml").exists()

    def test_refuses_to_overwrite(self, runner, draft_file):
        result = runner.invoke(app, ["new", str(draft_file)])

        assert result.exit_code == 1
        assert "already" in result.output
        assert read_draft(draft_file)["flow_name"] == "Signup"


class TestViewCommand:
    """Test suite for `screenflow view`."""

    def test_view_tables(self, runner, draft_file):
        result = runner.invoke(app, ["view", str(draft_file)])

        assert result.exit_code == 0, result.output
        assert "Signup" in result.output
        assert "Welcome" in result.output

    def test_view_json(self, runner, draft_file):
        result = runner.invoke(app, ["view", str(draft_file), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["flow_name"] == "Signup"
        assert data["selected_client"] == "client_1"

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["view", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_draft(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"screens": []}', encoding="utf-8")

        result = runner.invoke(app, ["view", str(path)])

        assert result.exit_code == 1


class TestExportCommand:
    """Test suite for `screenflow export`."""

    def test_export_to_stdout(self, runner, draft_file):
        result = runner.invoke(app, ["export", str(draft_file)])

        assert result.exit_code == 0, result.output
        wire = json.loads(result.stdout)
        assert wire["version"] == "3.0"
        assert "position" not in wire["screens"][0]["elements"][0]

    def test_export_with_positions(self, runner, draft_file):
        result = runner.invoke(app, ["export", str(draft_file), "--include-position", "--compact"])

        wire = json.loads(result.stdout)
        assert wire["screens"][0]["elements"][0]["position"] == {"x": 10, "y": 20}

    def test_export_positions_from_env(self, runner, draft_file, monkeypatch):
        monkeypatch.setenv(constants.ENV_INCLUDE_POSITION, "true")

        result = runner.invoke(app, ["export", str(draft_file)])

        assert "position" in json.loads(result.stdout)["screens"][0]["elements"][0]

    def test_export_yaml_with_unquoted_date_fails_cleanly(self, runner, tmp_path):
        path = tmp_path / "dated.yaml"
        path.write_text(
            "flow_name: Dated\n"
            "screens:\n"
            "  - id: screen_1\n"
            "    elements:\n"
            "      - id: element_a\n"
            "        type: date-picker\n"
            "        properties:\n"
            "          min_date: 2024-01-01\n",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["export", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid draft" in result.output

    def test_export_to_file(self, runner, draft_file, tmp_path):
        output = tmp_path / "out" / "wire.json"

        result = runner.invoke(app, ["export", str(draft_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8"))["screens"][1]["terminal"] is True


class TestPaletteCommand:
    def test_palette_json(self, runner):
        result = runner.invoke(app, ["palette", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert list(data) == ["Text", "Media", "Input", "Selection", "Navigation"]

    def test_palette_table(self, runner):
        result = runner.invoke(app, ["palette"])

        assert result.exit_code == 0
        assert "Heading" in result.output


class TestScreenCommands:
    """Test suite for `screenflow screen ...`."""

    def test_add_screen_with_title(self, runner, draft_file):
        result = runner.invoke(app, ["screen", "add", str(draft_file), "--title", "Details"])

        assert result.exit_code == 0, result.output
        document = load_draft(draft_file)
        assert document.screen_count == 3
        assert document.screens[-1].title == "Details"

    def test_remove_screen(self, runner, draft_file):
        result = runner.invoke(app, ["screen", "remove", str(draft_file), "screen_2"])

        assert result.exit_code == 0, result.output
        assert load_draft(draft_file).screen_ids() == ["screen_1"]

    def test_remove_only_screen_fails(self, runner, draft_file):
        runner.invoke(app, ["screen", "remove", str(draft_file), "screen_2"])

        result = runner.invoke(app, ["screen", "remove", str(draft_file), "screen_1"])

        assert result.exit_code == 1
        assert "Cannot remove the only screen" in result.output
        assert load_draft(draft_file).screen_count == 1

    def test_update_screen(self, runner, draft_file):
        result = runner.invoke(
            app, ["screen", "update", str(draft_file), "screen_1", "--title", "Start", "--terminal"]
        )

        assert result.exit_code == 0, result.output
        screen = find_screen(load_draft(draft_file), "screen_1")
        assert screen.title == "Start"
        assert screen.terminal is True

    def test_update_unknown_screen(self, runner, draft_file):
        result = runner.invoke(app, ["screen", "update", str(draft_file), "missing", "--title", "x"])
        assert result.exit_code == 1


class TestElementCommands:
    """Test suite for `screenflow element ...`."""

    def test_add_element(self, runner, draft_file):
        result = runner.invoke(
            app, ["element", "add", str(draft_file), "screen_2", "text-body", "--x", "5", "--y", "6", "--json"]
        )

        assert result.exit_code == 0, result.output
        outcome = json.loads(result.stdout)
        assert outcome["status"] == "applied"
        element = find_element(load_draft(draft_file), "screen_2", outcome["target_id"])
        assert element.position.x == 5.0

    def test_add_element_unknown_screen(self, runner, draft_file):
        result = runner.invoke(app, ["element", "add", str(draft_file), "missing", "text-body"])

        assert result.exit_code == 1
        assert load_draft(draft_file).element_count == 3

    def test_remove_missing_element_succeeds(self, runner, draft_file):
        result = runner.invoke(app, ["element", "remove", str(draft_file), "screen_1", "missing"])

        assert result.exit_code == 0
        assert "nothing to do" in result.output

    def test_move_element(self, runner, draft_file):
        result = runner.invoke(
            app, ["element", "move", str(draft_file), "screen_1", "element_a", "--x", "1", "--y", "2"]
        )

        assert result.exit_code == 0, result.output
        element = find_element(load_draft(draft_file), "screen_1", "element_a")
        assert (element.position.x, element.position.y) == (1.0, 2.0)

    def test_set_property(self, runner, draft_file):
        result = runner.invoke(app, ["element", "set", str(draft_file), "element_a", "text", "Welcome!"])

        assert result.exit_code == 0, result.output
        assert find_element(load_draft(draft_file), "screen_1", "element_a").properties == {"text": "Welcome!"}

    def test_set_json_property(self, runner, draft_file):
        result = runner.invoke(
            app, ["element", "set", str(draft_file), "element_b", "required", "false", "--json-value"]
        )

        assert result.exit_code == 0, result.output
        properties = find_element(load_draft(draft_file), "screen_1", "element_b").properties
        assert properties["required"] is False
        assert properties["label"] == "Name"

    def test_set_invalid_json_value(self, runner, draft_file):
        result = runner.invoke(
            app, ["element", "set", str(draft_file), "element_b", "required", "{bad", "--json-value"]
        )
        assert result.exit_code == 2

    def test_strict_properties_reject(self, runner, draft_file, monkeypatch):
        monkeypatch.setenv(constants.ENV_STRICT_PROPERTIES, "true")

        result = runner.invoke(app, ["element", "set", str(draft_file), "element_b", "required", "yes"])

        assert result.exit_code == 1
        assert find_element(load_draft(draft_file), "screen_1", "element_b").properties["required"] is True


class TestParseValue:
    def test_plain_value(self):
        assert parse_value("42") == "42"

    def test_json_value(self):
        assert parse_value("[1, 2]", as_json=True) == [1, 2]

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="not valid JSON"):
            parse_value("{", as_json=True)
