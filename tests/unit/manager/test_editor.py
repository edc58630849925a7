"""Unit tests for FlowEditor, the editing session controller."""

import logging

import pytest

from screenflow.common.exceptions import NotFoundError
from screenflow.core.element import Position
from screenflow.core.flow import find_element, find_screen
from screenflow.core.selection import Selection
from screenflow.manager import EditorConfig, FlowEditor, as_position
from screenflow.models.enums import MutationStatus, SelectionState
from tests.fixtures.sample_data import signup_draft


class TestEditorInitialization:
    """Test suite for opening an editing session."""

    def test_new_editor_has_one_screen_selected(self, editor):
        assert editor.document.screen_count == 1
        assert editor.selection == Selection(screen_id="screen_1")
        assert editor.current_screen.title == "Welcome"
        assert editor.current_element is None
        assert not editor.is_dirty

    def test_default_flow_name_from_config(self):
        editor = FlowEditor(config=EditorConfig(default_flow_name="Onboarding"))
        assert editor.document.name == "Onboarding"

    def test_from_draft_restores_selected_client(self, clients):
        editor = FlowEditor.from_draft(signup_draft(), config=EditorConfig(), clients=clients)

        assert editor.document.name == "Signup"
        assert editor.selected_client_id == "client_1"
        assert editor.selected_client.name == "Acme Store"

    def test_to_draft_keeps_selected_client(self, signup_editor):
        signup_editor.select_client("client_2")
        assert signup_editor.to_draft()["selected_client"] == "client_2"


class TestEditorCommands:
    """Test suite for commands routed through the engine."""

    def test_add_screen_selects_it(self, editor):
        result = editor.add_screen()

        assert result.status == MutationStatus.APPLIED
        assert editor.selection == Selection(screen_id=result.target_id)
        assert editor.current_screen.title == "Screen 2"
        assert editor.is_dirty

    def test_add_element_selects_it(self, editor):
        """Adding a heading at (10, 20) leaves it as the selected element."""
        result = editor.add_element("screen_1", "text-heading", {"x": 10, "y": 20})

        assert len(editor.document.screens[0].elements) == 1
        assert editor.selection.state == SelectionState.ELEMENT_SELECTED
        assert editor.current_element.id == result.target_id
        assert editor.current_element.position == Position(10, 20)

    def test_add_element_unknown_screen(self, editor):
        before = editor.document

        result = editor.add_element("missing", "text-body")

        assert result.status == MutationStatus.NOT_FOUND
        assert editor.document is before
        assert not editor.is_dirty

    def test_remove_selected_screen_falls_back(self, signup_editor):
        signup_editor.select_element("element_a")

        result = signup_editor.remove_screen("screen_1")

        assert result.status == MutationStatus.APPLIED
        assert signup_editor.selection == Selection(screen_id="screen_2")

    def test_remove_only_screen_rejected(self, editor, caplog):
        before = editor.document

        with caplog.at_level(logging.WARNING, logger="screenflow.manager.editor"):
            result = editor.remove_screen("screen_1")

        assert result.status == MutationStatus.REJECTED
        assert editor.document is before
        assert editor.document.screen_count == 1
        assert "Cannot remove the only screen" in caplog.text

    def test_remove_selected_element_clears_selection(self, signup_editor):
        signup_editor.select_element("element_b")

        signup_editor.remove_element("screen_1", "element_b")

        assert signup_editor.selection == Selection(screen_id="screen_1")

    def test_remove_selected_element_from_wrong_screen_still_clears_selection(self, signup_editor):
        signup_editor.select_element("element_b")
        before = signup_editor.document

        result = signup_editor.remove_element("screen_2", "element_b")

        assert result.status == MutationStatus.NOOP
        assert signup_editor.document is before
        assert find_element(signup_editor.document, "screen_1", "element_b") is not None
        assert signup_editor.selection == Selection(screen_id="screen_1")

    def test_remove_other_element_keeps_selection(self, signup_editor):
        signup_editor.select_element("element_b")

        signup_editor.remove_element("screen_1", "element_a")

        assert signup_editor.selection == Selection(screen_id="screen_1", element_id="element_b")

    def test_move_element_accepts_tuple(self, signup_editor):
        signup_editor.move_element("screen_1", "element_a", (3, 4))

        assert find_element(signup_editor.document, "screen_1", "element_a").position == Position(3, 4)

    def test_update_property_merges(self, signup_editor):
        signup_editor.update_element_property("element_b", "label", "Full name")

        element = find_element(signup_editor.document, "screen_1", "element_b")
        assert element.properties == {"label": "Full name", "name": "name", "required": True}

    def test_selected_element_sees_updates(self, signup_editor):
        signup_editor.select_element("element_a")

        signup_editor.update_element_property(signup_editor.current_element, "text", "Hello")
        signup_editor.update_element_property(signup_editor.current_element, "color", "blue")

        assert signup_editor.current_element.properties == {"text": "Hello", "color": "blue"}

    def test_set_screen_title_and_terminal(self, signup_editor):
        signup_editor.set_screen_title("screen_1", "Start")
        signup_editor.set_screen_terminal("screen_1", True)

        screen = find_screen(signup_editor.document, "screen_1")
        assert (screen.title, screen.terminal) == ("Start", True)

    def test_set_title_unknown_screen(self, signup_editor):
        assert signup_editor.set_screen_title("missing", "x").status == MutationStatus.NOOP

    def test_rename(self, editor):
        assert editor.rename("Checkout").status == MutationStatus.APPLIED
        assert editor.document.name == "Checkout"
        assert editor.rename("Checkout").status == MutationStatus.NOOP

    def test_noop_keeps_editor_clean(self, signup_editor):
        signup_editor.remove_element("screen_1", "missing")
        assert not signup_editor.is_dirty

    def test_mark_clean(self, editor):
        editor.add_screen()
        editor.mark_clean()
        assert not editor.is_dirty

    def test_applied_commands_are_logged(self, editor, caplog):
        with caplog.at_level(logging.INFO, logger="screenflow.manager.editor"):
            result = editor.add_screen()

        assert f"add_screen applied to '{result.target_id}'" in caplog.text


class TestStrictProperties:
    """Test suite for schema-checked property updates."""

    @pytest.fixture
    def strict_editor(self, signup_document, id_generator):
        return FlowEditor(
            document=signup_document,
            config=EditorConfig(strict_properties=True),
            id_generator=id_generator,
        )

    def test_invalid_value_rejected(self, strict_editor):
        before = strict_editor.document

        result = strict_editor.update_element_property("element_b", "required", "yes")

        assert result.status == MutationStatus.REJECTED
        assert "required" in result.message
        assert strict_editor.document is before

    def test_valid_value_applied(self, strict_editor):
        result = strict_editor.update_element_property("element_b", "required", False)
        assert result.status == MutationStatus.APPLIED

    def test_undeclared_keys_allowed(self, strict_editor):
        result = strict_editor.update_element_property("element_a", "color", "red")
        assert result.status == MutationStatus.APPLIED

    def test_permissive_by_default(self, signup_editor):
        result = signup_editor.update_element_property("element_b", "required", "yes")
        assert result.status == MutationStatus.APPLIED


class TestEditorSelection:
    """Test suite for selection commands."""

    def test_select_element_changes_screen(self, signup_editor):
        selection = signup_editor.select_element("element_c")

        assert selection.screen_id == "screen_2"
        assert signup_editor.current_screen.id == "screen_2"

    def test_clear_selection_keeps_screen(self, signup_editor):
        signup_editor.select_element("element_c")

        assert signup_editor.clear_selection() == Selection(screen_id="screen_2")

    def test_select_screen(self, signup_editor):
        assert signup_editor.select_screen("screen_2") == Selection(screen_id="screen_2")


class TestEditorOutput:
    """Test suite for wire output honoring configuration."""

    def test_wire_without_positions(self, signup_editor):
        element = signup_editor.wire_document()["screens"][0]["elements"][0]
        assert "position" not in element

    def test_wire_with_positions(self, signup_document):
        editor = FlowEditor(document=signup_document, config=EditorConfig(include_position=True))

        element = editor.wire_document()["screens"][0]["elements"][0]
        assert element["position"] == {"x": 10, "y": 20}
        assert '"position"' in editor.wire_json()


class TestAsPosition:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, Position()),
            (Position(1, 2), Position(1, 2)),
            ((1, 2), Position(1, 2)),
            ({"x": 5}, Position(5, 0)),
        ],
    )
    def test_as_position(self, value, expected):
        assert as_position(value) == expected


class TestClientSelection:
    def test_select_unknown_client(self, signup_editor):
        with pytest.raises(NotFoundError):
            signup_editor.select_client("nope")

    def test_deselect_client(self, signup_editor):
        signup_editor.select_client("client_1")
        assert signup_editor.select_client(None) is None
        assert signup_editor.selected_client_id is None

    def test_clients_directory(self, signup_editor):
        assert "client_2" in signup_editor.clients
        assert len(signup_editor.clients) == 2
