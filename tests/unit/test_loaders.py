"""Unit tests for JSON and YAML draft loaders."""

import json

import pytest

from screenflow.common.exceptions import DraftFormatError, LoaderError
from screenflow.loaders import (
    JsonLoader,
    YamlLoader,
    detect_format,
    get_loader,
    load_draft,
    read_draft,
    write_draft,
)
from screenflow.models.enums import DraftFormat
from screenflow.serialization import dumps_wire, to_draft

SIGNUP_YAML = """\
flow_name: Signup
screens:
  - id: screen_1
    title: Welcome
    elements:
      - id: element_a
        type: text-heading
        properties:
          text: Hello
        position:
          x: 10
          y: 20
  - id: screen_2
    title: Thanks
    terminal: true
"""


class TestFormatDetection:
    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("flow.json", DraftFormat.JSON),
            ("flow.yaml", DraftFormat.YAML),
            ("flow.YML", DraftFormat.YAML),
        ],
    )
    def test_detect_format(self, file_name, expected):
        assert detect_format(file_name) == expected

    def test_unsupported_suffix(self):
        with pytest.raises(LoaderError, match="Unsupported draft file extension"):
            detect_format("flow.txt")

    def test_get_loader(self):
        assert isinstance(get_loader("yaml"), YamlLoader)
        assert isinstance(get_loader(DraftFormat.JSON), JsonLoader)


class TestJsonLoader:
    """Test suite for JsonLoader."""

    def test_load(self, draft_file):
        document = JsonLoader().load(draft_file)

        assert document.name == "Signup"
        assert document.element_count == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoaderError) as exc_info:
            JsonLoader().load(tmp_path / "missing.json")
        assert exc_info.value.loader_type == "json"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(LoaderError, match="Failed to read JSON draft"):
            JsonLoader().load_data(path)

    def test_root_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(LoaderError, match="object at root level"):
            JsonLoader().load_data(path)

    def test_load_from_string(self, signup_data):
        document = JsonLoader().load_from_string(json.dumps(signup_data))
        assert document.screen_ids() == ["screen_1", "screen_2"]

    def test_invalid_draft_content(self):
        with pytest.raises(DraftFormatError):
            JsonLoader().load_from_string('{"screens": []}')

    def test_dump_and_reload(self, tmp_path, signup_document):
        path = JsonLoader().dump(to_draft(signup_document), tmp_path / "nested" / "out.json")

        assert path.exists()
        assert JsonLoader().load(path) == signup_document


class TestYamlLoader:
    """Test suite for YamlLoader."""

    def test_load_from_string(self):
        document = YamlLoader().load_from_string(SIGNUP_YAML)

        assert document.name == "Signup"
        assert document.screens[0].elements[0].properties == {"text": "Hello"}
        assert document.screens[1].terminal is True

    def test_invalid_yaml(self):
        with pytest.raises(LoaderError, match="Invalid YAML content"):
            YamlLoader().load_from_string("screens: [unclosed")

    def test_root_must_be_mapping(self):
        with pytest.raises(LoaderError):
            YamlLoader().load_from_string("- just\n- a list\n")

    def test_unquoted_date_property_rejected(self):
        dated = SIGNUP_YAML.replace("          text: Hello\n", "          text: Hello\n          min_date: 2024-01-01\n")

        with pytest.raises(DraftFormatError, match="Invalid draft"):
            YamlLoader().load_from_string(dated)

    def test_quoted_date_property_loads(self):
        dated = SIGNUP_YAML.replace("          text: Hello\n", "          text: Hello\n          min_date: '2024-01-01'\n")

        document = YamlLoader().load_from_string(dated)

        assert document.screens[0].elements[0].properties["min_date"] == "2024-01-01"
        assert '"min_date": "2024-01-01"' in dumps_wire(document)

    def test_dump_and_reload(self, tmp_path, signup_document):
        path = YamlLoader().dump(to_draft(signup_document, selected_client="client_1"), tmp_path / "out.yaml")

        assert YamlLoader().load(path) == signup_document
        assert YamlLoader().load_data(path)["selected_client"] == "client_1"


class TestSuffixDispatch:
    """Test suite for the suffix-based helpers."""

    def test_write_then_load_yaml(self, tmp_path, signup_document):
        path = write_draft(to_draft(signup_document), tmp_path / "flow.yml")
        assert load_draft(path) == signup_document

    def test_read_draft_json(self, draft_file):
        assert read_draft(draft_file)["flow_name"] == "Signup"
