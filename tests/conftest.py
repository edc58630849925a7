"""Pytest configuration and fixtures for ScreenFlow tests.

Documents built here use deterministic id generators so assertions can
name the ids new screens and elements receive.
"""

import json

import pytest

from screenflow.core.flow import FlowDocument
from screenflow.core.ids import SequentialIdGenerator
from screenflow.manager import Client, EditorConfig, FlowEditor
from screenflow.manager import constants
from screenflow.serialization import from_draft
from tests.fixtures.sample_data import sample_clients, signup_draft

SCREENFLOW_ENV_VARS = [
    constants.ENV_INCLUDE_POSITION,
    constants.ENV_DEFAULT_FORMAT,
    constants.ENV_STRICT_PROPERTIES,
    constants.ENV_ID_LENGTH,
    constants.ENV_DEFAULT_FLOW_NAME,
]


@pytest.fixture(autouse=True)
def clean_screenflow_env(monkeypatch):
    """Run every test without SCREENFLOW_* settings from the outer environment."""
    for name in SCREENFLOW_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def config():
    return EditorConfig()


@pytest.fixture
def new_document():
    """Document as created by a fresh editor: one empty screen."""
    return FlowDocument.create()


@pytest.fixture
def signup_data():
    return signup_draft()


@pytest.fixture
def signup_document(signup_data):
    """Two screens: screen_1 with a heading and an input, terminal screen_2 with a footer."""
    return from_draft(signup_data)


@pytest.fixture
def clients():
    return [Client.from_dict(data) for data in sample_clients()]


@pytest.fixture
def editor(config, id_generator):
    return FlowEditor(config=config, id_generator=id_generator)


@pytest.fixture
def signup_editor(signup_document, config, id_generator, clients):
    return FlowEditor(
        document=signup_document,
        config=config,
        id_generator=id_generator,
        clients=clients,
    )


@pytest.fixture
def draft_file(tmp_path, signup_data):
    """Signup draft written as JSON."""
    path = tmp_path / "signup.json"
    path.write_text(json.dumps(signup_data, indent=2), encoding="utf-8")
    return path
