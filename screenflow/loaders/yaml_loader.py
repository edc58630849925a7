"""YAML draft loader for ScreenFlow."""

import logging
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from screenflow.common.exceptions import LoaderError
from screenflow.core.flow import FlowDocument
from screenflow.models.base import DraftDocument
from screenflow.serialization.draft import from_draft

logger = logging.getLogger(__name__)


class YamlLoader:
    """
    YAML loader for ScreenFlow drafts.

    Loads and parses YAML files containing drafts, converting them into
    flow documents, and writes drafts back as block-style YAML.
    """

    loader_type = "yaml"

    def __init__(self):
        """Initialize YAML loader with ruamel configuration."""
        self.yaml = YAML(typ="safe")
        self.yaml.default_flow_style = False

    def load_data(self, file_path: str | Path) -> dict[str, Any]:
        """
        Load raw draft data from a YAML file.

        Raises:
            LoaderError: If the file is missing, unreadable or not a mapping
        """
        path = Path(file_path)
        if not path.exists():
            raise LoaderError(f"Draft file not found: {file_path}", file_path=str(file_path), loader_type=self.loader_type)

        try:
            with open(path, encoding="utf-8") as f:
                data = self.yaml.load(f)
        except (OSError, YAMLError) as e:
            raise LoaderError(
                f"Failed to read YAML draft: {e}", file_path=str(file_path), loader_type=self.loader_type
            ) from e

        if not isinstance(data, dict):
            raise LoaderError(
                "YAML file must contain a dictionary at root level",
                file_path=str(file_path),
                loader_type=self.loader_type,
            )
        logger.debug(f"Loaded YAML draft from {path}")
        return data

    def load(self, file_path: str | Path) -> FlowDocument:
        """Load a flow document from a YAML draft file."""
        return from_draft(self.load_data(file_path))

    def load_from_string(self, yaml_content: str) -> FlowDocument:
        """
        Load a flow document from YAML content.

        Raises:
            LoaderError: If the content is not valid YAML or not a mapping
        """
        try:
            data = self.yaml.load(yaml_content)
        except YAMLError as e:
            raise LoaderError(f"Invalid YAML content: {e}", loader_type=self.loader_type) from e

        if not isinstance(data, dict):
            raise LoaderError("YAML content must contain a dictionary at root level", loader_type=self.loader_type)
        return from_draft(data)

    def dump(self, draft: DraftDocument, file_path: str | Path) -> Path:
        """Write a draft to a YAML file, creating parent directories."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        writer = YAML()
        writer.indent(mapping=2, sequence=4, offset=2)
        writer.default_flow_style = False
        with path.open("w", encoding="utf-8") as f:
            writer.dump(dict(draft), f)
        logger.debug(f"Wrote YAML draft to {path}")
        return path
