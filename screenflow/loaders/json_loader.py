"""JSON draft loader for ScreenFlow."""

import json
import logging
from pathlib import Path
from typing import Any

from screenflow.common.exceptions import LoaderError
from screenflow.core.flow import FlowDocument
from screenflow.models.base import DraftDocument
from screenflow.serialization.draft import from_draft

logger = logging.getLogger(__name__)


class JsonLoader:
    """
    JSON loader for ScreenFlow drafts.

    Loads and parses JSON files containing drafts, converting them into
    flow documents, and writes drafts back as indented JSON.
    """

    loader_type = "json"

    def load_data(self, file_path: str | Path) -> dict[str, Any]:
        """
        Load raw draft data from a JSON file.

        Raises:
            LoaderError: If the file is missing, unreadable or not an object
        """
        path = Path(file_path)
        if not path.exists():
            raise LoaderError(f"Draft file not found: {file_path}", file_path=str(file_path), loader_type=self.loader_type)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LoaderError(
                f"Failed to read JSON draft: {e}", file_path=str(file_path), loader_type=self.loader_type
            ) from e

        if not isinstance(data, dict):
            raise LoaderError(
                "JSON file must contain an object at root level",
                file_path=str(file_path),
                loader_type=self.loader_type,
            )
        logger.debug(f"Loaded JSON draft from {path}")
        return data

    def load(self, file_path: str | Path) -> FlowDocument:
        """Load a flow document from a JSON draft file."""
        return from_draft(self.load_data(file_path))

    def load_from_string(self, json_content: str) -> FlowDocument:
        """
        Load a flow document from JSON content.

        Raises:
            LoaderError: If the content is not valid JSON or not an object
        """
        try:
            data = json.loads(json_content)
        except json.JSONDecodeError as e:
            raise LoaderError(f"Invalid JSON content: {e}", loader_type=self.loader_type) from e

        if not isinstance(data, dict):
            raise LoaderError("JSON content must contain an object at root level", loader_type=self.loader_type)
        return from_draft(data)

    def dump(self, draft: DraftDocument, file_path: str | Path) -> Path:
        """Write a draft to a JSON file, creating parent directories."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(draft, f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.debug(f"Wrote JSON draft to {path}")
        return path
