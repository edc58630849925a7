"""Draft loaders for ScreenFlow.

The loader is picked from the file suffix: ``.json`` for JSON, ``.yaml``
and ``.yml`` for YAML.
"""

from pathlib import Path
from typing import Any

from screenflow.common.exceptions import LoaderError
from screenflow.core.flow import FlowDocument
from screenflow.models.base import DraftDocument
from screenflow.models.enums import DraftFormat

from .json_loader import JsonLoader
from .yaml_loader import YamlLoader

SUFFIX_FORMATS: dict[str, DraftFormat] = {
    ".json": DraftFormat.JSON,
    ".yaml": DraftFormat.YAML,
    ".yml": DraftFormat.YAML,
}


def detect_format(file_path: str | Path) -> DraftFormat:
    """
    Detect the draft format from a file suffix.

    Raises:
        LoaderError: If the suffix is not supported
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return SUFFIX_FORMATS[suffix]
    except KeyError:
        supported = ", ".join(SUFFIX_FORMATS)
        raise LoaderError(
            f"Unsupported draft file extension '{suffix}'. Supported: {supported}",
            file_path=str(file_path),
        ) from None


def get_loader(draft_format: DraftFormat | str) -> JsonLoader | YamlLoader:
    """Get the loader for a draft format."""
    if DraftFormat(draft_format) == DraftFormat.YAML:
        return YamlLoader()
    return JsonLoader()


def read_draft(file_path: str | Path) -> dict[str, Any]:
    """Read raw draft data, choosing the loader by suffix."""
    return get_loader(detect_format(file_path)).load_data(file_path)


def load_draft(file_path: str | Path) -> FlowDocument:
    """Load a flow document from a draft file, choosing the loader by suffix."""
    return get_loader(detect_format(file_path)).load(file_path)


def write_draft(draft: DraftDocument, file_path: str | Path) -> Path:
    """Write a draft, choosing the format by suffix."""
    return get_loader(detect_format(file_path)).dump(draft, file_path)


__all__ = [
    "SUFFIX_FORMATS",
    "JsonLoader",
    "YamlLoader",
    "detect_format",
    "get_loader",
    "read_draft",
    "load_draft",
    "write_draft",
]
