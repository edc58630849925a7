"""Serialization of flow documents: wire format and editor drafts."""

from .draft import DraftDocumentModel, from_draft, parse_draft, to_draft
from .wire import dumps_wire, to_wire_format

__all__ = [
    "to_wire_format",
    "dumps_wire",
    "to_draft",
    "from_draft",
    "parse_draft",
    "DraftDocumentModel",
]
