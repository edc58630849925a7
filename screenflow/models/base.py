"""
Base model definitions for ScreenFlow.

This module is the single source of truth for the TypedDict definitions of
the dictionaries ScreenFlow produces and consumes: the wire document handed
to the delivery platform and the draft files written by the editor.
"""

from typing import Any, NotRequired, TypedDict

__all__ = [
    "WIRE_FORMAT_VERSION",
    "PositionDict",
    "WireElement",
    "WireScreen",
    "WireDocument",
    "DraftElement",
    "DraftScreen",
    "DraftDocument",
]


WIRE_FORMAT_VERSION = "3.0"


class PositionDict(TypedDict):
    """Placement of an element on its screen surface."""

    x: int | float
    y: int | float


class WireElement(TypedDict):
    """Element as it appears in the wire document."""

    id: str
    type: str
    name: str
    properties: dict[str, Any]
    position: NotRequired[PositionDict]  # Only when the position variant is enabled


class WireScreen(TypedDict):
    """Screen as it appears in the wire document."""

    id: str
    title: str
    elements: list[WireElement]
    terminal: bool


class WireDocument(TypedDict):
    """Versioned document consumed by the delivery platform."""

    version: str
    screens: list[WireScreen]


class DraftElement(TypedDict):
    """Element as stored in a draft file, position included."""

    id: str
    type: str
    name: str
    properties: dict[str, Any]
    position: PositionDict


class DraftScreen(TypedDict):
    """Screen as stored in a draft file."""

    id: str
    title: str
    elements: list[DraftElement]
    terminal: NotRequired[bool]


class DraftDocument(TypedDict):
    """Editable flow as stored in a draft file."""

    flow_name: str
    screens: list[DraftScreen]
    selected_client: NotRequired[str | None]
