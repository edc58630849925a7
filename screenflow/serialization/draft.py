"""Draft format: the editable flow as saved by the editor, positions included.

Drafts are validated with pydantic before they are turned back into a
document, so malformed files fail with a ``DraftFormatError`` that names
the offending field.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    ValidationError,
    model_validator,
)

from screenflow.common.exceptions import DocumentInvariantError, DraftFormatError
from screenflow.core.element import Element, Position, default_element_name
from screenflow.core.flow import DEFAULT_FLOW_NAME, FlowDocument
from screenflow.core.screen import Screen
from screenflow.models.base import DraftDocument, DraftElement, DraftScreen
from screenflow.taxonomy import coerce_element_type

# ============================================================================
# Validation Models
# ============================================================================


class BaseDraftModel(BaseModel):
    """Base model with common configuration for draft validation models."""

    model_config = ConfigDict(
        extra="ignore",  # Unknown keys from newer editors are dropped
    )


class PositionModel(BaseDraftModel):
    x: int | float = 0
    y: int | float = 0


class DraftElementModel(BaseDraftModel):
    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    name: str | None = None
    properties: dict[str, JsonValue] = Field(default_factory=dict)
    position: PositionModel = Field(default_factory=PositionModel)


class DraftScreenModel(BaseDraftModel):
    id: str = Field(min_length=1)
    title: str = ""
    elements: list[DraftElementModel] = Field(default_factory=list)
    terminal: bool = False


class DraftDocumentModel(BaseDraftModel):
    """
    Pydantic model for a whole draft.

    The camelCase keys written by the browser editor (``flowName``,
    ``selectedClient``) are accepted alongside the snake_case ones.
    """

    flow_name: str = Field(
        default=DEFAULT_FLOW_NAME, validation_alias=AliasChoices("flow_name", "flowName")
    )
    screens: list[DraftScreenModel] = Field(min_length=1)
    selected_client: str | None = Field(
        default=None, validation_alias=AliasChoices("selected_client", "selectedClient")
    )

    @model_validator(mode="after")
    def validate_unique_ids(self):
        """Screen ids and element ids must be unique across the draft."""
        screen_ids = [screen.id for screen in self.screens]
        duplicates = sorted({sid for sid in screen_ids if screen_ids.count(sid) > 1})
        if duplicates:
            raise ValueError(f"Duplicate screen ids: {duplicates}")

        element_ids = [el.id for screen in self.screens for el in screen.elements]
        duplicates = sorted({eid for eid in element_ids if element_ids.count(eid) > 1})
        if duplicates:
            raise ValueError(f"Duplicate element ids: {duplicates}")
        return self


# ============================================================================
# Conversion
# ============================================================================


def to_draft(document: FlowDocument, selected_client: str | None = None) -> DraftDocument:
    """Build the draft dictionary for a document."""
    screens: list[DraftScreen] = []
    for screen in document.screens:
        elements = [DraftElement(**element.to_dict(include_position=True)) for element in screen.elements]
        screens.append(
            DraftScreen(id=screen.id, title=screen.title, elements=elements, terminal=screen.terminal)
        )
    return DraftDocument(flow_name=document.name, screens=screens, selected_client=selected_client)


def parse_draft(data: Mapping[str, Any]) -> DraftDocumentModel:
    """
    Validate raw draft data.

    Raises:
        DraftFormatError: If the data does not describe a valid draft
    """
    if not isinstance(data, Mapping):
        raise DraftFormatError("Draft must be a mapping at root level")
    try:
        return DraftDocumentModel.model_validate(dict(data))
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"]) or None
        raise DraftFormatError(
            f"Invalid draft: {first['msg']}",
            field_name=field_name,
            context={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def from_draft(data: Mapping[str, Any]) -> FlowDocument:
    """
    Rebuild a document from draft data.

    Raises:
        DraftFormatError: If the data does not describe a valid draft
    """
    model = parse_draft(data)
    screens = []
    for screen in model.screens:
        elements = tuple(
            Element(
                id=el.id,
                type=coerce_element_type(el.type),
                name=el.name or default_element_name(el.type, el.id),
                properties=el.properties,
                position=Position(x=el.position.x, y=el.position.y),
            )
            for el in screen.elements
        )
        screens.append(Screen(id=screen.id, title=screen.title, elements=elements, terminal=screen.terminal))

    try:
        return FlowDocument(screens=tuple(screens), name=model.flow_name)
    except DocumentInvariantError as e:
        raise DraftFormatError(str(e), context=e.context) from e
