"""
ScreenFlow models package.

Enums, TypedDict definitions and per-type property schemas shared by the
document model, serializers and editor.
"""

from .base import (
    WIRE_FORMAT_VERSION,
    DraftDocument,
    DraftElement,
    DraftScreen,
    PositionDict,
    WireDocument,
    WireElement,
    WireScreen,
)
from .enums import (
    DraftFormat,
    ElementCategory,
    ElementType,
    MutationStatus,
    SelectionState,
    SubmissionStatus,
)
from .properties import (
    ElementProperties,
    FooterProperties,
    ImageProperties,
    InputProperties,
    OptInProperties,
    TextProperties,
    get_property_model,
    is_json_value,
    parse_properties,
    property_fields,
    validate_properties,
)

__all__ = [
    # Enums
    "ElementType",
    "ElementCategory",
    "MutationStatus",
    "SelectionState",
    "SubmissionStatus",
    "DraftFormat",
    # Wire and draft shapes
    "WIRE_FORMAT_VERSION",
    "PositionDict",
    "WireElement",
    "WireScreen",
    "WireDocument",
    "DraftElement",
    "DraftScreen",
    "DraftDocument",
    # Property schemas
    "ElementProperties",
    "TextProperties",
    "InputProperties",
    "FooterProperties",
    "OptInProperties",
    "ImageProperties",
    "get_property_model",
    "is_json_value",
    "parse_properties",
    "property_fields",
    "validate_properties",
]
