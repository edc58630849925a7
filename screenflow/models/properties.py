"""
Element property schemas per element type.

Single file containing:
- Pydantic models for each element family
- Lookup from element type to its model
- Parser for raw mappings → models
- Validator returning human-readable issues
- JSON value check shared by drafts and the engine

The document model itself stores properties as an open mapping; these
models are the typed view of that mapping. Unknown keys are kept so that
properties written by newer editors survive a round trip.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, JsonValue, TypeAdapter, ValidationError

from .enums import ElementType

# ============================================================================
# Property Models (Pydantic with inheritance)
# ============================================================================


class ElementProperties(BaseModel):
    """
    Base property model shared by every element type.

    Element types without editable fields use this model directly.
    """

    model_config = ConfigDict(
        extra="allow",  # Keep keys not declared by the model
        strict=True,  # No silent coercion of declared fields
    )


class TextProperties(ElementProperties):
    """Heading, subheading, body and caption text."""

    text: str | None = None


class InputProperties(ElementProperties):
    """Form fields that collect a value from the user."""

    label: str | None = None
    name: str | None = None  # Variable name the collected value is bound to
    required: bool = False


class FooterProperties(ElementProperties):
    """Action button at the bottom of a screen."""

    text: str | None = None


class OptInProperties(ElementProperties):
    """Consent checkbox."""

    text: str | None = None
    required: bool = False


class ImageProperties(ElementProperties):
    """Static image."""

    src: str | None = None
    alt: str | None = None


PROPERTY_MODELS: dict[ElementType, type[ElementProperties]] = {
    ElementType.TEXT_HEADING: TextProperties,
    ElementType.TEXT_SUBHEADING: TextProperties,
    ElementType.TEXT_BODY: TextProperties,
    ElementType.TEXT_CAPTION: TextProperties,
    ElementType.TEXT_INPUT: InputProperties,
    ElementType.TEXT_AREA: InputProperties,
    ElementType.DROPDOWN: InputProperties,
    ElementType.DATE_PICKER: InputProperties,
    ElementType.FOOTER: FooterProperties,
    ElementType.OPT_IN: OptInProperties,
    ElementType.IMAGE: ImageProperties,
}


def get_property_model(element_type: ElementType | str) -> type[ElementProperties]:
    """
    Get the property model for an element type.

    Unknown or unlisted types fall back to the permissive base model.
    """
    try:
        return PROPERTY_MODELS.get(ElementType(element_type), ElementProperties)
    except ValueError:
        return ElementProperties


def property_fields(element_type: ElementType | str) -> list[str]:
    """List the declared (editable) property keys of an element type."""
    return list(get_property_model(element_type).model_fields)


def parse_properties(
    element_type: ElementType | str, properties: Mapping[str, Any]
) -> ElementProperties:
    """
    Parse a raw property mapping into the typed model of its element type.

    Args:
        element_type: Type of the element owning the properties
        properties: Raw property mapping

    Returns:
        Typed property model instance

    Raises:
        pydantic.ValidationError: If a declared field has the wrong type
    """
    model = get_property_model(element_type)
    return model.model_validate(dict(properties))


def validate_properties(
    element_type: ElementType | str, properties: Mapping[str, Any]
) -> list[str]:
    """
    Validate a property mapping against its element type.

    Returns:
        List of issue descriptions; empty when the mapping is valid
    """
    try:
        parse_properties(element_type, properties)
    except ValidationError as e:
        issues = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "properties"
            issues.append(f"{location}: {error['msg']}")
        return issues
    return []


_JSON_VALUE_ADAPTER = TypeAdapter(JsonValue)


def is_json_value(value: Any) -> bool:
    """Check that ``value`` is built only from JSON types (no dates, sets, objects)."""
    try:
        _JSON_VALUE_ADAPTER.validate_python(value, strict=True)
    except ValidationError:
        return False
    return True
