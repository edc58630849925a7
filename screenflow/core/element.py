"""Element: one typed UI component placed on a screen."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from screenflow.models.base import DraftElement, PositionDict
from screenflow.models.enums import ElementType
from screenflow.models.properties import ElementProperties, parse_properties
from screenflow.taxonomy import coerce_element_type

ELEMENT_ID_PREFIX = "element_"

Coordinate = int | float


def default_element_name(element_type: ElementType | str, element_id: str) -> str:
    """Name given to an element that has none: ``{type}_{token}``."""
    return f"{element_type}_{element_id.removeprefix(ELEMENT_ID_PREFIX)}"


def _coordinate(value: Any) -> Coordinate:
    # Whole numbers are stored as int
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = float(value)
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class Position:
    """Coordinates of an element on its screen surface."""

    x: Coordinate = 0
    y: Coordinate = 0

    def __post_init__(self):
        object.__setattr__(self, "x", _coordinate(self.x))
        object.__setattr__(self, "y", _coordinate(self.y))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Position":
        if not data:
            return cls()
        return cls(x=data.get("x", 0), y=data.get("y", 0))

    def to_dict(self) -> PositionDict:
        return PositionDict(x=self.x, y=self.y)


@dataclass(frozen=True)
class Element:
    """
    Immutable element value.

    ``id`` and ``type`` never change after creation; every other change
    produces a new Element through the ``with_*`` helpers. ``type`` holds the
    raw token when the element type is not part of ElementType.
    """

    id: str
    type: ElementType | str
    name: str
    properties: dict[str, Any] = field(default_factory=dict)
    position: Position = field(default_factory=Position)

    def __post_init__(self):
        # Properties are never shared with the mapping passed in
        object.__setattr__(self, "properties", copy.deepcopy(dict(self.properties)))

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def with_position(self, position: Position) -> "Element":
        return replace(self, position=position)

    def with_property(self, key: str, value: Any) -> "Element":
        """Return a copy with ``key`` merged into the properties."""
        return replace(self, properties={**self.properties, key: value})

    def with_name(self, name: str) -> "Element":
        return replace(self, name=name)

    def typed_properties(self) -> ElementProperties:
        """Typed view of the properties for this element's type."""
        return parse_properties(self.type, self.properties)

    def to_dict(self, include_position: bool = True) -> dict[str, Any]:
        """Plain-dict form; values are deep-copied."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": str(self.type),
            "name": self.name,
            "properties": copy.deepcopy(self.properties),
        }
        if include_position:
            data["position"] = self.position.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: DraftElement | Mapping[str, Any]) -> "Element":
        return cls(
            id=data["id"],
            type=coerce_element_type(data["type"]),
            name=data.get("name") or default_element_name(data["type"], data["id"]),
            properties=dict(data.get("properties") or {}),
            position=Position.from_dict(data.get("position")),
        )
