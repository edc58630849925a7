"""Screen: one page of a flow holding an ordered sequence of elements."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from screenflow.models.base import DraftScreen

from .element import Element


@dataclass(frozen=True)
class Screen:
    """
    Immutable screen value.

    ``elements`` is kept as a tuple in render order; order changes only
    through explicit commands.
    """

    id: str
    title: str
    elements: tuple[Element, ...] = field(default_factory=tuple)
    terminal: bool = False

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def element_ids(self) -> list[str]:
        return [element.id for element in self.elements]

    def get_element(self, element_id: str) -> Element | None:
        """First element with the given id, in sequence order."""
        return next((el for el in self.elements if el.id == element_id), None)

    def has_element(self, element_id: str) -> bool:
        return self.get_element(element_id) is not None

    def with_title(self, title: str) -> "Screen":
        return replace(self, title=title)

    def with_terminal(self, terminal: bool) -> "Screen":
        return replace(self, terminal=terminal)

    def with_elements(self, elements: Iterable[Element]) -> "Screen":
        return replace(self, elements=tuple(elements))

    def to_dict(self, include_position: bool = True) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "elements": [el.to_dict(include_position=include_position) for el in self.elements],
            "terminal": self.terminal,
        }

    @classmethod
    def from_dict(cls, data: DraftScreen | Mapping[str, Any]) -> "Screen":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            elements=tuple(Element.from_dict(el) for el in data.get("elements") or []),
            terminal=bool(data.get("terminal", False)),
        )
