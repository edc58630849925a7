"""FlowDocument: the multi-screen document being authored, plus read-only accessors."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from screenflow.common.exceptions import DocumentInvariantError

from .element import Element
from .screen import Screen

DEFAULT_FLOW_NAME = "Untitled Flow"
DEFAULT_SCREEN_ID = "screen_1"
DEFAULT_SCREEN_TITLE = "Welcome"


def find_invariant_violations(screens: Iterable[Screen]) -> list[str]:
    """
    Check the structural invariants of a screen sequence.

    Returns:
        Descriptions of every violation; empty when the sequence is valid
    """
    issues: list[str] = []
    screens = list(screens)
    if not screens:
        issues.append("A flow must contain at least one screen")

    seen_screens: set[str] = set()
    seen_elements: dict[str, str] = {}
    for screen in screens:
        if screen.id in seen_screens:
            issues.append(f"Duplicate screen id '{screen.id}'")
        seen_screens.add(screen.id)
        for element in screen.elements:
            owner = seen_elements.get(element.id)
            if owner is not None:
                issues.append(
                    f"Duplicate element id '{element.id}' in screens '{owner}' and '{screen.id}'"
                )
            else:
                seen_elements[element.id] = screen.id
    return issues


@dataclass(frozen=True)
class FlowDocument:
    """
    Immutable flow document.

    Invariants, checked on construction:
    - at least one screen
    - screen ids unique within the document
    - element ids unique across all screens
    """

    screens: tuple[Screen, ...]
    name: str = DEFAULT_FLOW_NAME

    def __post_init__(self):
        object.__setattr__(self, "screens", tuple(self.screens))
        issues = find_invariant_violations(self.screens)
        if issues:
            raise DocumentInvariantError(
                f"Invalid flow document: {'; '.join(issues)}",
                context={"issues": issues},
            )

    @classmethod
    def create(
        cls,
        name: str = DEFAULT_FLOW_NAME,
        screen_id: str = DEFAULT_SCREEN_ID,
        title: str = DEFAULT_SCREEN_TITLE,
    ) -> "FlowDocument":
        """Create a new flow holding one empty screen."""
        return cls(screens=(Screen(id=screen_id, title=title),), name=name)

    @property
    def screen_count(self) -> int:
        return len(self.screens)

    @property
    def element_count(self) -> int:
        return sum(len(screen.elements) for screen in self.screens)

    def screen_ids(self) -> list[str]:
        return [screen.id for screen in self.screens]

    def element_ids(self) -> list[str]:
        return [element.id for screen in self.screens for element in screen.elements]

    def index_of(self, screen_id: str) -> int | None:
        """Sequence index of a screen, or None."""
        for index, screen in enumerate(self.screens):
            if screen.id == screen_id:
                return index
        return None

    def with_name(self, name: str) -> "FlowDocument":
        return replace(self, name=name)

    def with_screens(self, screens: Iterable[Screen]) -> "FlowDocument":
        return replace(self, screens=tuple(screens))

    def to_dict(self, include_position: bool = True) -> dict[str, Any]:
        return {
            "name": self.name,
            "screens": [screen.to_dict(include_position=include_position) for screen in self.screens],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FlowDocument":
        return cls(
            screens=tuple(Screen.from_dict(screen) for screen in data.get("screens") or []),
            name=data.get("name", DEFAULT_FLOW_NAME),
        )


# ============================================================================
# Read-only accessors
# ============================================================================


def find_screen(document: FlowDocument, screen_id: str | None) -> Screen | None:
    """Resolve a screen by id."""
    if screen_id is None:
        return None
    return next((screen for screen in document.screens if screen.id == screen_id), None)


def find_element(
    document: FlowDocument, screen_id: str | None, element_id: str | None
) -> Element | None:
    """Resolve an element by id within the named screen."""
    if element_id is None:
        return None
    screen = find_screen(document, screen_id)
    if screen is None:
        return None
    return screen.get_element(element_id)


def locate_element(
    document: FlowDocument, element_id: str | None
) -> tuple[Screen, Element] | None:
    """Find the first element with the given id across all screens, with its owner."""
    if element_id is None:
        return None
    for screen in document.screens:
        element = screen.get_element(element_id)
        if element is not None:
            return screen, element
    return None
