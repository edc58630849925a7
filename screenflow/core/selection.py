"""
Selection state machine for the editing session.

A Selection is a plain value: ``(screen_id, element_id)``. Its state is
derived from which ids are set:

- NO_SELECTION: neither id set
- SCREEN_SELECTED: screen id only
- ELEMENT_SELECTED: element id set; the screen id is always the owner of
  that element

The active screen and element objects are never stored; ``current_screen``
and ``current_element`` recompute them from the document on every call.
"""

from dataclasses import dataclass

from screenflow.models.enums import SelectionState

from .element import Element
from .flow import FlowDocument, find_element, find_screen, locate_element
from .screen import Screen


@dataclass(frozen=True)
class Selection:
    """Immutable selection value."""

    screen_id: str | None = None
    element_id: str | None = None

    @property
    def state(self) -> SelectionState:
        if self.element_id is not None:
            return SelectionState.ELEMENT_SELECTED
        if self.screen_id is not None:
            return SelectionState.SCREEN_SELECTED
        return SelectionState.NO_SELECTION

    def to_dict(self) -> dict[str, str | None]:
        return {
            "state": self.state.value,
            "screen_id": self.screen_id,
            "element_id": self.element_id,
        }


def initial_selection(document: FlowDocument) -> Selection:
    """First screen selected, no element."""
    return Selection(screen_id=document.screens[0].id)


def select_screen(document: FlowDocument, selection: Selection, screen_id: str) -> Selection:
    """Select a screen, clearing any element selection. Unknown ids leave the selection as is."""
    if find_screen(document, screen_id) is None:
        return selection
    return Selection(screen_id=screen_id)


def select_element(
    document: FlowDocument, selection: Selection, element_id: str | None
) -> Selection:
    """
    Select an element; its owner screen becomes the active screen.

    ``None`` clears the element selection only. Unknown ids leave the
    selection as is.
    """
    if element_id is None:
        return clear_element(selection)
    located = locate_element(document, element_id)
    if located is None:
        return selection
    screen, element = located
    return Selection(screen_id=screen.id, element_id=element.id)


def clear_element(selection: Selection) -> Selection:
    """Drop the element selection, keeping the active screen."""
    return Selection(screen_id=selection.screen_id)


def reconcile(document: FlowDocument, selection: Selection) -> Selection:
    """
    Bring a selection back in line with a (possibly mutated) document.

    - selected screen gone: fall back to the first screen, element cleared
    - selected element gone: element cleared, screen kept
    - selected element now owned by another screen: screen follows the owner
    """
    if find_screen(document, selection.screen_id) is None:
        return initial_selection(document)

    if selection.element_id is None:
        return selection

    located = locate_element(document, selection.element_id)
    if located is None:
        return clear_element(selection)
    owner, _ = located
    if owner.id != selection.screen_id:
        return Selection(screen_id=owner.id, element_id=selection.element_id)
    return selection


def current_screen(document: FlowDocument, selection: Selection) -> Screen | None:
    return find_screen(document, selection.screen_id)


def current_element(document: FlowDocument, selection: Selection) -> Element | None:
    return find_element(document, selection.screen_id, selection.element_id)
