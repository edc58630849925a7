"""
Mutation engine for flow documents.

Every operation is a pure function taking a document and returning a
``MutationResult``. Documents are never modified in place: an APPLIED
result carries a new document, every other outcome carries the document
that was passed in, untouched. No operation raises; refusals and missing
targets are reported through the result status.

When several elements could match a predicate, only the first match in
sequence order is touched.
"""

from dataclasses import replace
from typing import Any

from screenflow.models.enums import ElementType
from screenflow.models.properties import is_json_value
from screenflow.taxonomy import coerce_element_type

from .element import ELEMENT_ID_PREFIX, Element, Position, default_element_name
from .flow import FlowDocument, find_invariant_violations, find_screen, locate_element
from .ids import IdGenerator, RandomIdGenerator, unique_id
from .result import MutationResult
from .screen import Screen

SCREEN_ID_PREFIX = "screen_"

_default_generator = RandomIdGenerator()


def _swap_screen(screens: tuple[Screen, ...], updated: Screen) -> list[Screen]:
    """Swap in ``updated`` for the first screen with the same id."""
    swapped = list(screens)
    for index, screen in enumerate(swapped):
        if screen.id == updated.id:
            swapped[index] = updated
            break
    return swapped


def _replace_screen(document: FlowDocument, updated: Screen) -> FlowDocument:
    return document.with_screens(_swap_screen(document.screens, updated))


# ============================================================================
# Screen operations
# ============================================================================


def add_screen(document: FlowDocument, id_generator: IdGenerator | None = None) -> MutationResult:
    """
    Append a new empty screen.

    The title is derived from the screen count before the append
    (``Screen N+1``). ``target_id`` of the result is the new screen id.
    """
    generator = id_generator or _default_generator
    screen_id = unique_id(generator, SCREEN_ID_PREFIX, set(document.screen_ids()))
    screen = Screen(id=screen_id, title=f"Screen {document.screen_count + 1}")
    return MutationResult.applied(
        document.with_screens((*document.screens, screen)), "add_screen", target_id=screen_id
    )


def remove_screen(document: FlowDocument, screen_id: str) -> MutationResult:
    """
    Remove a screen and all of its elements.

    Rejected when the document holds a single screen; a no-op when the
    screen does not exist.
    """
    if document.screen_count <= 1:
        return MutationResult.rejected(
            document, "remove_screen", "Cannot remove the only screen", target_id=screen_id
        )
    if find_screen(document, screen_id) is None:
        return MutationResult.noop(
            document, "remove_screen", f"Screen '{screen_id}' not found", target_id=screen_id
        )

    screens = [screen for screen in document.screens if screen.id != screen_id]
    return MutationResult.applied(document.with_screens(screens), "remove_screen", target_id=screen_id)


def update_screen(document: FlowDocument, screen: Screen) -> MutationResult:
    """
    Replace the screen with the same id wholesale.

    The caller passes a complete screen (title, terminal flag and element
    sequence). Rejected when the replacement would break document
    invariants or change the type of an element it keeps.
    """
    existing = find_screen(document, screen.id)
    if existing is None:
        return MutationResult.noop(
            document, "update_screen", f"Screen '{screen.id}' not found", target_id=screen.id
        )

    for element in screen.elements:
        previous = existing.get_element(element.id)
        if previous is not None and str(previous.type) != str(element.type):
            return MutationResult.rejected(
                document,
                "update_screen",
                f"Element '{element.id}' type cannot change from '{previous.type}' to '{element.type}'",
                target_id=screen.id,
            )

    screens = _swap_screen(document.screens, screen)
    issues = find_invariant_violations(screens)
    if issues:
        return MutationResult.rejected(document, "update_screen", "; ".join(issues), target_id=screen.id)

    return MutationResult.applied(document.with_screens(screens), "update_screen", target_id=screen.id)


# ============================================================================
# Element operations
# ============================================================================


def add_element(
    document: FlowDocument,
    screen_id: str,
    element_type: ElementType | str,
    position: Position | None = None,
    id_generator: IdGenerator | None = None,
) -> MutationResult:
    """
    Append a new element to the end of a screen.

    The element gets a fresh id, a default name derived from its type and id
    and empty properties. Unknown type tokens are kept as-is. Reports
    NOT_FOUND when the screen does not exist. ``target_id`` of the result is
    the new element id.
    """
    screen = find_screen(document, screen_id)
    if screen is None:
        return MutationResult.not_found(
            document, "add_element", f"Screen '{screen_id}' not found", target_id=screen_id
        )

    generator = id_generator or _default_generator
    element_id = unique_id(generator, ELEMENT_ID_PREFIX, set(document.element_ids()))
    resolved_type = coerce_element_type(element_type)
    element = Element(
        id=element_id,
        type=resolved_type,
        name=default_element_name(resolved_type, element_id),
        properties={},
        position=position or Position(),
    )
    updated = screen.with_elements((*screen.elements, element))
    return MutationResult.applied(_replace_screen(document, updated), "add_element", target_id=element_id)


def remove_element(document: FlowDocument, screen_id: str, element_id: str) -> MutationResult:
    """
    Remove an element from the named screen.

    Idempotent: removing an element that is already gone is a no-op.
    """
    screen = find_screen(document, screen_id)
    if screen is None or not screen.has_element(element_id):
        return MutationResult.noop(
            document, "remove_element", f"Element '{element_id}' not found", target_id=element_id
        )

    remaining = list(screen.elements)
    remaining.remove(screen.get_element(element_id))
    return MutationResult.applied(
        _replace_screen(document, screen.with_elements(remaining)), "remove_element", target_id=element_id
    )


def move_element(
    document: FlowDocument, screen_id: str, element_id: str, position: Position
) -> MutationResult:
    """
    Update the position of an element.

    Nothing else changes, including its index in the screen's sequence.
    A no-op when the element is not found in the named screen.
    """
    screen = find_screen(document, screen_id)
    element = screen.get_element(element_id) if screen is not None else None
    if element is None:
        return MutationResult.noop(
            document, "move_element", f"Element '{element_id}' not found", target_id=element_id
        )

    elements = list(screen.elements)
    elements[elements.index(element)] = element.with_position(position)
    return MutationResult.applied(
        _replace_screen(document, screen.with_elements(elements)), "move_element", target_id=element_id
    )


def update_element(document: FlowDocument, element: Element) -> MutationResult:
    """
    Replace the element with the same id, wherever it lives.

    The owning screen is found by element id alone. Rejected when the
    replacement changes the element type or carries
    property values that are not plain JSON.
    """
    located = locate_element(document, element.id)
    if located is None:
        return MutationResult.noop(
            document, "update_element", f"Element '{element.id}' not found", target_id=element.id
        )

    screen, previous = located
    if str(previous.type) != str(element.type):
        return MutationResult.rejected(
            document,
            "update_element",
            f"Element '{element.id}' type cannot change from '{previous.type}' to '{element.type}'",
            target_id=element.id,
        )
    if not is_json_value(element.properties):
        return MutationResult.rejected(
            document,
            "update_element",
            f"Element '{element.id}' properties must be JSON values",
            target_id=element.id,
        )

    elements = list(screen.elements)
    elements[elements.index(previous)] = element
    return MutationResult.applied(
        _replace_screen(document, screen.with_elements(elements)), "update_element", target_id=element.id
    )


def update_element_property(
    document: FlowDocument, element: Element | str, key: str, value: Any
) -> MutationResult:
    """
    Merge one property into an element, keeping every other key.

    ``element`` is either the element value to build on or an element id,
    in which case the current element in the document is used.
    """
    if isinstance(element, str):
        located = locate_element(document, element)
        if located is None:
            return MutationResult.noop(
                document, "update_element_property", f"Element '{element}' not found", target_id=element
            )
        element = located[1]

    result = update_element(document, element.with_property(key, value))
    return replace(result, operation="update_element_property")
