"""Projection of a flow document into the wire format consumed by the delivery platform."""

import copy
import json

from screenflow.core.flow import FlowDocument
from screenflow.models.base import WIRE_FORMAT_VERSION, WireDocument, WireElement, WireScreen


def to_wire_format(document: FlowDocument, include_position: bool = False) -> WireDocument:
    """
    Build the wire document for a flow.

    Screen and element order is kept exactly as stored. Element positions
    are left out unless ``include_position`` is set; selection and session
    state never appear. Property values are deep-copied, so the result can
    be modified freely without touching the document.

    Args:
        document: Flow to project
        include_position: Emit each element's ``position``

    Returns:
        WireDocument dictionary
    """
    screens: list[WireScreen] = []
    for screen in document.screens:
        elements: list[WireElement] = []
        for element in screen.elements:
            wire_element = WireElement(
                id=element.id,
                type=str(element.type),
                name=element.name,
                properties=copy.deepcopy(element.properties),
            )
            if include_position:
                wire_element["position"] = element.position.to_dict()
            elements.append(wire_element)
        screens.append(
            WireScreen(id=screen.id, title=screen.title, elements=elements, terminal=screen.terminal)
        )
    return WireDocument(version=WIRE_FORMAT_VERSION, screens=screens)


def dumps_wire(document: FlowDocument, include_position: bool = False, indent: int | None = 2) -> str:
    """Serialize the wire document to JSON text; identical documents give identical text."""
    return json.dumps(
        to_wire_format(document, include_position=include_position),
        indent=indent,
        ensure_ascii=False,
    )
