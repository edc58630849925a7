"""
ScreenFlow: document model for multi-screen interactive form flows.

ScreenFlow holds the editable representation of a Flow (screens holding
typed UI elements), the pure operations that change it, the selection state
of an editing session and the projection into the versioned wire document
consumed by the delivery platform.

Core Components:
    - FlowDocument, Screen, Element: Immutable document entities
    - engine: Pure mutation operations returning MutationResult
    - Selection: Active screen / element of a session
    - to_wire_format: Projection into the wire document
    - FlowEditor: Session controller owning one document

Example Usage:
    ```python
    from screenflow import FlowEditor

    editor = FlowEditor()
    screen_id = editor.add_screen().target_id
    editor.add_element(screen_id, "text-heading", (10, 20))
    editor.update_element_property(editor.current_element, "text", "Hello")
    print(editor.wire_json())
    ```
"""

__version__ = "0.1.0"

# Public API exports - Core functionality
from .common.exceptions import (
    DocumentInvariantError,
    DraftFormatError,
    LoaderError,
    NotFoundError,
    RejectedOperationError,
    ScreenFlowError,
    SubmissionError,
)
from .core import engine
from .core.element import Element, Position
from .core.flow import FlowDocument, find_element, find_screen, locate_element
from .core.ids import RandomIdGenerator, SequentialIdGenerator
from .core.result import MutationResult
from .core.screen import Screen
from .core.selection import Selection
from .loaders import load_draft, write_draft
from .manager import Client, EditorConfig, FlowEditor
from .models.enums import ElementCategory, ElementType, MutationStatus, SelectionState
from .serialization import dumps_wire, from_draft, to_draft, to_wire_format
from .taxonomy import ElementRegistry, ElementSpec, get_element_category, get_element_label

__all__ = [
    # Core functionality
    "FlowDocument",
    "Screen",
    "Element",
    "Position",
    "engine",
    "MutationResult",
    "Selection",
    "FlowEditor",
    "EditorConfig",
    "Client",
    "__version__",
    # Accessors
    "find_screen",
    "find_element",
    "locate_element",
    # Ids
    "RandomIdGenerator",
    "SequentialIdGenerator",
    # Enums
    "ElementType",
    "ElementCategory",
    "MutationStatus",
    "SelectionState",
    # Taxonomy
    "ElementRegistry",
    "ElementSpec",
    "get_element_label",
    "get_element_category",
    # Serialization
    "to_wire_format",
    "dumps_wire",
    "to_draft",
    "from_draft",
    "load_draft",
    "write_draft",
    # Errors
    "ScreenFlowError",
    "DocumentInvariantError",
    "NotFoundError",
    "RejectedOperationError",
    "DraftFormatError",
    "LoaderError",
    "SubmissionError",
]
