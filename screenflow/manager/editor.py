"""FlowEditor: the single owner of a flow document during an editing session."""

import logging
from collections.abc import Mapping
from typing import Any

from screenflow.common.exceptions import NotFoundError, SubmissionError
from screenflow.core import engine
from screenflow.core import selection as selection_machine
from screenflow.core.element import Element, Position
from screenflow.core.flow import FlowDocument, find_screen, locate_element
from screenflow.core.ids import IdGenerator, RandomIdGenerator
from screenflow.core.result import MutationResult
from screenflow.core.screen import Screen
from screenflow.core.selection import Selection
from screenflow.models.base import DraftDocument, WireDocument
from screenflow.models.enums import ElementType, MutationStatus, SubmissionStatus
from screenflow.models.properties import validate_properties
from screenflow.serialization.draft import from_draft, parse_draft, to_draft
from screenflow.serialization.wire import dumps_wire, to_wire_format

from .clients import Client, ClientDirectory, SubmissionRequest, Submitter
from .config import EditorConfig

logger = logging.getLogger(__name__)

PositionLike = Position | tuple[float, float] | Mapping[str, float]


def as_position(position: PositionLike | None) -> Position:
    """Normalize a position given as Position, ``(x, y)`` or ``{"x": .., "y": ..}``."""
    if position is None:
        return Position()
    if isinstance(position, Position):
        return position
    if isinstance(position, Mapping):
        return Position.from_dict(position)
    x, y = position
    return Position(x=x, y=y)


class FlowEditor:
    """
    Editing session over one flow document.

    The editor owns the current document and selection. Every change goes
    through the mutation engine; the editor swaps in the resulting document,
    reconciles the selection and keeps track of unsaved changes.

    Key features:
    - Engine results returned unchanged to the caller
    - Selection kept consistent with the document after every command
    - Dirty flag tracking for change detection
    - Client selection and submission hand-off
    """

    def __init__(
        self,
        document: FlowDocument | None = None,
        config: EditorConfig | None = None,
        id_generator: IdGenerator | None = None,
        clients: ClientDirectory | list[Client] | None = None,
        selected_client: str | None = None,
    ):
        """
        Initialize the editor.

        Args:
            document: Document to edit; a new single-screen flow when None
            config: Editor configuration; read from the environment when None
            id_generator: Source of id tokens for new screens and elements
            clients: Known clients the flow can be submitted for
            selected_client: Id of the client initially selected
        """
        self._config = config if config is not None else EditorConfig.from_env()
        self._document = document if document is not None else FlowDocument.create(
            name=self._config.default_flow_name
        )
        self._id_generator = id_generator or RandomIdGenerator(self._config.id_length)
        self._selection = selection_machine.initial_selection(self._document)
        self._clients = clients if isinstance(clients, ClientDirectory) else ClientDirectory(clients or [])
        self._selected_client = selected_client
        self._submission_status = SubmissionStatus.IDLE
        self._dirty = False

    @classmethod
    def from_draft(cls, data: Mapping[str, Any], **kwargs: Any) -> "FlowEditor":
        """Open an editor on draft data, restoring the selected client."""
        kwargs.setdefault("selected_client", parse_draft(data).selected_client)
        return cls(document=from_draft(data), **kwargs)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def document(self) -> FlowDocument:
        """Get the current document."""
        return self._document

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def is_dirty(self) -> bool:
        """Check if the document has unsaved changes."""
        return self._dirty

    def mark_clean(self) -> None:
        """Mark the editor as clean (no unsaved changes)."""
        self._dirty = False

    @property
    def current_screen(self) -> Screen | None:
        return selection_machine.current_screen(self._document, self._selection)

    @property
    def current_element(self) -> Element | None:
        return selection_machine.current_element(self._document, self._selection)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _apply(self, result: MutationResult) -> MutationResult:
        """Adopt the result document, reconcile the selection and log the outcome."""
        if result.status == MutationStatus.APPLIED:
            self._document = result.document
            self._selection = selection_machine.reconcile(self._document, self._selection)
            self._dirty = True
            logger.info(f"{result.operation} applied to '{result.target_id}'")
        elif result.status == MutationStatus.NOOP:
            logger.debug(f"{result.operation} skipped: {result.message}")
        else:
            logger.warning(f"{result.operation} {result.status.value}: {result.message}")
        return result

    def rename(self, name: str) -> MutationResult:
        """Rename the flow."""
        if name == self._document.name:
            return self._apply(MutationResult.noop(self._document, "rename_flow", "Name unchanged"))
        return self._apply(MutationResult.applied(self._document.with_name(name), "rename_flow", target_id=name))

    def add_screen(self) -> MutationResult:
        """Append a screen and select it."""
        result = self._apply(engine.add_screen(self._document, self._id_generator))
        if result.changed:
            self._selection = selection_machine.select_screen(self._document, self._selection, result.target_id)
        return result

    def remove_screen(self, screen_id: str) -> MutationResult:
        """Remove a screen; a selection inside it falls back to the first screen."""
        return self._apply(engine.remove_screen(self._document, screen_id))

    def update_screen(self, screen: Screen) -> MutationResult:
        """Replace a screen wholesale."""
        return self._apply(engine.update_screen(self._document, screen))

    def set_screen_title(self, screen_id: str, title: str) -> MutationResult:
        screen = find_screen(self._document, screen_id)
        if screen is None:
            return self._apply(
                MutationResult.noop(self._document, "update_screen", f"Screen '{screen_id}' not found", screen_id)
            )
        return self.update_screen(screen.with_title(title))

    def set_screen_terminal(self, screen_id: str, terminal: bool) -> MutationResult:
        screen = find_screen(self._document, screen_id)
        if screen is None:
            return self._apply(
                MutationResult.noop(self._document, "update_screen", f"Screen '{screen_id}' not found", screen_id)
            )
        return self.update_screen(screen.with_terminal(terminal))

    def add_element(
        self,
        screen_id: str,
        element_type: ElementType | str,
        position: PositionLike | None = None,
    ) -> MutationResult:
        """Append an element to a screen and select it."""
        result = self._apply(
            engine.add_element(
                self._document, screen_id, element_type, as_position(position), self._id_generator
            )
        )
        if result.changed:
            self._selection = selection_machine.select_element(self._document, self._selection, result.target_id)
        return result

    def remove_element(self, screen_id: str, element_id: str) -> MutationResult:
        """Remove an element; removing the selected element always clears the element selection."""
        targets_selected = self._selection.element_id == element_id
        result = self._apply(engine.remove_element(self._document, screen_id, element_id))
        if targets_selected:
            self._selection = selection_machine.clear_element(self._selection)
        return result

    def move_element(self, screen_id: str, element_id: str, position: PositionLike) -> MutationResult:
        return self._apply(engine.move_element(self._document, screen_id, element_id, as_position(position)))

    def update_element(self, element: Element) -> MutationResult:
        """Replace an element by id, wherever it lives."""
        return self._apply(engine.update_element(self._document, element))

    def update_element_property(self, element: Element | str, key: str, value: Any) -> MutationResult:
        """
        Set one property of an element.

        With ``strict_properties`` enabled the merged properties must pass
        the element type's schema, otherwise the change is rejected.
        """
        if self._config.strict_properties:
            current = self._locate(element) if isinstance(element, str) else element
            if current is not None:
                issues = validate_properties(current.type, {**current.properties, key: value})
                if issues:
                    return self._apply(
                        MutationResult.rejected(
                            self._document,
                            "update_element_property",
                            f"Invalid value for '{key}': {'; '.join(issues)}",
                            target_id=current.id,
                        )
                    )
        return self._apply(engine.update_element_property(self._document, element, key, value))

    def _locate(self, element_id: str) -> Element | None:
        located = locate_element(self._document, element_id)
        return located[1] if located is not None else None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_screen(self, screen_id: str) -> Selection:
        self._selection = selection_machine.select_screen(self._document, self._selection, screen_id)
        return self._selection

    def select_element(self, element_id: str | None) -> Selection:
        self._selection = selection_machine.select_element(self._document, self._selection, element_id)
        return self._selection

    def clear_selection(self) -> Selection:
        """Empty-canvas click: drop the element selection, keep the screen."""
        self._selection = selection_machine.clear_element(self._selection)
        return self._selection

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def wire_document(self) -> WireDocument:
        """Wire document for the current flow, honoring ``include_position``."""
        return to_wire_format(self._document, include_position=self._config.include_position)

    def wire_json(self, indent: int | None = 2) -> str:
        return dumps_wire(self._document, include_position=self._config.include_position, indent=indent)

    def to_draft(self) -> DraftDocument:
        return to_draft(self._document, selected_client=self._selected_client)

    # ------------------------------------------------------------------
    # Clients and submission
    # ------------------------------------------------------------------

    @property
    def clients(self) -> ClientDirectory:
        return self._clients

    @property
    def selected_client(self) -> Client | None:
        return self._clients.get(self._selected_client)

    @property
    def selected_client_id(self) -> str | None:
        return self._selected_client

    @property
    def submission_status(self) -> SubmissionStatus:
        return self._submission_status

    @property
    def is_submitting(self) -> bool:
        return self._submission_status == SubmissionStatus.SUBMITTING

    def select_client(self, client_id: str | None) -> Client | None:
        """
        Choose the client the flow is submitted for.

        Raises:
            NotFoundError: If the client is not in the directory
        """
        if client_id is not None and client_id not in self._clients:
            raise NotFoundError(f"Client '{client_id}' not found", context={"client_id": client_id})
        self._selected_client = client_id
        return self.selected_client

    def submit(self, submitter: Submitter) -> Any:
        """
        Hand the wire document to the delivery platform.

        The document stays editable while the submitter runs.

        Args:
            submitter: Callable receiving a SubmissionRequest

        Returns:
            Whatever the submitter returns

        Raises:
            SubmissionError: If no client is selected, the client lacks flow
                access, a submission is already running or the submitter fails
        """
        if self._selected_client is None:
            raise SubmissionError("Please select a client")

        client = self.selected_client
        if client is None or not client.has_access_token:
            raise SubmissionError(
                "Client does not have flow access permission", client_id=self._selected_client
            )

        if self.is_submitting:
            raise SubmissionError("A submission is already in progress", client_id=client.id)

        request = SubmissionRequest(client=client, flow_name=self._document.name, flow_data=self.wire_document())
        self._submission_status = SubmissionStatus.SUBMITTING
        try:
            response = submitter(request)
        except Exception as e:
            self._submission_status = SubmissionStatus.FAILED
            logger.error(f"Failed to submit flow '{self._document.name}' for {client.name}: {e}")
            raise SubmissionError(f"Failed to create flow: {e}", client_id=client.id) from e

        self._submission_status = SubmissionStatus.SUCCEEDED
        logger.info(f"Flow '{self._document.name}' submitted for {client.name}")
        return response
