"""Mutation result definitions for the ScreenFlow engine."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from screenflow.common.exceptions import NotFoundError, RejectedOperationError
from screenflow.models.enums import MutationStatus

if TYPE_CHECKING:
    from .flow import FlowDocument


@dataclass(frozen=True)
class MutationResult:
    """
    Immutable outcome of one engine operation.

    Contains the document after the operation, how the operation ended and
    the id it created or touched. Whenever the status is not APPLIED,
    ``document`` is the very instance the operation received.
    """

    document: "FlowDocument"
    status: MutationStatus
    operation: str
    message: str = ""
    target_id: str | None = None

    @classmethod
    def applied(
        cls, document: "FlowDocument", operation: str, target_id: str | None = None, message: str = ""
    ) -> "MutationResult":
        """Create an APPLIED result."""
        return cls(
            document=document,
            status=MutationStatus.APPLIED,
            operation=operation,
            message=message,
            target_id=target_id,
        )

    @classmethod
    def noop(
        cls, document: "FlowDocument", operation: str, message: str, target_id: str | None = None
    ) -> "MutationResult":
        """Create a NOOP result."""
        return cls(
            document=document,
            status=MutationStatus.NOOP,
            operation=operation,
            message=message,
            target_id=target_id,
        )

    @classmethod
    def rejected(
        cls, document: "FlowDocument", operation: str, message: str, target_id: str | None = None
    ) -> "MutationResult":
        """Create a REJECTED result."""
        return cls(
            document=document,
            status=MutationStatus.REJECTED,
            operation=operation,
            message=message,
            target_id=target_id,
        )

    @classmethod
    def not_found(
        cls, document: "FlowDocument", operation: str, message: str, target_id: str | None = None
    ) -> "MutationResult":
        """Create a NOT_FOUND result."""
        return cls(
            document=document,
            status=MutationStatus.NOT_FOUND,
            operation=operation,
            message=message,
            target_id=target_id,
        )

    @property
    def changed(self) -> bool:
        """Whether a new document was produced."""
        return self.status == MutationStatus.APPLIED

    def raise_for_status(self) -> "MutationResult":
        """
        Raise for REJECTED and NOT_FOUND outcomes.

        NOOP is a benign outcome and does not raise.

        Raises:
            RejectedOperationError: If the operation was refused
            NotFoundError: If a required target was missing
        """
        if self.status == MutationStatus.REJECTED:
            raise RejectedOperationError(self.message, operation=self.operation)
        if self.status == MutationStatus.NOT_FOUND:
            raise NotFoundError(self.message, context={"operation": self.operation, "target_id": self.target_id})
        return self
