"""Common exceptions for the ScreenFlow editor core.

This module defines all exception types used throughout ScreenFlow to
provide consistent error handling and clear error semantics. Mutation
engine operations never raise these directly; they report outcomes through
``MutationResult`` and callers opt into exceptions with
``MutationResult.raise_for_status()``.
"""

from typing import Any


class ScreenFlowError(Exception):
    """Base exception for all ScreenFlow-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class DocumentInvariantError(ScreenFlowError):
    """Raised when a document would violate one of its structural invariants."""

    def __init__(
        self,
        message: str,
        screen_id: str | None = None,
        element_id: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize invariant error with the offending ids."""
        super().__init__(message, context)
        self.screen_id = screen_id
        self.element_id = element_id


class NotFoundError(ScreenFlowError):
    """Raised when a command targets a screen or element that does not exist."""

    def __init__(
        self,
        message: str,
        screen_id: str | None = None,
        element_id: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize not-found error with the missing ids."""
        super().__init__(message, context)
        self.screen_id = screen_id
        self.element_id = element_id


class RejectedOperationError(ScreenFlowError):
    """Raised when a command is refused and the document is left unchanged."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize rejection with the name of the refused operation."""
        super().__init__(message, context)
        self.operation = operation


class DraftFormatError(ScreenFlowError):
    """Raised when draft data cannot be turned into a document."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize draft format error with the failing field."""
        super().__init__(message, context)
        self.field_name = field_name


class LoaderError(ScreenFlowError):
    """Raised when loading or writing draft files fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        loader_type: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize loader error with details."""
        super().__init__(message, context)
        self.file_path = file_path
        self.loader_type = loader_type


class ConfigurationError(ScreenFlowError):
    """Raised when editor configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with the offending key."""
        super().__init__(message, context)
        self.config_key = config_key


class SubmissionError(ScreenFlowError):
    """Raised when a flow cannot be handed off for publication."""

    def __init__(
        self,
        message: str,
        client_id: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize submission error with the target client."""
        super().__init__(message, context)
        self.client_id = client_id


__all__ = [
    'ScreenFlowError',
    'DocumentInvariantError',
    'NotFoundError',
    'RejectedOperationError',
    'DraftFormatError',
    'LoaderError',
    'ConfigurationError',
    'SubmissionError',
]
