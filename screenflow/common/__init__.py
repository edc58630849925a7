"""Common components shared across ScreenFlow modules."""

from .exceptions import (
    ConfigurationError,
    DocumentInvariantError,
    DraftFormatError,
    LoaderError,
    NotFoundError,
    RejectedOperationError,
    ScreenFlowError,
    SubmissionError,
)

__all__ = [
    "ScreenFlowError",
    "DocumentInvariantError",
    "NotFoundError",
    "RejectedOperationError",
    "DraftFormatError",
    "LoaderError",
    "ConfigurationError",
    "SubmissionError",
]
