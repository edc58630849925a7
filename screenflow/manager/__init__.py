"""
ScreenFlow Manager Module

Provides the editing-session layer on top of the document core.

This module contains:
- EditorConfig: Configuration for editing sessions
- FlowEditor: Owner of the document and selection, routing commands through the engine
- Client, ClientDirectory: Clients a flow can be submitted for
- SubmissionRequest: Payload handed to the delivery platform
- constants: Configuration constants and environment variable settings
"""

# Export constants module for direct access
from . import constants
from .clients import Client, ClientDirectory, SubmissionRequest, Submitter
from .config import EditorConfig, EditorConfigDict
from .editor import FlowEditor, as_position

__all__ = [
    # Configuration
    "EditorConfig",
    "EditorConfigDict",
    # Editor
    "FlowEditor",
    "as_position",
    # Clients
    "Client",
    "ClientDirectory",
    "SubmissionRequest",
    "Submitter",
    # Constants module
    "constants",
]
