"""
Enums and constants for the ScreenFlow document model.

This module defines all enums and constant classes to avoid magic strings
throughout the codebase.

Usage:
    from screenflow.models.enums import (
        ElementType,
        MutationStatus,
        SelectionState,
    )
"""

from enum import StrEnum

# ============================================================================
# Element Enums
# ============================================================================


class ElementType(StrEnum):
    """Element kinds that can be placed on a screen."""

    TEXT = "text"
    TEXT_HEADING = "text-heading"
    TEXT_SUBHEADING = "text-subheading"
    TEXT_BODY = "text-body"
    TEXT_CAPTION = "text-caption"
    IMAGE = "image"
    IMAGE_PICKER = "image-picker"
    DOCUMENT_PICKER = "document-picker"
    FOOTER = "footer"
    OPT_IN = "opt-in"
    TEXT_INPUT = "text-input"
    TEXT_AREA = "text-area"
    CHECKBOX_GROUP = "checkbox-group"
    RADIO_BUTTONS = "radio-buttons"
    DROPDOWN = "dropdown"
    DATE_PICKER = "date-picker"
    CALENDAR_PICKER = "calendar-picker"
    EMBEDDED_LINK = "embedded-link"
    NAVIGATION_LIST = "navigation-list"

    @classmethod
    def values(cls) -> list[str]:
        """Get the list of all element type tokens."""
        return [member.value for member in cls]


class ElementCategory(StrEnum):
    """Palette categories used to group element types."""

    TEXT = "Text"
    MEDIA = "Media"
    INPUT = "Input"
    SELECTION = "Selection"
    NAVIGATION = "Navigation"


# ============================================================================
# Engine and Session Enums
# ============================================================================


class MutationStatus(StrEnum):
    """Outcome of a mutation engine operation."""

    APPLIED = "applied"  # New document produced
    NOOP = "noop"  # Nothing to do, document unchanged
    REJECTED = "rejected"  # Refused, document unchanged
    NOT_FOUND = "not_found"  # Required target missing, document unchanged


class SelectionState(StrEnum):
    """States of the editor selection."""

    NO_SELECTION = "no_selection"
    SCREEN_SELECTED = "screen_selected"
    ELEMENT_SELECTED = "element_selected"


class SubmissionStatus(StrEnum):
    """Status of the hand-off of a flow to the delivery platform."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# ============================================================================
# File Format Enums
# ============================================================================


class DraftFormat(StrEnum):
    """Supported draft file formats."""

    JSON = "json"
    YAML = "yaml"
