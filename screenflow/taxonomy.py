"""Element taxonomy: palette metadata for every element type.

The registry maps an element type token to its display label and palette
category. Lookups never fail: a type without palette metadata resolves to
its raw token as label, so newer element types keep working before their
metadata is registered.
"""

import logging
from dataclasses import dataclass

from screenflow.models.enums import ElementCategory, ElementType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementSpec:
    """Palette entry for one element type."""

    type: str
    label: str
    category: str
    icon: str = ""
    description: str = ""


DEFAULT_ELEMENT_SPECS: tuple[ElementSpec, ...] = (
    # Text
    ElementSpec(ElementType.TEXT_HEADING, "Heading", ElementCategory.TEXT, "Type", "Large heading text"),
    ElementSpec(ElementType.TEXT_SUBHEADING, "Subheading", ElementCategory.TEXT, "Type", "Medium subheading"),
    ElementSpec(ElementType.TEXT_BODY, "Body", ElementCategory.TEXT, "AlignLeft", "Body paragraph text"),
    ElementSpec(ElementType.TEXT_CAPTION, "Caption", ElementCategory.TEXT, "TextCursor", "Small caption text"),
    # Media
    ElementSpec(ElementType.IMAGE, "Image", ElementCategory.MEDIA, "Image", "Display an image"),
    ElementSpec(ElementType.IMAGE_PICKER, "Image Picker", ElementCategory.MEDIA, "ImagePlus", "Upload image"),
    ElementSpec(ElementType.DOCUMENT_PICKER, "Document Picker", ElementCategory.MEDIA, "FileUp", "Upload document"),
    ElementSpec(ElementType.EMBEDDED_LINK, "Embedded Link", ElementCategory.MEDIA, "Link", "Clickable link"),
    # Input
    ElementSpec(ElementType.TEXT_INPUT, "Text Input", ElementCategory.INPUT, "TextCursorInput", "Single line input"),
    ElementSpec(ElementType.TEXT_AREA, "Text Area", ElementCategory.INPUT, "FileText", "Multi-line input"),
    ElementSpec(ElementType.DROPDOWN, "Dropdown", ElementCategory.INPUT, "ChevronDown", "Select dropdown"),
    ElementSpec(ElementType.DATE_PICKER, "Date Picker", ElementCategory.INPUT, "Calendar", "Date selection"),
    ElementSpec(ElementType.CALENDAR_PICKER, "Calendar Picker", ElementCategory.INPUT, "CalendarRange", "Date range selection"),
    # Selection
    ElementSpec(ElementType.CHECKBOX_GROUP, "Checkbox Group", ElementCategory.SELECTION, "CheckSquare", "Multiple selection"),
    ElementSpec(ElementType.RADIO_BUTTONS, "Radio Buttons", ElementCategory.SELECTION, "Circle", "Single selection"),
    ElementSpec(ElementType.OPT_IN, "Opt-in", ElementCategory.SELECTION, "ToggleRight", "Consent checkbox"),
    # Navigation
    ElementSpec(ElementType.FOOTER, "Footer", ElementCategory.NAVIGATION, "ArrowRight", "Action footer button"),
    ElementSpec(ElementType.NAVIGATION_LIST, "Navigation List", ElementCategory.NAVIGATION, "List", "List with navigation"),
)


class ElementRegistry:
    """
    Registry of palette metadata keyed by element type token.

    Categories keep the order in which they were first registered, and
    specs keep their registration order within a category.
    """

    def __init__(self, specs: tuple[ElementSpec, ...] | list[ElementSpec] = ()):
        self._categories: dict[str, list[ElementSpec]] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: ElementSpec) -> None:
        """Register palette metadata, replacing any entry for the same type."""
        token = str(spec.type)
        for category, specs in self._categories.items():
            for index, existing in enumerate(specs):
                if str(existing.type) != token:
                    continue
                if category == spec.category:
                    specs[index] = spec
                    return
                del specs[index]
                break
        self._categories.setdefault(str(spec.category), []).append(spec)

    def get(self, element_type: str) -> ElementSpec | None:
        """Get palette metadata for a type, or None when unregistered."""
        token = str(element_type)
        for specs in self._categories.values():
            for spec in specs:
                if str(spec.type) == token:
                    return spec
        return None

    def get_label(self, element_type: str) -> str:
        """Resolve the display label, falling back to the raw type token."""
        spec = self.get(element_type)
        return spec.label if spec is not None else str(element_type)

    def get_category(self, element_type: str) -> str | None:
        """Resolve the palette category of a type."""
        spec = self.get(element_type)
        return str(spec.category) if spec is not None else None

    def categories(self) -> dict[str, list[ElementSpec]]:
        """Get palette categories with their specs, in registration order."""
        return {name: list(specs) for name, specs in self._categories.items() if specs}

    def __contains__(self, element_type: object) -> bool:
        return isinstance(element_type, str) and self.get(element_type) is not None

    def __len__(self) -> int:
        return sum(len(specs) for specs in self._categories.values())


default_registry = ElementRegistry(DEFAULT_ELEMENT_SPECS)


def get_element_label(element_type: str, registry: ElementRegistry | None = None) -> str:
    """Get the display label of an element type from the given or default registry."""
    return (registry or default_registry).get_label(element_type)


def get_element_category(element_type: str, registry: ElementRegistry | None = None) -> str | None:
    """Get the palette category of an element type from the given or default registry."""
    return (registry or default_registry).get_category(element_type)


def coerce_element_type(token: ElementType | str) -> ElementType | str:
    """
    Convert a type token into an ElementType when it is a known token.

    Unknown tokens are returned unchanged so element creation is never
    blocked by a type the enumeration does not know yet.
    """
    if isinstance(token, ElementType):
        return token
    try:
        return ElementType(token)
    except ValueError:
        logger.warning(f"Unknown element type '{token}', keeping raw token")
        return token
