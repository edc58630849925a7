# screenflow/manager/config.py
from dataclasses import dataclass
from typing import TypedDict

from screenflow.common.exceptions import ConfigurationError
from screenflow.manager.constants import (
    DEFAULT_FLOW_NAME,
    DEFAULT_FORMAT,
    DEFAULT_ID_LENGTH,
    DEFAULT_INCLUDE_POSITION,
    DEFAULT_STRICT_PROPERTIES,
    MAX_ID_LENGTH,
    MIN_ID_LENGTH,
    get_default_flow_name,
    get_default_format,
    get_id_length,
    get_include_position,
    get_strict_properties,
)
from screenflow.models.enums import DraftFormat


class EditorConfigDict(TypedDict, total=False):
    """TypedDict for editor configuration dictionary"""
    include_position: bool
    default_format: str
    strict_properties: bool
    id_length: int
    default_flow_name: str


@dataclass(frozen=True)
class EditorConfig:
    """Configuration for a ScreenFlow editing session"""

    # Output settings
    include_position: bool = DEFAULT_INCLUDE_POSITION
    default_format: DraftFormat = DraftFormat(DEFAULT_FORMAT)

    # Editing settings
    strict_properties: bool = DEFAULT_STRICT_PROPERTIES
    id_length: int = DEFAULT_ID_LENGTH
    default_flow_name: str = DEFAULT_FLOW_NAME

    def __post_init__(self):
        """Validate configuration after initialization"""
        self._validate_config()

    @classmethod
    def from_env(cls) -> 'EditorConfig':
        """Create configuration from environment variables using constants module"""
        format_str = get_default_format()
        try:
            default_format = DraftFormat(format_str)
        except ValueError:
            default_format = DraftFormat(DEFAULT_FORMAT)

        id_length = get_id_length()
        if not MIN_ID_LENGTH <= id_length <= MAX_ID_LENGTH:
            id_length = DEFAULT_ID_LENGTH

        return cls(
            include_position=get_include_position(),
            default_format=default_format,
            strict_properties=get_strict_properties(),
            id_length=id_length,
            default_flow_name=get_default_flow_name() or DEFAULT_FLOW_NAME,
        )

    @classmethod
    def from_dict(cls, config_dict: EditorConfigDict) -> 'EditorConfig':
        """Create configuration from typed dictionary"""
        format_str = config_dict.get('default_format', DEFAULT_FORMAT)
        try:
            default_format = DraftFormat(str(format_str).lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid default_format: {format_str}", config_key='default_format'
            ) from e

        return cls(
            include_position=config_dict.get('include_position', DEFAULT_INCLUDE_POSITION),
            default_format=default_format,
            strict_properties=config_dict.get('strict_properties', DEFAULT_STRICT_PROPERTIES),
            id_length=config_dict.get('id_length', DEFAULT_ID_LENGTH),
            default_flow_name=config_dict.get('default_flow_name', DEFAULT_FLOW_NAME),
        )

    def _validate_config(self) -> None:
        """Validate configuration values"""
        if not isinstance(self.id_length, int) or not MIN_ID_LENGTH <= self.id_length <= MAX_ID_LENGTH:
            raise ConfigurationError(
                f"id_length must be between {MIN_ID_LENGTH} and {MAX_ID_LENGTH}",
                config_key='id_length',
            )

        if not isinstance(self.default_format, DraftFormat):
            raise ConfigurationError(
                f"Invalid default_format: {self.default_format}", config_key='default_format'
            )

        if not self.default_flow_name or not self.default_flow_name.strip():
            raise ConfigurationError("default_flow_name cannot be empty", config_key='default_flow_name')

    @property
    def draft_suffix(self) -> str:
        """File suffix for new drafts"""
        return f".{self.default_format.value}"

    def to_dict(self) -> EditorConfigDict:
        """Convert configuration to typed dictionary"""
        return EditorConfigDict(
            include_position=self.include_position,
            default_format=self.default_format.value,
            strict_properties=self.strict_properties,
            id_length=self.id_length,
            default_flow_name=self.default_flow_name,
        )

    def __str__(self) -> str:
        return f"EditorConfig(format={self.default_format.value}, include_position={self.include_position})"
