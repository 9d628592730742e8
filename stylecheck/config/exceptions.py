"""Configuration exceptions."""

from enum import Enum


class StylecheckError(Exception):
    """Base exception for stylecheck."""


class ErrorKind(Enum):
    """Categories of configuration failures."""

    INVALID_CONFIG_TYPE = "invalid_config_type"
    INVALID_PLUGINS_TYPE = "invalid_plugins_type"
    INVALID_PRESET_TYPE = "invalid_preset_type"
    PRESET_NOT_FOUND = "preset_not_found"
    CIRCULAR_PRESET = "circular_preset"
    INVALID_FILE_EXTENSIONS_TYPE = "invalid_file_extensions_type"
    INVALID_EXCLUDE_FILES_TYPE = "invalid_exclude_files_type"
    INVALID_ADDITIONAL_RULES_TYPE = "invalid_additional_rules_type"
    INVALID_PLUGIN = "invalid_plugin"
    INVALID_ADDITIONAL_RULE = "invalid_additional_rule"
    UNSUPPORTED_RULES = "unsupported_rules"
    INVALID_CONFIG_FILE = "invalid_config_file"


class ConfigurationError(StylecheckError):
    """Raised when a configuration cannot be resolved into configured rules."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        names: list[str] | None = None,
        source_path: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.names = list(names) if names else []
        self.source_path = source_path

    def __str__(self) -> str:
        message = super().__str__()
        if self.source_path:
            return f"{message} (in {self.source_path})"
        return message
