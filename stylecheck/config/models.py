"""Pydantic models for configuration validation."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError, ErrorKind
from .types import ADDITIONAL_RULES, EXCLUDE_FILES, FILE_EXTENSIONS, PLUGINS, PRESET

# Processing order of the reserved options, with the error reported for a malformed value
_OPTION_ERRORS = {
    PLUGINS: (ErrorKind.INVALID_PLUGINS_TYPE, "plugins option requires a list value"),
    PRESET: (ErrorKind.INVALID_PRESET_TYPE, "preset option requires a string value"),
    FILE_EXTENSIONS: (
        ErrorKind.INVALID_FILE_EXTENSIONS_TYPE,
        "fileExtensions option requires a string or a list of strings",
    ),
    EXCLUDE_FILES: (
        ErrorKind.INVALID_EXCLUDE_FILES_TYPE,
        "excludeFiles option requires a list of strings",
    ),
    ADDITIONAL_RULES: (
        ErrorKind.INVALID_ADDITIONAL_RULES_TYPE,
        "additionalRules option requires a list value",
    ),
}
_OPTION_ORDER = list(_OPTION_ERRORS)


class ReservedOptions(BaseModel):
    """The engine-level options of a configuration; every other key names a rule."""

    model_config = ConfigDict(strict=True, extra="ignore")

    plugins: list[Any] | None = None
    preset: str | None = None
    file_extensions: str | list[str] | None = Field(default=None, alias=FILE_EXTENSIONS)
    exclude_files: list[str] | None = Field(default=None, alias=EXCLUDE_FILES)
    additional_rules: list[Any] | None = Field(default=None, alias=ADDITIONAL_RULES)

    def normalized_file_extensions(self) -> list[str] | None:
        """File extensions as a list, a bare string becoming a single entry."""
        if self.file_extensions is None or self.file_extensions == "":
            return None
        if isinstance(self.file_extensions, str):
            return [self.file_extensions]
        return list(self.file_extensions)


def validate_reserved_options(config: Mapping[str, Any]) -> ReservedOptions:
    """
    Validate the shape of the reserved options of a raw configuration.

    Args:
        config: Raw configuration mapping

    Returns:
        Validated reserved options

    Raises:
        ConfigurationError: For the first malformed option in processing order
    """
    try:
        return ReservedOptions.model_validate(dict(config))
    except ValidationError as e:
        failed = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
        option = next((name for name in _OPTION_ORDER if name in failed), _OPTION_ORDER[0])
        kind, message = _OPTION_ERRORS[option]
        raise ConfigurationError(message, kind=kind) from e
