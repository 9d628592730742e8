"""Core data types for configuration system."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeAlias

RuleSettings: TypeAlias = dict[str, Any]

PLUGINS = "plugins"
PRESET = "preset"
FILE_EXTENSIONS = "fileExtensions"
EXCLUDE_FILES = "excludeFiles"
ADDITIONAL_RULES = "additionalRules"

# Keys that steer the engine itself and never name a rule
RESERVED_OPTIONS = frozenset({PLUGINS, PRESET, FILE_EXTENSIONS, EXCLUDE_FILES, ADDITIONAL_RULES})

DEFAULT_FILE_EXTENSIONS = (".js",)


@dataclass
class ConfigurationSource:
    """Represents a configuration file location."""

    path: Path
    exists: bool


@dataclass
class RawConfiguration:
    """Raw configuration data read from a file before processing."""

    source: ConfigurationSource
    data: dict[str, Any]


@dataclass
class ProcessedConfig:
    """Result of processing one raw configuration mapping."""

    rule_settings: RuleSettings = field(default_factory=dict)
    file_extensions: list[str] | None = None
    excluded_files: list[str] | None = None
