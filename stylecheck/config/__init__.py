"""Configuration resolution for stylecheck."""

from .additional_rules import AdditionalRuleLoader, FilesystemAdditionalRuleLoader
from .configuration import (
    Configuration,
    FilesystemConfiguration,
    create_default_configuration,
)
from .exceptions import ConfigurationError, ErrorKind, StylecheckError
from .loader import ConfigurationLoader
from .models import ReservedOptions, validate_reserved_options
from .plugins import FilesystemPluginLoader, PluginLoader
from .processor import process_config
from .types import (
    RESERVED_OPTIONS,
    ConfigurationSource,
    ProcessedConfig,
    RawConfiguration,
    RuleSettings,
)

__all__ = [
    "AdditionalRuleLoader",
    "Configuration",
    "ConfigurationError",
    "ConfigurationLoader",
    "ConfigurationSource",
    "ErrorKind",
    "FilesystemAdditionalRuleLoader",
    "FilesystemConfiguration",
    "FilesystemPluginLoader",
    "PluginLoader",
    "ProcessedConfig",
    "RESERVED_OPTIONS",
    "RawConfiguration",
    "ReservedOptions",
    "RuleSettings",
    "StylecheckError",
    "create_default_configuration",
    "process_config",
    "validate_reserved_options",
]
