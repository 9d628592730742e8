"""Configuration processing: resolves a raw configuration into flat rule settings."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import ConfigurationError, ErrorKind
from .models import validate_reserved_options
from .types import RESERVED_OPTIONS, ProcessedConfig

if TYPE_CHECKING:
    from .configuration import Configuration

logger = logging.getLogger(__name__)


def process_config(
    config: Mapping[str, Any],
    configuration: "Configuration",
    *,
    preset_chain: tuple[str, ...] = (),
) -> ProcessedConfig:
    """
    Process a raw configuration into rule settings and auxiliary options.

    Plugins run first, then the preset is expanded recursively through this
    same function, then file options are read, additional rules are loaded,
    and finally the configuration's own rule keys are applied on top of the
    preset's.

    Args:
        config: Raw configuration mapping
        configuration: Configuration providing loaders and registries
        preset_chain: Names of the presets currently being expanded

    Returns:
        Processed configuration

    Raises:
        ConfigurationError: If the configuration is structurally invalid
    """
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(config).__name__}",
            kind=ErrorKind.INVALID_CONFIG_TYPE,
        )

    options = validate_reserved_options(config)
    result = ProcessedConfig()

    for plugin in options.plugins or []:
        configuration.plugin_loader.load(plugin, configuration)

    if options.preset:
        preset_result = _expand_preset(options.preset, configuration, preset_chain)
        # Reserved keys were already stripped while processing the preset
        result.rule_settings.update(preset_result.rule_settings)
        result.file_extensions = preset_result.file_extensions
        result.excluded_files = preset_result.excluded_files

    file_extensions = options.normalized_file_extensions()
    if file_extensions is not None:
        result.file_extensions = file_extensions

    if options.exclude_files is not None:
        result.excluded_files = list(options.exclude_files)

    for additional_rule in options.additional_rules or []:
        configuration.additional_rule_loader.load(additional_rule, configuration)

    for key, value in config.items():
        if key not in RESERVED_OPTIONS:
            result.rule_settings[key] = value

    return result


def _expand_preset(
    preset_name: str, configuration: "Configuration", preset_chain: tuple[str, ...]
) -> ProcessedConfig:
    if preset_name in preset_chain:
        cycle = " -> ".join((*preset_chain, preset_name))
        raise ConfigurationError(
            f'Preset "{preset_name}" refers back to itself: {cycle}',
            kind=ErrorKind.CIRCULAR_PRESET,
        )

    preset_data = configuration.get_preset(preset_name)
    if preset_data is None:
        raise ConfigurationError(
            f'Preset "{preset_name}" was not found',
            kind=ErrorKind.PRESET_NOT_FOUND,
        )

    logger.debug(f"Expanding preset '{preset_name}'")
    return process_config(preset_data, configuration, preset_chain=(*preset_chain, preset_name))
