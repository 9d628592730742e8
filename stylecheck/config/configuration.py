"""Configuration engine: rule and preset registries and configuration loading."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..rules import Rule, create_builtin_rules
from .additional_rules import AdditionalRuleLoader, FilesystemAdditionalRuleLoader
from .exceptions import ConfigurationError, ErrorKind
from .plugins import FilesystemPluginLoader, PluginLoader
from .presets import BUILTIN_PRESETS, load_builtin_preset
from .processor import process_config
from .types import DEFAULT_FILE_EXTENSIONS

logger = logging.getLogger(__name__)


class Configuration:
    """
    Resolves raw configurations into configured rules.

    Only in-memory plugins (callables) and additional rules (rule objects) are
    accepted; see ``FilesystemConfiguration`` for string locators.
    """

    def __init__(
        self,
        plugin_loader: PluginLoader | None = None,
        additional_rule_loader: AdditionalRuleLoader | None = None,
    ):
        self.plugin_loader = plugin_loader or PluginLoader()
        self.additional_rule_loader = additional_rule_loader or AdditionalRuleLoader()
        self._rules: dict[str, Rule] = {}
        self._presets: dict[str, Mapping[str, Any]] = {}
        self._configured_rules: list[Rule] = []
        self._file_extensions: list[str] = list(DEFAULT_FILE_EXTENSIONS)
        self._excluded_files: list[str] = []

    def load(self, config: Mapping[str, Any]) -> None:
        """
        Load settings from a configuration.

        Every rule named by the configuration is configured, even when other
        keys are unsupported; unsupported keys are reported together once all
        keys have been processed.

        Args:
            config: Raw configuration mapping

        Raises:
            ConfigurationError: If the configuration is invalid or names unknown rules
        """
        processed = process_config(config, self)

        if processed.file_extensions is not None:
            self._file_extensions = processed.file_extensions
        if processed.excluded_files is not None:
            self._excluded_files = processed.excluded_files

        configured_rules = []
        unsupported_rules = []
        for option_name, settings in processed.rule_settings.items():
            rule = self._rules.get(option_name)
            if rule is None:
                unsupported_rules.append(option_name)
                continue
            rule.configure(settings)
            configured_rules.append(rule)

        if unsupported_rules:
            raise ConfigurationError(
                f"Unsupported rules: {', '.join(map(str, unsupported_rules))}",
                kind=ErrorKind.UNSUPPORTED_RULES,
                names=unsupported_rules,
            )

        self._configured_rules = configured_rules
        logger.debug(f"Configured {len(configured_rules)} rules")

    def register_rule(self, rule: Rule) -> None:
        """Add a rule, replacing any rule with the same option name."""
        option_name = rule.get_option_name()
        if option_name in self._rules:
            logger.debug(f"Replacing rule '{option_name}'")
        self._rules[option_name] = rule

    def register_preset(self, preset_name: str, preset_config: Mapping[str, Any]) -> None:
        """Add a preset, replacing any preset with the same name."""
        self._presets[preset_name] = preset_config

    def register_default_rules(self) -> None:
        """Register the built-in rules."""
        for rule in create_builtin_rules():
            self.register_rule(rule)

    def register_default_presets(self) -> None:
        """Register the built-in presets."""
        for preset_name in BUILTIN_PRESETS:
            self.register_preset(preset_name, load_builtin_preset(preset_name))

    def get_preset(self, preset_name: str) -> Mapping[str, Any] | None:
        return self._presets.get(preset_name)

    def get_preset_names(self) -> list[str]:
        return list(self._presets)

    def get_registered_rules(self) -> list[Rule]:
        return list(self._rules.values())

    def get_configured_rules(self) -> list[Rule]:
        return list(self._configured_rules)

    def get_excluded_files(self) -> list[str]:
        return list(self._excluded_files)

    def get_file_extensions(self) -> list[str]:
        return list(self._file_extensions)


class FilesystemConfiguration(Configuration):
    """Configuration that also loads plugins and additional rules from the filesystem."""

    def __init__(self, base_dir: Path | None = None):
        super().__init__(
            plugin_loader=FilesystemPluginLoader(base_dir=base_dir),
            additional_rule_loader=FilesystemAdditionalRuleLoader(base_dir=base_dir),
        )


def create_default_configuration(base_dir: Path | None = None) -> FilesystemConfiguration:
    """Create a filesystem-capable configuration with the built-in rules and presets."""
    configuration = FilesystemConfiguration(base_dir=base_dir)
    configuration.register_default_rules()
    configuration.register_default_presets()
    return configuration
