"""Additional rule loading strategies."""

import inspect
import logging
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any

from ..rules import is_rule, is_rule_class
from .exceptions import ConfigurationError, ErrorKind
from .modules import expand_glob, import_module_from_path

if TYPE_CHECKING:
    from .configuration import Configuration

logger = logging.getLogger(__name__)


class AdditionalRuleLoader:
    """Registers already-instantiated rule objects."""

    def load(self, additional_rule: Any, configuration: "Configuration") -> None:
        """
        Register an additional rule.

        Args:
            additional_rule: Rule instance
            configuration: Configuration to register the rule into

        Raises:
            ConfigurationError: If the value is not a rule instance
        """
        if not is_rule(additional_rule):
            raise ConfigurationError(
                f"Additional rule should be a rule object, got {type(additional_rule).__name__}",
                kind=ErrorKind.INVALID_ADDITIONAL_RULE,
            )

        configuration.register_rule(additional_rule)


class FilesystemAdditionalRuleLoader(AdditionalRuleLoader):
    """Additional rule loader that also accepts glob patterns of rule files."""

    def __init__(
        self,
        base_dir: Path | None = None,
        expand: Callable[[str, Path], list[Path]] = expand_glob,
        import_module: Callable[[Path], ModuleType] = import_module_from_path,
    ):
        self.base_dir = base_dir
        self.expand = expand
        self.import_module = import_module

    def load(self, additional_rule: Any, configuration: "Configuration") -> None:
        if not isinstance(additional_rule, str):
            super().load(additional_rule, configuration)
            return

        base_dir = self.base_dir or Path.cwd()
        paths = self.expand(additional_rule, base_dir)
        logger.debug(f"Pattern '{additional_rule}' matched {len(paths)} rule files")

        for path in paths:
            for rule_class in self._rule_classes(path):
                try:
                    rule = rule_class()
                except TypeError as e:
                    raise ConfigurationError(
                        f"Cannot instantiate rule class {rule_class.__name__}: {e}",
                        kind=ErrorKind.INVALID_ADDITIONAL_RULE,
                        source_path=str(path),
                    ) from e
                super().load(rule, configuration)

    def _rule_classes(self, path: Path) -> list[type]:
        """Import a rule file and return the rule classes it defines."""
        try:
            module = self.import_module(path)
        except Exception as e:
            raise ConfigurationError(
                f"Cannot load rule file: {e}",
                kind=ErrorKind.INVALID_ADDITIONAL_RULE,
                source_path=str(path),
            ) from e

        rule_classes = [
            obj
            for _, obj in inspect.getmembers(module, is_rule_class)
            if obj.__module__ == module.__name__
        ]
        if not rule_classes:
            raise ConfigurationError(
                "Rule file does not define a rule class",
                kind=ErrorKind.INVALID_ADDITIONAL_RULE,
                source_path=str(path),
            )

        return rule_classes
