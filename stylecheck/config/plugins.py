"""Plugin loading strategies."""

import inspect
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .exceptions import ConfigurationError, ErrorKind
from .modules import resolve_locator

if TYPE_CHECKING:
    from .configuration import Configuration

logger = logging.getLogger(__name__)

PLUGIN_ENTRY_POINT = "register"


class PluginLoader:
    """Runs in-memory plugin initializers against a configuration."""

    def load(self, plugin: Any, configuration: "Configuration") -> None:
        """
        Run a plugin initializer.

        Args:
            plugin: Callable taking the configuration as its only argument
            configuration: Configuration the plugin registers rules and presets into

        Raises:
            ConfigurationError: If the plugin is not callable
        """
        if not callable(plugin):
            raise ConfigurationError(
                f"Plugin should be callable, got {type(plugin).__name__}",
                kind=ErrorKind.INVALID_PLUGIN,
            )

        logger.debug(f"Running plugin {getattr(plugin, '__name__', plugin)!r}")
        plugin(configuration)


class FilesystemPluginLoader(PluginLoader):
    """Plugin loader that also resolves module locators to initializers."""

    def __init__(
        self,
        base_dir: Path | None = None,
        resolver: Callable[[str, Path], Any] = resolve_locator,
    ):
        self.base_dir = base_dir
        self.resolver = resolver

    def load(self, plugin: Any, configuration: "Configuration") -> None:
        if isinstance(plugin, str):
            plugin = self._resolve(plugin)
        super().load(plugin, configuration)

    def _resolve(self, locator: str) -> Any:
        """Resolve a plugin locator, falling back to a module's register function."""
        base_dir = self.base_dir or Path.cwd()
        try:
            resolved = self.resolver(locator, base_dir)
        except Exception as e:
            raise ConfigurationError(
                f"Cannot load plugin '{locator}': {e}",
                kind=ErrorKind.INVALID_PLUGIN,
            ) from e

        if inspect.ismodule(resolved):
            resolved = getattr(resolved, PLUGIN_ENTRY_POINT, resolved)

        logger.debug(f"Resolved plugin locator '{locator}'")
        return resolved
