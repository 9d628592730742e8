"""Configuration file discovery and loading."""

import json
import logging
import os
from pathlib import Path

import yaml

from .exceptions import ConfigurationError, ErrorKind
from .types import ConfigurationSource, RawConfiguration

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STYLECHECK_CONFIG"

CONFIG_FILE_NAMES = (".stylecheckrc", ".stylecheck.json", ".stylecheck.yml", ".stylecheck.yaml")

_YAML_SUFFIXES = {".yml", ".yaml"}


class ConfigurationLoader:
    """Finds and reads the user configuration file."""

    def find_config(self, path: str | Path | None = None) -> ConfigurationSource | None:
        """
        Find the configuration file to use.

        An explicit path wins over the STYLECHECK_CONFIG environment variable,
        which wins over the well-known file names in the working directory.

        Args:
            path: Explicit configuration file path

        Returns:
            The configuration source, or None when no candidate file exists
        """
        if path is not None:
            config_path = Path(path).expanduser()
            return ConfigurationSource(path=config_path, exists=config_path.is_file())

        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path).expanduser()
            logger.debug(f"Using {CONFIG_ENV_VAR}: {config_path}")
            return ConfigurationSource(path=config_path, exists=config_path.is_file())

        cwd = Path.cwd()
        for name in CONFIG_FILE_NAMES:
            candidate = cwd / name
            if candidate.is_file():
                return ConfigurationSource(path=candidate, exists=True)

        logger.debug(f"No configuration file found in {cwd}")
        return None

    def load_file(self, source: ConfigurationSource) -> RawConfiguration | None:
        """
        Read and parse a configuration file.

        YAML files are read with ``yaml.safe_load``; everything else is JSON.

        Returns:
            The raw configuration, or None if the file does not exist

        Raises:
            ConfigurationError: If the file cannot be parsed or is not a mapping
        """
        if not source.exists:
            logger.debug(f"Configuration file does not exist: {source.path}")
            return None

        try:
            with open(source.path, encoding="utf-8") as f:
                if source.path.suffix in _YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to parse configuration: {e}",
                kind=ErrorKind.INVALID_CONFIG_FILE,
                source_path=str(source.path),
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration: {e}",
                kind=ErrorKind.INVALID_CONFIG_FILE,
                source_path=str(source.path),
            ) from e

        if data is None:
            logger.warning(f"Configuration file is empty: {source.path}")
            data = {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain an object",
                kind=ErrorKind.INVALID_CONFIG_FILE,
                source_path=str(source.path),
            )

        # YAML 1.1 reads keys such as `on` and `yes` as booleans
        non_string_keys = [repr(key) for key in data if not isinstance(key, str)]
        if non_string_keys:
            raise ConfigurationError(
                f"Configuration keys must be strings, got: {', '.join(non_string_keys)}",
                kind=ErrorKind.INVALID_CONFIG_FILE,
                source_path=str(source.path),
            )

        logger.debug(f"Successfully loaded configuration from: {source.path}")
        return RawConfiguration(source=source, data=data)

    def load_configuration(self, path: str | Path | None = None) -> RawConfiguration | None:
        """Find and read the configuration file, if any."""
        source = self.find_config(path)
        if source is None:
            return None
        return self.load_file(source)
