"""Built-in presets shipped with the package."""

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError, ErrorKind

logger = logging.getLogger(__name__)

PRESETS_DIR = Path(__file__).parent.parent / "presets"

# Style guide each preset follows
BUILTIN_PRESETS = {
    "airbnb": "https://github.com/airbnb/javascript",
    "crockford": "http://javascript.crockford.com/code.html",
    "google": "https://google-styleguide.googlecode.com/svn/trunk/javascriptguide.xml",
    "jquery": "https://contribute.jquery.org/style-guide/js/",
    "mdcs": "https://github.com/mrdoob/three.js/wiki/Mr.doob's-Code-Style%E2%84%A2",
    "wikimedia": "https://www.mediawiki.org/wiki/Manual:Coding_conventions/JavaScript",
    "yandex": "https://github.com/ymaps/codestyle/blob/master/js.md",
}


def load_builtin_preset(name: str) -> dict[str, Any]:
    """Read a built-in preset from its YAML file."""
    path = PRESETS_DIR / f"{name}.yml"
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Cannot read built-in preset '{name}': {e}",
            kind=ErrorKind.INVALID_CONFIG_FILE,
            source_path=str(path),
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Built-in preset '{name}' must contain a mapping",
            kind=ErrorKind.INVALID_CONFIG_FILE,
            source_path=str(path),
        )

    logger.debug(f"Loaded built-in preset '{name}' from {path}")
    return data
