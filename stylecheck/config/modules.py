"""Module resolution services used by the filesystem-capable loaders."""

import glob
import hashlib
import importlib.util
import logging
import os
import pkgutil
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)


def import_module_from_path(path: Path) -> ModuleType:
    """
    Import a Python source file as a module.

    Modules are cached in ``sys.modules`` under a name derived from the absolute
    path, so importing the same file twice returns the same module.

    Args:
        path: Path to a ``.py`` file

    Returns:
        The executed module

    Raises:
        ImportError: If the file cannot be loaded
    """
    path = Path(path).resolve()
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    module_name = f"stylecheck_external_{path.stem}_{digest}"

    if module_name in sys.modules:
        return sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise

    logger.debug(f"Imported {path} as {module_name}")
    return module


def resolve_locator(locator: str, base_dir: Path) -> Any:
    """
    Resolve a module locator to an object.

    A locator is either a path to a ``.py`` file (relative paths are resolved
    against ``base_dir``) or a dotted module name, optionally followed by
    ``:attribute``.
    """
    if locator.endswith(".py") or os.sep in locator or "/" in locator:
        return import_module_from_path(base_dir / locator)
    return pkgutil.resolve_name(locator)


def expand_glob(pattern: str, base_dir: Path) -> list[Path]:
    """Expand a glob pattern against ``base_dir`` into a sorted list of files."""
    full_pattern = os.path.join(base_dir, pattern)
    matches = sorted(glob.glob(full_pattern, recursive=True))
    return [Path(match) for match in matches if os.path.isfile(match)]
