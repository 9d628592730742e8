"""Resolve command implementation."""

import logging
import sys
from pathlib import Path

import click

from ..config import (
    Configuration,
    ConfigurationError,
    ConfigurationLoader,
    create_default_configuration,
)
from ..utils import setup_logging

logger = logging.getLogger(__name__)


def format_configuration(configuration: Configuration) -> list[str]:
    """Format the resolved state of a loaded configuration."""
    excluded = configuration.get_excluded_files()
    configured = configuration.get_configured_rules()

    lines = [
        f"File extensions: {', '.join(configuration.get_file_extensions())}",
        f"Excluded files: {', '.join(excluded) if excluded else '(none)'}",
        f"Configured rules ({len(configured)}):",
    ]
    for rule in configured:
        lines.append(f"- {rule.get_option_name()}: {getattr(rule, 'settings', None)!r}")
    return lines


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (defaults to STYLECHECK_CONFIG or a file in the current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging")
@click.help_option("-h", "--help")
def resolve(config_path, verbose):
    """Resolve a configuration file into configured rules."""
    if verbose:
        setup_logging("DEBUG")

    try:
        raw_config = ConfigurationLoader().load_configuration(config_path)
        if raw_config is None:
            click.echo("No configuration file found", err=True)
            sys.exit(1)

        logger.info(f"Resolving configuration from {raw_config.source.path}")
        configuration = create_default_configuration()
        configuration.load(raw_config.data)
    except ConfigurationError as e:
        logger.error(f"Configuration resolution failed: {e}")
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for line in format_configuration(configuration):
        click.echo(line)
