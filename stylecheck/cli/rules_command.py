"""Rules and presets listing commands."""

import sys

import click

from ..config import ConfigurationError, create_default_configuration
from ..rules import Rule


def format_rule(rule: Rule) -> str:
    """Format a registered rule for listing."""
    line = rule.get_option_name()
    if getattr(rule, "deprecated", False):
        line += " (deprecated)"
    return line


@click.command()
@click.help_option("-h", "--help")
def rules():
    """List the registered rules."""
    configuration = create_default_configuration()
    registered = configuration.get_registered_rules()

    click.echo(f"Registered rules ({len(registered)}):")
    for rule in registered:
        click.echo(f"- {format_rule(rule)}")


@click.command()
@click.argument("name", required=False)
@click.help_option("-h", "--help")
def presets(name):
    """List the available presets, or show the rule settings of preset NAME."""
    configuration = create_default_configuration()

    if name is None:
        for preset_name in configuration.get_preset_names():
            click.echo(preset_name)
        return

    try:
        configuration.load({"preset": name})
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Preset: {name}")
    for rule in configuration.get_configured_rules():
        click.echo(f"- {rule.get_option_name()}: {getattr(rule, 'settings', None)!r}")
