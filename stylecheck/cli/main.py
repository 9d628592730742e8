"""Main CLI entry point for stylecheck."""

import sys

import click

from ..utils import setup_logging
from .resolve_command import resolve
from .rules_command import presets, rules


@click.group(invoke_without_command=True)
@click.pass_context
@click.help_option("-h", "--help")
def main(ctx):
    """stylecheck - Resolve code style configurations into configured rules."""
    setup_logging()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        click.echo("Error: missing command", err=True)
        sys.exit(1)


main.add_command(resolve)
main.add_command(rules)
main.add_command(presets)
