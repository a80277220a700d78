"""Subcommand modules for pwctl."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pwctl.commands.generate import generate
    from pwctl.commands.shell import shell
    from pwctl.commands.validate import validate

    cli.add_command(generate)
    cli.add_command(validate)
    cli.add_command(shell)
