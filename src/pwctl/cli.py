"""Root CLI group for pwctl with global flags and command registration."""

from __future__ import annotations

import click

from pwctl import __version__
from pwctl.commands import register_commands
from pwctl.commands._context import AppContext
from pwctl.config.settings import PwSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pwctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """pwctl — secure password generator and validator.

    Run without a command to start the interactive loop.
    """
    # Unset flags stay None so PWCTL_* env vars can still apply.
    settings = PwSettings.from_cli(
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from pwctl.commands.shell import shell

        ctx.invoke(shell)


register_commands(cli)
