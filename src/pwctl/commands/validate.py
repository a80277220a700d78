"""Command: check a password against the composition policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pwctl.commands._base import PwCommand

if TYPE_CHECKING:
    from pwctl.commands._context import AppContext


@click.command(
    cls=PwCommand,
    examples="""\
  pwctl validate 'Valid1Pass!'
  echo 'pass phrase with Spaces 1!' | pwctl validate --stdin
  pwctl -v validate short
  pwctl --json validate 'NoSpecial123'""",
)
@click.argument("password", required=False)
@click.option(
    "--stdin", "from_stdin", is_flag=True, help="Read the password as one line from stdin."
)
@click.pass_obj
def validate(app: AppContext, password: str | None, from_stdin: bool) -> None:
    """Validate PASSWORD. Exits 1 when the password is weak."""
    if from_stdin:
        if password is not None:
            raise click.UsageError("Pass PASSWORD or --stdin, not both.")
        password = click.get_text_stream("stdin").readline().rstrip("\r\n")
    elif password is None:
        raise click.UsageError("Missing argument 'PASSWORD' (or use --stdin).")
    app.emit(app.service.validate(password))
