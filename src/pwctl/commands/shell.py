"""Command: interactive generate/validate loop.

Reproduces the classic session text exactly. Input is consumed as
whitespace-delimited tokens, so a password containing spaces cannot be
validated in the default mode; ``shell.full_line`` (or ``--read-mode line``)
reads the rest of the line instead, with leading spaces and tabs dropped
whether the password follows ``validate`` on the same line or sits on the
next one. End of input ends the session as if ``exit`` had been typed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from pwctl.commands._base import PwCommand
from pwctl.domain.errors import InvalidLengthError

if TYPE_CHECKING:
    from pwctl.commands._context import AppContext
    from pwctl.services.password import PasswordService

BANNER = "Password Generator and Validator\n================================="
MENU = """
Commands:
  generate - Generate a new password
  validate - Validate an existing password
  exit     - Exit the application"""
COMMAND_PROMPT = "Enter a command: "
LENGTH_PROMPT = "Enter the desired password length (minimum 8): "
PASSWORD_PROMPT = "Enter the password to validate: "
UNKNOWN_COMMAND = "Unknown command. Please use 'generate', 'validate', or 'exit'."
GOODBYE = "Goodbye!"


class TokenReader:
    """Pull whitespace-delimited tokens from a line-oriented stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._pending = line
        return True

    def next_token(self) -> str | None:
        """Return the next token, or None at end of input."""
        while not self._pending.strip():
            if not self._fill():
                return None
        parts = self._pending.split(None, 1)
        self._pending = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def rest_of_line(self) -> str | None:
        """Return what remains of the current line, or the next line if none.

        Leading blanks are dropped in both cases; trailing blanks are kept.
        """
        if not self._pending.strip() and not self._fill():
            return None
        line, self._pending = self._pending, ""
        return line.rstrip("\r\n").lstrip(" \t")


def _prompt(text: str) -> None:
    click.echo(text, nl=False)


def _do_generate(service: PasswordService, reader: TokenReader) -> bool:
    _prompt(LENGTH_PROMPT)
    token = reader.next_token()
    if token is None:
        return False
    try:
        length = int(token)
    except ValueError:
        click.echo(f"Error: {InvalidLengthError(0)}")
        return True
    result = service.generate(length)
    if result.ok:
        click.echo(f"Generated password: {result.data['password']}")
    else:
        msg = result.error.message if result.error else "Unknown error"
        click.echo(f"Error: {msg}")
    return True


def _do_validate(service: PasswordService, reader: TokenReader, *, full_line: bool) -> bool:
    _prompt(PASSWORD_PROMPT)
    password = reader.rest_of_line() if full_line else reader.next_token()
    if password is None:
        return False
    result = service.validate(password)
    if result.ok:
        click.echo(f"Password validation successful: {result.data['message']}")
    else:
        click.echo(f"Password validation failed: {result.data['message']}")
    return True


def run_shell(service: PasswordService, stream: TextIO, *, full_line: bool = False) -> None:
    """Drive the interactive loop until ``exit`` or end of input."""
    reader = TokenReader(stream)
    click.echo(BANNER)
    while True:
        click.echo(MENU)
        _prompt(COMMAND_PROMPT)
        command = reader.next_token()
        if command is None or command == "exit":
            if command is None:
                click.echo()
            break
        if command == "generate":
            more = _do_generate(service, reader)
        elif command == "validate":
            more = _do_validate(service, reader, full_line=full_line)
        else:
            click.echo(UNKNOWN_COMMAND)
            more = True
        if not more:
            click.echo()
            break
    click.echo(GOODBYE)


@click.command(
    cls=PwCommand,
    examples="""\
  pwctl
  pwctl shell
  pwctl shell --read-mode line
  printf 'generate\\n12\\nexit\\n' | pwctl shell""",
)
@click.option(
    "--read-mode",
    type=click.Choice(["token", "line"]),
    default=None,
    help="How validate reads the password: one token, or the full line (spaces allowed).",
)
@click.pass_obj
def shell(app: AppContext, read_mode: str | None) -> None:
    """Start the interactive generate/validate loop."""
    full_line = app.settings.shell.full_line if read_mode is None else read_mode == "line"
    run_shell(app.service, click.get_text_stream("stdin"), full_line=full_line)
