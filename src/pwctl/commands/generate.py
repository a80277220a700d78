"""Command: generate random passwords."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pwctl.commands._base import PwCommand

if TYPE_CHECKING:
    from pwctl.commands._context import AppContext


@click.command(
    cls=PwCommand,
    examples="""\
  pwctl generate
  pwctl generate --length 24
  pwctl generate -l 12 -n 5
  pwctl -q generate -l 32 | pbcopy
  pwctl --json generate""",
)
@click.option(
    "-l",
    "--length",
    type=int,
    default=None,
    help="Password length (minimum 8). Defaults to generator.default_length.",
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Number of passwords to generate.",
)
@click.pass_obj
def generate(app: AppContext, length: int | None, count: int | None) -> None:
    """Generate cryptographically random passwords."""
    cfg = app.settings.generator
    app.emit(
        app.service.generate(
            cfg.default_length if length is None else length,
            count=cfg.default_count if count is None else count,
        )
    )
