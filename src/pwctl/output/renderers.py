"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
every operation PasswordService performs has an entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pwctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pwctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Generated passwords are printed one per line with nothing else, so
    the output can be piped straight into another program.
    """
    if not result.ok:
        return result.error.message if result.error else "Unknown error"

    if "passwords" in result.data:
        return "\n".join(result.data["passwords"])
    if "password" in result.data:
        return str(result.data["password"])
    return str(result.data["message"])


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult, message: str | None = None) -> None:
    """Print the OK status line, optionally followed by a message."""
    parts = [Text("OK", style="pw.ok"), Text(f"  {result.op}", style="pw.op")]
    if message:
        parts.extend([Text(" — "), Text(message)])
    console.print(*parts, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field without wrapping."""
    key_text = Text(f"  {key}: ", style="pw.key")
    console.print(key_text, Text(str(value), style=style), sep="", soft_wrap=True)


def _rules_table(rules: dict[str, bool]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Rule")
    table.add_column("Status")
    for rule, passed in rules.items():
        status = Text("pass", style="pw.pass") if passed else Text("fail", style="pw.fail")
        table.add_row(rule, status)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="pw.error"),
        Text(f"  {result.op}", style="pw.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")
    if verbose and result.data.get("rules"):
        console.print(_rules_table(result.data["rules"]))


# ── Operation renderers ───────────────────────────────────────────────


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    if verbose:
        _field(console, "length", d.get("length", ""))
        _field(console, "count", d.get("count", ""))
    if "password" in d:
        _field(console, "password", d["password"], style="pw.secret")
    for pw in d.get("passwords", []):
        console.print(Text(f"  {pw}", style="pw.secret"), soft_wrap=True)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result, str(result.data.get("message", "")))
    if verbose and result.data.get("rules"):
        console.print(_rules_table(result.data["rules"]))


_OP_RENDERERS: dict[str, Any] = {
    "generate": _render_generate,
    "validate": _render_validate,
}
