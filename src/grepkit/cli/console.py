"""Rich consoles shared by the CLI layer.

Diagnostics (errors, hints, log records) go to stderr; help, version
and the search hand-off go to stdout so they can be piped.

Consoles are created lazily on each call so that test harnesses that
swap ``sys.stdout``/``sys.stderr`` (pytest's ``capsys``) see the output.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def get_console(*, stderr: bool = True) -> Console:
    """Create a Rich console bound to the current stderr or stdout."""
    return Console(stderr=stderr, highlight=False)


def print_error(message: str, hint: str | None = None) -> None:
    """Render an error (and optional hint) on stderr."""
    console = get_console()
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint)}", soft_wrap=True)


def print_notice(message: str) -> None:
    """Render a short informational line on stderr."""
    get_console().print(f"[yellow]{escape(message)}[/yellow]")


def print_text(text: str) -> None:
    """Write *text* verbatim to stdout: no markup, no wrapping."""
    get_console(stderr=False).print(
        text.rstrip("\n"),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
