"""Command-line entry point."""

from __future__ import annotations

from collections.abc import Sequence

import click

from gepetto.commands import scaffold_project
from gepetto.prompts import print_welcome_message
from gepetto.validation import ValidationError

_VERSION = "0.1.0"


@click.group(invoke_without_command=True, help="Solana's pinnochio companion")
@click.version_option(version=_VERSION, prog_name="gepetto")
@click.pass_context
def _cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        print_welcome_message()


@_cli.command("new", help="Create a new Pinocchio project")
@click.argument("name", required=False)
def _new(name: str | None) -> None:
    try:
        scaffold_project(name)
    except (ValidationError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    try:
        _cli.main(args=list(argv) if argv is not None else None, prog_name="gepetto")
    except SystemExit as exc:
        code = exc.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1
    return 0