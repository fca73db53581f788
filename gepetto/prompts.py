"""Terminal input and output for the scaffolding command."""

from __future__ import annotations

import click


def print_welcome_message() -> None:
    """Print the greeting shown when no command is given."""
    click.echo("Welcome to Gepetto!")
    click.echo("Run with --help to see available commands")


def collect_user_input(package_name: str | None = None) -> tuple[str, str]:
    """Return (program_name_dash, company_name), prompting for what is missing."""
    if package_name is None:
        package_name = click.prompt("Program name (e.g., some-counter)", type=str)
    company_name = click.prompt("Company name", type=str)
    return package_name, company_name


def print_success_message(program_pubkey: str) -> None:
    """Print the closing message with the generated program id."""
    click.echo(f"{click.style('✅', fg='green')} Project created successfully!")
    click.echo(
        f"{click.style('🔑', fg='yellow')} Program ID: {click.style(program_pubkey, fg='cyan')}"
    )