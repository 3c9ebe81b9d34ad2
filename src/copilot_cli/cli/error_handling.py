"""CLI error handling and shared messages."""

import click

from copilot_cli.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def echo_first_run_guidance() -> None:
    """Explain how to get data into an empty database."""
    click.echo("No transactions in database yet.")
    click.echo("\nTo get started:")
    click.echo("  1. Export CSV from Copilot.money (Settings > Account > Export)")
    click.echo("  2. Run: copilot import <path-to-csv>")
