"""Main CLI entry point."""

from functools import partial

import click
from copilot_cli.database.factories import create_sqlite_database, resolve_database_path
from copilot_cli.logging_config import setup_logging, teardown_logging

# Import and register all commands at module level
from copilot_cli.cli.commands import (
    import_cmd,
    summary,
    transactions,
)

# Commands that never touch the database
NO_DB_COMMANDS = {"db-path"}


@click.group()
@click.version_option(package_name="copilot-cli")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides COPILOT_DB_PATH environment variable)",
    envvar="COPILOT_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Copilot CLI - query your Copilot.money exports locally.

    Import CSV exports into a local database, then list transactions and
    summarize spending by category or month.
    """
    ctx.ensure_object(dict)
    handler = setup_logging(verbose)
    ctx.call_on_close(partial(teardown_logging, handler))
    ctx.obj["db_path"] = db_path

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and ctx.invoked_subcommand not in NO_DB_COMMANDS:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


@cli.command("db-path")
@click.pass_context
def db_path_command(ctx):
    """Show database location."""
    click.echo(resolve_database_path(ctx.obj["db_path"]))


# Register all commands
import_cmd.register_commands(cli)
transactions.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
