"""CSV import command."""

import click
from copilot_cli.cli.error_handling import handle_domain_error
from copilot_cli.domain.csv_import import CSVImportService
from copilot_cli.domain.errors import DomainError

PREVIEW_ROWS = 5


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Preview import without saving")
@click.pass_context
def import_csv(ctx, csv_file: str, dry_run: bool):
    """Import transactions from a Copilot CSV export."""
    db = ctx.obj["db"]
    service = CSVImportService(db)

    try:
        transactions = service.parse_file(csv_file)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Parsed {len(transactions)} transactions from {csv_file}")

    if dry_run:
        click.echo("\nDry run - no changes made")
        click.echo("\nSample transactions:")
        for txn in transactions[:PREVIEW_ROWS]:
            click.echo(f"  {txn.date} | {txn.description[:30]:<30} | {txn.amount:>10.2f}")
        return

    try:
        result = service.import_transactions(transactions, csv_file)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported: {result.imported}")
    if result.skipped > 0:
        click.echo(f"Skipped (duplicates): {result.skipped}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
