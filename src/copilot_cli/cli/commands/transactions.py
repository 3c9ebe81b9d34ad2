"""Transaction query command."""

import json
from decimal import Decimal

import click
from copilot_cli.cli.error_handling import echo_first_run_guidance, handle_domain_error
from copilot_cli.domain.entities import TransactionFilter
from copilot_cli.domain.errors import DomainError
from copilot_cli.domain.transaction import TransactionService


def _to_decimal(value: float | None) -> Decimal | None:
    return None if value is None else Decimal(str(value))


@click.command("transactions")
@click.option("--days", "-d", type=int, default=30, show_default=True, help="Show last N days")
@click.option("--category", "-c", help="Filter by category (substring match)")
@click.option("--min", "-m", "min_amount", type=float, help="Minimum amount")
@click.option("--max", "-M", "max_amount", type=float, help="Maximum amount")
@click.option("--search", "-s", help="Search description/merchant")
@click.option("--limit", "-l", type=int, default=50, show_default=True, help="Limit results")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_transactions(
    ctx,
    days: int,
    category: str | None,
    min_amount: float | None,
    max_amount: float | None,
    search: str | None,
    limit: int,
    as_json: bool,
):
    """Query transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn_filter = TransactionFilter(
        days=days,
        category=category,
        min_amount=_to_decimal(min_amount),
        max_amount=_to_decimal(max_amount),
        search=search,
        limit=limit,
    )

    try:
        transactions = service.list_transactions(txn_filter)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        rows = [
            {
                "date": txn.date,
                "description": txn.description,
                "category": txn.category,
                "amount": float(txn.amount),
            }
            for txn in transactions
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    if not transactions:
        if service.is_empty():
            echo_first_run_guidance()
        else:
            click.echo("No transactions found matching your filters.")
            click.echo("\nTry adjusting: --days, --category, --search, --min, --max")
        return

    click.echo(f"{'Date':<12} {'Description':<40} {'Category':<20} {'Amount':>12}")
    click.echo("-" * 87)
    for txn in transactions:
        description = (txn.description or "")[:38]
        click.echo(
            f"{txn.date:<12} {description:<40} {(txn.category or '-'):<20} {txn.amount:>12,.2f}"
        )

    click.echo(f"\nShowing {len(transactions)} transactions")


def register_commands(cli):
    """Register transaction query command with main CLI."""
    cli.add_command(list_transactions)
    cli.add_command(list_transactions, name="tx")
