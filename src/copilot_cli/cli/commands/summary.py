"""Summary commands."""

import json

import click
from copilot_cli.cli.error_handling import echo_first_run_guidance, handle_domain_error
from copilot_cli.domain.errors import DomainError
from copilot_cli.domain.summary import SummaryService
from copilot_cli.domain.transaction import TransactionService


def _show_by_category(service: SummaryService, days: int, as_json: bool) -> None:
    totals = service.by_category(days=days)

    if as_json:
        rows = [
            {"category": row.category, "total": float(row.total), "count": row.count}
            for row in totals
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    click.echo(f"\nSpending by Category (last {days} days)\n")
    click.echo(f"{'Category':<25} {'Spent':>15} {'Transactions':>15}")
    click.echo("-" * 57)
    for row in totals:
        click.echo(f"{row.category:<25} {abs(row.total):>15,.2f} {row.count:>15}")


def _show_by_month(service: SummaryService, as_json: bool) -> None:
    totals = service.by_month()

    if as_json:
        rows = [
            {
                "month": row.month,
                "income": float(row.income),
                "expenses": float(row.expenses),
                "net": float(row.net),
            }
            for row in totals
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    click.echo("\nMonthly Summary\n")
    click.echo(f"{'Month':<12} {'Income':>15} {'Expenses':>15} {'Net':>15}")
    click.echo("-" * 60)
    for row in totals:
        click.echo(
            f"{row.month:<12} {row.income:>15,.2f} {abs(row.expenses):>15,.2f} {row.net:>15,.2f}"
        )


def _show_overview(service: SummaryService, days: int, as_json: bool) -> None:
    stats = service.overview(days=days)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total_transactions": stats.total_transactions,
                    "total_income": float(stats.total_income),
                    "total_expenses": float(stats.total_expenses),
                    "net": float(stats.net),
                    "avg_expense": float(stats.average_expense),
                },
                indent=2,
            )
        )
        return

    click.echo(f"\nFinancial Overview (last {days} days)\n")
    click.echo(f"  Transactions:    {stats.total_transactions}")
    click.echo(f"  Income:          ${stats.total_income:,.2f}")
    click.echo(f"  Expenses:        ${abs(stats.total_expenses):,.2f}")
    click.echo(f"  Net:             ${stats.net:,.2f}")
    click.echo(f"  Avg Expense:     ${abs(stats.average_expense):,.2f}")


@click.command("summary")
@click.option("--days", "-d", type=int, default=30, show_default=True, help="Analyze last N days")
@click.option("--by-category", is_flag=True, help="Group expenses by category")
@click.option("--by-month", is_flag=True, help="Group by month (last 12 months)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def summary(ctx, days: int, by_category: bool, by_month: bool, as_json: bool):
    """Show spending summary."""
    db = ctx.obj["db"]

    if TransactionService(db).is_empty():
        echo_first_run_guidance()
        return

    service = SummaryService(db)
    try:
        if by_category:
            _show_by_category(service, days, as_json)
        elif by_month:
            _show_by_month(service, as_json)
        else:
            _show_overview(service, days, as_json)
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
