"""Mini README: Entry point CLI for SmartSpend.

This script exposes a Typer CLI with two commands:
    * run - serve the FastAPI ledger service with uvicorn.
    * project - build a throwaway ledger from command line amounts and print
      the totals and the savings projection.

Settings come from ``SMARTSPEND_*`` environment variables when options are
omitted.
"""

from __future__ import annotations

from typing import List, Optional

import typer
import uvicorn

from smartspend.configuration import get_settings
from smartspend.finance import Ledger, LedgerError, TransactionType
from smartspend.logging_utils import set_root_level
from smartspend.utils.formatting import format_currency

cli = typer.Typer(help="Track a daily allowance and project monthly savings.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    set_root_level(settings.log_level)

    # Browsers cannot open 0.0.0.0 directly, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting SmartSpend on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "smartspend.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def project(
    allowance: str = typer.Option(..., help="Daily allowance."),
    expense: Optional[List[str]] = typer.Option(None, help="Expense amount; repeat for several."),
    income: Optional[List[str]] = typer.Option(None, help="Income amount; repeat for several."),
    saving: Optional[List[str]] = typer.Option(None, help="Savings deposit; repeat for several."),
    days: int = typer.Option(None, help="Days to project over."),
) -> None:
    """Print totals and the savings projection for the given amounts."""

    settings = get_settings()
    symbol = settings.currency_symbol
    ledger = Ledger()
    try:
        ledger.initialize(allowance)
        for amount in income or []:
            ledger.add_transaction("", amount, TransactionType.INCOME)
        for amount in expense or []:
            ledger.add_transaction("", amount, TransactionType.EXPENSE)
        for amount in saving or []:
            ledger.add_saving("", amount)
        result = ledger.project(settings.projection_days if days is None else days)
    except LedgerError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    typer.echo(f"Total income:      {format_currency(ledger.total_income(), symbol)}")
    typer.echo(f"Total expenses:    {format_currency(ledger.total_expenses(), symbol)}")
    typer.echo(f"Balance:           {format_currency(ledger.balance(), symbol)}")
    typer.echo(f"Total savings:     {format_currency(ledger.total_savings(), symbol)}")
    typer.echo(f"Daily allowance:   {format_currency(result.daily_allowance, symbol)}")
    typer.echo(f"Average spending:  {format_currency(result.avg_spending, symbol)}")
    typer.echo(f"Days left:         {result.days_left}")
    typer.echo(f"Projected savings: {format_currency(result.projected_savings, symbol)}")
    typer.echo(f"Potential total:   {format_currency(result.potential_total, symbol)}")


if __name__ == "__main__":
    cli()
