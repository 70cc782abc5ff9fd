"""Journal commands: report, single-trade P&L and CSV export."""

import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console

from chance.cli.params import DECIMAL
from chance.libraries.performance.models import TradeDirection, TradeInput
from chance.services.data.csv_export import EmptyExportError
from chance.services.journal import JournalService
from chance.services.reporting import display_journal_report, display_trade_result
from chance.system.config import SystemConfig

console = Console()

_csv_file_option = click.option(
    "--file",
    "-f",
    "csv_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to trades CSV (broker export or a previous Chance export)",
)


def _load_journal(csv_file: Path) -> JournalService:
    """Import a CSV into a fresh journal, exiting with a message on failure."""
    service = JournalService()
    result = service.import_csv_file(csv_file)
    if not result.ok:
        console.print(f"[bold red]✗ {result.message}[/bold red]")
        sys.exit(1)

    console.print(f"[green]✓ {result.message}[/green]")
    if result.skipped:
        console.print(f"[dim]  {result.skipped} row(s) skipped (missing symbol or entry price)[/dim]")
    return service


@click.command("report")
@_csv_file_option
@click.option("--recent", "-n", type=click.IntRange(min=0), help="Number of recent trades to list")
@click.pass_obj
def report_command(config: SystemConfig, csv_file: Path, recent: Optional[int]):
    """
    Import trades and show journal statistics.

    \b
    Examples:
        chance report -f trades.csv
        chance report -f trades.csv --recent 10
    """
    service = _load_journal(csv_file)
    limit = config.journal.recent_trades if recent is None else recent

    recent_trades = sorted(service.trades(), key=lambda t: t.exit_date, reverse=True)[:limit]
    display_journal_report(service.stats(), service.equity_curve(), recent_trades, console=console)


@click.command("pnl")
@click.option("--symbol", "-s", required=True, help="Ticker symbol")
@click.option(
    "--direction",
    "-d",
    type=click.Choice([d.value for d in TradeDirection], case_sensitive=False),
    default=TradeDirection.LONG.value,
    show_default=True,
    help="Trade direction",
)
@click.option("--entry", "entry_price", type=DECIMAL, required=True, help="Entry price")
@click.option("--exit", "exit_price", type=DECIMAL, required=True, help="Exit price")
@click.option("--quantity", "-q", type=DECIMAL, default="1", show_default=True, help="Position size")
@click.option("--fees", type=DECIMAL, default="0", show_default=True, help="Total fees and commissions")
@click.option("--entry-date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Entry date (YYYY-MM-DD, default today)")
@click.option("--exit-date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Exit date (YYYY-MM-DD, default today)")
@click.option("--setup", default="", help="Setup / strategy label")
@click.option("--notes", default="", help="Free-text notes")
def pnl_command(
    symbol: str,
    direction: str,
    entry_price: Decimal,
    exit_price: Decimal,
    quantity: Decimal,
    fees: Decimal,
    entry_date: Optional[datetime],
    exit_date: Optional[datetime],
    setup: str,
    notes: str,
):
    """
    Compute the outcome of a single closed trade.

    \b
    Examples:
        chance pnl -s AAPL --entry 150 --exit 155 -q 100 --fees 2
        chance pnl -s TSLA -d short --entry 250 --exit 240 -q 10
    """
    fields: dict = {
        "symbol": symbol,
        "direction": TradeDirection(direction.capitalize()),
        "entry_price": entry_price,
        "exit_price": exit_price,
        "quantity": quantity,
        "fees": fees,
        "setup": setup,
        "notes": notes,
    }
    if entry_date:
        fields["entry_date"] = entry_date.date()
    if exit_date:
        fields["exit_date"] = exit_date.date()

    try:
        data = TradeInput(**fields)
    except ValidationError as e:
        console.print("[bold red]✗ Invalid trade:[/bold red]")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  [red]{location}[/red]: {error['msg']}")
        sys.exit(1)

    trade = JournalService().log_trade(data)
    display_trade_result(trade, console=console)


@click.command("export")
@_csv_file_option
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the export file (default: journal.export_dir from system config)",
)
@click.pass_obj
def export_command(config: SystemConfig, csv_file: Path, output_dir: Optional[Path]):
    """
    Normalize a trades CSV into the standard 13-column export format.

    \b
    Examples:
        chance export -f broker_trades.csv
        chance export -f broker_trades.csv -o exports/
    """
    service = _load_journal(csv_file)

    try:
        path = service.export_to(output_dir or Path(config.journal.export_dir))
    except EmptyExportError as e:
        console.print(f"[bold red]✗ {e}[/bold red]")
        sys.exit(1)

    console.print(f"[green]✓ Exported {len(service.store)} trades to[/green] {path}")
