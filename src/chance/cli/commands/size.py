"""Position sizing command."""

import sys
from decimal import Decimal

import click
from rich.console import Console

from chance.cli.params import DECIMAL
from chance.libraries.risk import calculate_position_size
from chance.services.reporting import display_position_size

console = Console()


@click.command("size")
@click.option("--balance", "-b", type=DECIMAL, required=True, help="Account balance")
@click.option("--risk", "-r", "risk_percent", type=DECIMAL, default="1", show_default=True, help="Risk per trade (%)")
@click.option("--entry", "entry_price", type=DECIMAL, required=True, help="Entry price")
@click.option("--stop", "stop_loss", type=DECIMAL, required=True, help="Stop loss price")
@click.option("--target", "target_price", type=DECIMAL, required=True, help="Target price")
@click.option("--leverage", type=DECIMAL, default="1", show_default=True, help="Account leverage (1 = no margin)")
def size_command(
    balance: Decimal,
    risk_percent: Decimal,
    entry_price: Decimal,
    stop_loss: Decimal,
    target_price: Decimal,
    leverage: Decimal,
):
    """
    Calculate a risk-based position size.

    \b
    Examples:
        chance size -b 10000 -r 1 --entry 150 --stop 147.5 --target 160
        chance size -b 10000 --entry 150 --stop 147.5 --target 160 --leverage 5
    """
    try:
        result = calculate_position_size(
            account_balance=balance,
            risk_percent=risk_percent,
            entry_price=entry_price,
            stop_loss=stop_loss,
            target_price=target_price,
            leverage=leverage,
        )
    except ValueError as e:
        console.print(f"[bold red]✗ Invalid sizing input:[/bold red] {e}")
        sys.exit(1)

    display_position_size(result, console=console)
