"""Rich console formatters for journal reports.

Terminal display of dashboard statistics, the equity curve, trade lists,
single trade outcomes and position sizing results.
"""

from decimal import Decimal
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from chance.libraries.performance.models import DashboardStats, EquityPoint, Trade, TradeStatus
from chance.libraries.risk.models import PositionSizeResult


def _format_pct(value: Decimal, precision: int = 2) -> str:
    """Format percentage."""
    return f"{float(value):.{precision}f}%"


def _format_currency(value: Decimal, precision: int = 2) -> str:
    """Format currency value (sign before the dollar sign)."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(float(value)):,.{precision}f}"


def _format_number(value: int | Decimal) -> str:
    """Format a count or a price/quantity without trailing zeros."""
    if isinstance(value, int):
        return f"{value:,}"
    return format(value.normalize(), "f")


def _get_color(value: Decimal) -> str:
    """Get color based on positive/negative value."""
    if value > 0:
        return "green"
    elif value < 0:
        return "red"
    return "white"


def _status_color(status: TradeStatus) -> str:
    return {TradeStatus.WIN: "green", TradeStatus.LOSS: "red"}.get(status, "yellow")


def _create_stats_table(stats: DashboardStats) -> Table:
    """Create dashboard statistics table."""
    table = Table(title="📊 Journal Summary", show_header=False, box=None, padding=(0, 2))

    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    net_color = _get_color(stats.net_pnl)
    table.add_row("Net P&L", f"[{net_color}]{_format_currency(stats.net_pnl)}[/{net_color}]")
    table.add_row("Total Trades", _format_number(stats.total_trades))
    table.add_row("Winning Trades", f"[green]{_format_number(stats.winning_trades)}[/green]")
    table.add_row("Losing Trades", f"[red]{_format_number(stats.losing_trades)}[/red]")

    win_rate_color = "green" if stats.win_rate > Decimal("50") else "yellow" if stats.win_rate > Decimal("40") else "red"
    table.add_row("Win Rate", f"[{win_rate_color}]{_format_pct(stats.win_rate)}[/{win_rate_color}]")

    pf_color = (
        "green" if stats.profit_factor > Decimal("2.0") else "yellow" if stats.profit_factor > Decimal("1.0") else "red"
    )
    table.add_row("Profit Factor", f"[{pf_color}]{float(stats.profit_factor):.2f}[/{pf_color}]")

    expectancy_color = _get_color(stats.expectancy)
    table.add_row("Expectancy", f"[{expectancy_color}]{_format_currency(stats.expectancy)}[/{expectancy_color}]")
    table.add_row("Avg R:R", f"1 : {float(stats.risk_reward_ratio):.2f}")

    table.add_row("", "")  # Spacer
    table.add_row("Avg Win", f"[green]{_format_currency(stats.avg_win)}[/green]")
    table.add_row("Avg Loss", f"[red]{_format_currency(stats.avg_loss)}[/red]")
    table.add_row("Best Trade", f"[green]{_format_currency(stats.best_trade)}[/green]")
    table.add_row("Worst Trade", f"[red]{_format_currency(stats.worst_trade)}[/red]")

    return table


def _create_equity_table(curve: Sequence[EquityPoint]) -> Table | None:
    """Create cumulative P&L table (one row per closed trade)."""
    if len(curve) < 1:
        return None

    table = Table(title="📈 Equity Curve", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="cyan")
    table.add_column("Symbol")
    table.add_column("Trade P&L", justify="right")
    table.add_column("Equity", justify="right")

    for point in curve:
        pnl_color = _get_color(point.trade_pnl)
        equity_color = _get_color(point.equity)
        table.add_row(
            point.date.isoformat(),
            escape(point.symbol),
            f"[{pnl_color}]{_format_currency(point.trade_pnl)}[/{pnl_color}]",
            f"[{equity_color}]{_format_currency(point.equity)}[/{equity_color}]",
        )

    return table


def create_trades_table(trades: Sequence[Trade], title: str = "💼 Trades") -> Table:
    """Create trade list table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")

    table.add_column("Exit Date", style="cyan")
    table.add_column("Symbol", style="bold")
    table.add_column("Side")
    table.add_column("Entry", justify="right")
    table.add_column("Exit", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("P&L", justify="right")
    table.add_column("Return", justify="right")
    table.add_column("Status")
    table.add_column("Setup", style="dim")

    for trade in trades:
        pnl_color = _get_color(trade.pnl)
        status_color = _status_color(trade.status)
        table.add_row(
            trade.exit_date.isoformat(),
            escape(trade.symbol),
            trade.direction.value,
            _format_number(trade.entry_price),
            _format_number(trade.exit_price),
            _format_number(trade.quantity),
            f"[{pnl_color}]{_format_currency(trade.pnl)}[/{pnl_color}]",
            f"[{pnl_color}]{_format_pct(trade.return_percent)}[/{pnl_color}]",
            f"[{status_color}]{trade.status.value}[/{status_color}]",
            escape(trade.setup),
        )

    return table


def display_journal_report(
    stats: DashboardStats,
    curve: Sequence[EquityPoint],
    recent_trades: Sequence[Trade],
    console: Console | None = None,
) -> None:
    """
    Display the journal dashboard in Rich-formatted console output.

    Args:
        stats: Dashboard statistics
        curve: Equity curve points
        recent_trades: Most recent trades to list (already trimmed)
        console: Rich Console instance (creates new if None)
    """
    if console is None:
        console = Console()

    console.print()
    console.print(_create_stats_table(stats))
    console.print()

    equity_table = _create_equity_table(curve)
    if equity_table is not None:
        console.print(equity_table)
    else:
        console.print("[dim]Equity curve: insufficient data[/dim]")
    console.print()

    if recent_trades:
        console.print(create_trades_table(recent_trades, title="💼 Recent Trades"))
        console.print()


def display_trade_result(trade: Trade, console: Console | None = None) -> None:
    """Display the computed outcome of a single trade."""
    if console is None:
        console = Console()

    pnl_color = _get_color(trade.pnl)
    status_color = _status_color(trade.status)
    console.print(
        Panel(
            f"{trade.direction.value} {_format_number(trade.quantity)} {escape(trade.symbol)} "
            f"@ {_format_number(trade.entry_price)} → {_format_number(trade.exit_price)}\n"
            f"Fees: {_format_currency(trade.fees)}\n"
            f"Net P&L: [{pnl_color}]{_format_currency(trade.pnl)}[/{pnl_color}] "
            f"([{pnl_color}]{_format_pct(trade.return_percent)}[/{pnl_color}])\n"
            f"Status: [{status_color}]{trade.status.value}[/{status_color}]",
            title="🧾 Trade Outcome",
            border_style=pnl_color if pnl_color != "white" else "yellow",
        )
    )


def display_position_size(result: PositionSizeResult, console: Console | None = None) -> None:
    """Display position sizing results."""
    if console is None:
        console = Console()

    table = Table(title="🎯 Position Size", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Position Size", f"[bold]{_format_number(result.position_size)} units[/bold]")
    table.add_row("Position Value", _format_currency(result.position_value))
    table.add_row("Capital Required", _format_currency(result.capital_required))
    table.add_row("", "")  # Spacer
    table.add_row("Risk Amount", f"[red]{_format_currency(result.risk_amount)}[/red]")
    table.add_row("Risk / Unit", _format_currency(result.risk_per_share))
    table.add_row("Estimated Profit", f"[green]{_format_currency(result.potential_profit)}[/green]")

    rr_color = {"favorable": "green", "neutral": "yellow", "unfavorable": "red"}[result.rr_rating]
    table.add_row("Risk : Reward", f"[{rr_color}]1 : {float(result.rr_ratio):.2f}[/{rr_color}]")

    usage = f"{float(result.capital_usage_percent):.1f}% of account"
    if result.uses_margin:
        usage += " [red](margin used)[/red]"
    table.add_row("Capital Usage", usage)

    console.print()
    console.print(table)
    console.print()
