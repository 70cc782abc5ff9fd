"""Equity curve construction.

Cumulative P&L over time, one point per closed trade, ordered by exit date.
"""

from typing import Sequence

from chance.libraries.performance.models import ZERO, EquityPoint, Trade


def build_equity_curve(trades: Sequence[Trade]) -> list[EquityPoint]:
    """
    Build the cumulative P&L curve.

    Trades are stably sorted by exit date (trades closing the same day keep
    their collection order) and their P&L summed in that order.

    Args:
        trades: Trade collection in any order

    Returns:
        One EquityPoint per trade; empty list when there are no trades

    Example:
        >>> [p.equity for p in build_equity_curve(trades)]  # pnl: 100, -50, 200
        [Decimal('100'), Decimal('50'), Decimal('250')]
    """
    running = ZERO
    curve: list[EquityPoint] = []

    for trade in sorted(trades, key=lambda t: t.exit_date):
        running += trade.pnl
        curve.append(
            EquityPoint(
                date=trade.exit_date,
                equity=running,
                trade_pnl=trade.pnl,
                symbol=trade.symbol,
            )
        )

    return curve
