"""Journal statistics calculation functions.

Pure functions deriving dashboard statistics from a collection of closed
trades. Stats are always recomputed from the full collection.

Wins are trades with pnl > 0. Everything else, breakeven included, is
counted as a loss. Values are exact Decimals; rounding is left to display.

Usage:
    >>> from chance.libraries.performance import metrics
    >>> stats = metrics.calculate_dashboard_stats(trades)
    >>> stats.win_rate
    Decimal('50')
"""

from decimal import Decimal
from typing import Sequence

from chance.libraries.performance.models import ZERO, DashboardStats, Trade


def _partition(trades: Sequence[Trade]) -> tuple[list[Trade], list[Trade]]:
    wins = [t for t in trades if t.is_winner]
    losses = [t for t in trades if not t.is_winner]
    return wins, losses


def _average(values: Sequence[Decimal]) -> Decimal:
    if not values:
        return ZERO
    return sum(values, ZERO) / Decimal(len(values))


def calculate_win_rate(trades: Sequence[Trade]) -> Decimal:
    """
    Calculate win rate (percentage of profitable trades).

    Args:
        trades: Sequence of Trade records

    Returns:
        Win rate as percentage (0-100), 0 for no trades

    Example:
        >>> calculate_win_rate(trades)  # pnl: +100, -50, +200
        Decimal('66.66666666666666666666666667')
    """
    if not trades:
        return ZERO

    winning_trades = sum(1 for t in trades if t.is_winner)
    return Decimal(winning_trades) * Decimal("100") / Decimal(len(trades))


def calculate_profit_factor(total_win_pnl: Decimal, total_loss_pnl: Decimal) -> Decimal:
    """
    Calculate profit factor (gross profit / gross loss magnitude).

    With no losses the gross profit itself is returned, so the result is
    always defined.

    Args:
        total_win_pnl: Sum of winning P&L
        total_loss_pnl: Magnitude of summed losing P&L (non-negative)

    Returns:
        Profit factor

    Example:
        >>> calculate_profit_factor(Decimal("300"), Decimal("100"))
        Decimal('3')
    """
    if total_loss_pnl == ZERO:
        return total_win_pnl

    return total_win_pnl / total_loss_pnl


def calculate_expectancy(trades: Sequence[Trade]) -> Decimal:
    """
    Calculate expectancy (expected P&L per trade).

    Expectancy = (Win% x AvgWin) - (Loss% x AvgLoss)

    Example:
        >>> calculate_expectancy(trades)  # pnl: +100, -50, +200, -50
        Decimal('50')
    """
    if not trades:
        return ZERO

    wins, losses = _partition(trades)
    count = Decimal(len(trades))

    avg_win = _average([t.pnl for t in wins])
    avg_loss = abs(_average([t.pnl for t in losses]))

    return (avg_win * Decimal(len(wins)) - avg_loss * Decimal(len(losses))) / count


def calculate_risk_reward_ratio(avg_win: Decimal, avg_loss: Decimal) -> Decimal:
    """Average win over average loss magnitude; an average loss of 0 is treated as 1."""
    divisor = avg_loss if avg_loss != ZERO else Decimal("1")
    return avg_win / divisor


def calculate_dashboard_stats(trades: Sequence[Trade]) -> DashboardStats:
    """
    Calculate all dashboard statistics for a trade collection.

    Args:
        trades: All trades in the journal (any order)

    Returns:
        DashboardStats; every field is zero for an empty collection

    Example:
        >>> stats = calculate_dashboard_stats(trades)  # pnl: +100, -50, +200, -50
        >>> stats.net_pnl, stats.profit_factor, stats.expectancy
        (Decimal('200'), Decimal('3'), Decimal('50'))
    """
    if not trades:
        return DashboardStats()

    wins, losses = _partition(trades)

    total_win_pnl = sum((t.pnl for t in wins), ZERO)
    total_loss_pnl = abs(sum((t.pnl for t in losses), ZERO))

    avg_win = _average([t.pnl for t in wins])
    avg_loss = abs(_average([t.pnl for t in losses]))

    pnls = [t.pnl for t in trades]

    return DashboardStats(
        total_trades=len(trades),
        winning_trades=len(wins),
        losing_trades=len(losses),
        win_rate=calculate_win_rate(trades),
        net_pnl=sum(pnls, ZERO),
        total_win_pnl=total_win_pnl,
        total_loss_pnl=total_loss_pnl,
        profit_factor=calculate_profit_factor(total_win_pnl, total_loss_pnl),
        avg_win=avg_win,
        avg_loss=avg_loss,
        best_trade=max(pnls),
        worst_trade=min(pnls),
        expectancy=calculate_expectancy(trades),
        risk_reward_ratio=calculate_risk_reward_ratio(avg_win, avg_loss),
    )
