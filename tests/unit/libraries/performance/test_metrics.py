"""Tests for journal statistics."""

from datetime import date
from decimal import Decimal

from chance.libraries.performance.metrics import (
    calculate_dashboard_stats,
    calculate_expectancy,
    calculate_profit_factor,
    calculate_risk_reward_ratio,
    calculate_win_rate,
)
from chance.libraries.performance.models import TradeDirection
from chance.libraries.performance.pnl import build_trade_from_fields


def _large_trade(entry: str, exit_price: str):
    return build_trade_from_fields(
        symbol="BRK",
        entry_date=date(2024, 1, 2),
        exit_date=date(2024, 1, 3),
        direction=TradeDirection.LONG,
        entry_price=Decimal(entry),
        exit_price=Decimal(exit_price),
        quantity=Decimal("1"),
        fees=Decimal("0"),
    )


class TestDashboardStats:
    """Test the aggregate dashboard statistics."""

    def test_empty_collection_is_all_zero(self):
        stats = calculate_dashboard_stats([])

        for value in stats.model_dump().values():
            assert value == 0

    def test_mixed_trades(self, mixed_trades):
        """P&L +100, -50, +200, -50."""
        # Act
        stats = calculate_dashboard_stats(mixed_trades)

        # Assert
        assert stats.total_trades == 4
        assert stats.winning_trades == 2
        assert stats.losing_trades == 2
        assert stats.win_rate == Decimal("50")
        assert stats.net_pnl == Decimal("200")
        assert stats.total_win_pnl == Decimal("300")
        assert stats.total_loss_pnl == Decimal("100")
        assert stats.profit_factor == Decimal("3")
        assert stats.avg_win == Decimal("150")
        assert stats.avg_loss == Decimal("50")
        assert stats.best_trade == Decimal("200")
        assert stats.worst_trade == Decimal("-50")
        assert stats.expectancy == Decimal("50")
        assert stats.risk_reward_ratio == Decimal("3")

    def test_breakeven_counts_as_loss(self, trade_factory):
        trades = [trade_factory("100"), trade_factory("0")]

        stats = calculate_dashboard_stats(trades)

        assert stats.winning_trades == 1
        assert stats.losing_trades == 1
        assert stats.win_rate == Decimal("50")
        assert stats.avg_loss == Decimal("0")

    def test_no_losses_profit_factor_is_total_wins(self, trade_factory):
        trades = [trade_factory("100"), trade_factory("50")]

        stats = calculate_dashboard_stats(trades)

        assert stats.total_loss_pnl == Decimal("0")
        assert stats.profit_factor == Decimal("150")
        assert stats.risk_reward_ratio == Decimal("75")

    def test_all_losses(self, trade_factory):
        trades = [trade_factory("-10"), trade_factory("-30")]

        stats = calculate_dashboard_stats(trades)

        assert stats.win_rate == Decimal("0")
        assert stats.profit_factor == Decimal("0")
        assert stats.avg_win == Decimal("0")
        assert stats.avg_loss == Decimal("20")
        assert stats.expectancy == Decimal("-20")
        assert stats.best_trade == Decimal("-10")

    def test_order_does_not_matter(self, mixed_trades):
        assert calculate_dashboard_stats(mixed_trades) == calculate_dashboard_stats(list(reversed(mixed_trades)))


class TestTradeMetricHelpers:
    """Test the individual metric functions."""

    def test_win_rate_is_not_rounded(self, trade_factory):
        trades = [trade_factory("100"), trade_factory("-50"), trade_factory("200")]

        win_rate = calculate_win_rate(trades)

        assert win_rate != Decimal("66.67")
        assert abs(win_rate - Decimal("200") / Decimal("3")) < Decimal("1e-20")

    def test_win_rate_empty(self):
        assert calculate_win_rate([]) == Decimal("0")

    def test_profit_factor(self):
        assert calculate_profit_factor(Decimal("300"), Decimal("100")) == Decimal("3")

    def test_profit_factor_never_divides_by_zero(self):
        assert calculate_profit_factor(Decimal("0"), Decimal("0")) == Decimal("0")

    def test_expectancy(self, mixed_trades):
        assert calculate_expectancy(mixed_trades) == Decimal("50")

    def test_expectancy_empty(self):
        assert calculate_expectancy([]) == Decimal("0")

    def test_risk_reward_zero_loss_uses_one(self):
        assert calculate_risk_reward_ratio(Decimal("40"), Decimal("0")) == Decimal("40")

    def test_risk_reward(self):
        assert calculate_risk_reward_ratio(Decimal("150"), Decimal("50")) == Decimal("3")


class TestUnroundedValues:
    """Statistics keep full Decimal precision."""

    def test_sub_cent_pnl(self, trade_factory):
        # Arrange
        trades = [trade_factory("0.01"), trade_factory("0.02"), trade_factory("-0.005")]

        # Act
        stats = calculate_dashboard_stats(trades)

        # Assert
        assert stats.avg_win == Decimal("0.015")
        assert stats.avg_loss == Decimal("0.005")
        assert stats.risk_reward_ratio == Decimal("3")
        assert abs(stats.expectancy - Decimal("0.025") / Decimal("3")) < Decimal("1e-20")
        assert stats.expectancy > Decimal("0.008")

    def test_sub_cent_loss_not_treated_as_zero(self, trade_factory):
        trades = [trade_factory("10"), trade_factory("-0.004")]

        stats = calculate_dashboard_stats(trades)

        assert stats.avg_loss == Decimal("0.004")
        assert stats.risk_reward_ratio == Decimal("2500")

    def test_very_large_pnl(self):
        # Arrange
        trades = [_large_trade("1e26", "2e26"), _large_trade("3e26", "1e26")]

        # Act
        stats = calculate_dashboard_stats(trades)

        # Assert
        assert stats.net_pnl == Decimal("-1e26")
        assert stats.avg_win == Decimal("1e26")
        assert stats.avg_loss == Decimal("2e26")
        assert stats.profit_factor == Decimal("0.5")
        assert stats.expectancy == Decimal("-5e25")
        assert stats.risk_reward_ratio == Decimal("0.5")
        assert stats.win_rate == Decimal("50")
