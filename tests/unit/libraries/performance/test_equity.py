"""Tests for the equity curve builder."""

from datetime import date
from decimal import Decimal

from chance.libraries.performance.equity import build_equity_curve


class TestBuildEquityCurve:
    """Test cumulative P&L construction."""

    def test_empty(self):
        assert build_equity_curve([]) == []

    def test_sorted_by_exit_date(self, trade_factory):
        # Arrange: collection order is newest first
        trades = [
            trade_factory("200", symbol="NVDA", exit_date=date(2024, 1, 3)),
            trade_factory("-50", symbol="MSFT", exit_date=date(2024, 1, 2)),
            trade_factory("100", symbol="AAPL", exit_date=date(2024, 1, 1)),
        ]

        # Act
        curve = build_equity_curve(trades)

        # Assert
        assert [p.equity for p in curve] == [Decimal("100"), Decimal("50"), Decimal("250")]
        assert [p.symbol for p in curve] == ["AAPL", "MSFT", "NVDA"]
        assert [p.trade_pnl for p in curve] == [Decimal("100"), Decimal("-50"), Decimal("200")]
        assert curve[0].date == date(2024, 1, 1)

    def test_last_point_equals_net_pnl(self, mixed_trades):
        curve = build_equity_curve(mixed_trades)

        assert len(curve) == len(mixed_trades)
        assert curve[-1].equity == sum((t.pnl for t in mixed_trades), Decimal("0"))

    def test_same_day_trades_keep_collection_order(self, trade_factory):
        same_day = date(2024, 2, 1)
        trades = [
            trade_factory("10", symbol="FIRST", exit_date=same_day),
            trade_factory("20", symbol="SECOND", exit_date=same_day),
        ]

        curve = build_equity_curve(trades)

        assert [p.symbol for p in curve] == ["FIRST", "SECOND"]
        assert curve[-1].equity == Decimal("30")
