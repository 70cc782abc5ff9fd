"""Unit tests for journal reporting formatters.

Tests cover:
- Helper formatting functions (_format_pct, _format_currency, _format_number)
- Color assignment logic (_get_color)
- Table creation for stats, equity curve and trades
- Display functions writing to a recording console
"""

from decimal import Decimal
from io import StringIO

import pytest
from rich.console import Console

from chance.libraries.performance.equity import build_equity_curve
from chance.libraries.performance.metrics import calculate_dashboard_stats
from chance.libraries.risk import calculate_position_size
from chance.services.reporting.formatters import (
    _create_equity_table,
    _create_stats_table,
    _format_currency,
    _format_number,
    _format_pct,
    _get_color,
    create_trades_table,
    display_journal_report,
    display_position_size,
    display_trade_result,
)


@pytest.fixture
def console():
    """Wide console writing to a buffer."""
    return Console(file=StringIO(), width=160, record=True)


class TestHelpers:
    """Test formatting helpers."""

    def test_format_pct(self):
        assert _format_pct(Decimal("3.3200")) == "3.32%"

    @pytest.mark.parametrize(
        "value,expected",
        [(Decimal("1234.5"), "$1,234.50"), (Decimal("-50"), "-$50.00"), (Decimal("0"), "$0.00")],
    )
    def test_format_currency(self, value, expected):
        assert _format_currency(value) == expected

    def test_format_number(self):
        assert _format_number(40) == "40"
        assert _format_number(Decimal("147.50")) == "147.5"
        assert _format_number(Decimal("100")) == "100"

    @pytest.mark.parametrize("value,color", [(Decimal("1"), "green"), (Decimal("-1"), "red"), (Decimal("0"), "white")])
    def test_get_color(self, value, color):
        assert _get_color(value) == color


class TestTables:
    """Test table construction."""

    def test_stats_table_rows(self, mixed_trades):
        table = _create_stats_table(calculate_dashboard_stats(mixed_trades))

        assert table.row_count == 13

    def test_equity_table_none_when_empty(self):
        assert _create_equity_table([]) is None

    def test_equity_table_one_row_per_point(self, mixed_trades):
        table = _create_equity_table(build_equity_curve(mixed_trades))

        assert table is not None
        assert table.row_count == 4

    def test_trades_table(self, mixed_trades):
        assert create_trades_table(mixed_trades).row_count == 4


class TestDisplay:
    """Test console output."""

    def test_journal_report(self, console, mixed_trades):
        display_journal_report(
            calculate_dashboard_stats(mixed_trades),
            build_equity_curve(mixed_trades),
            mixed_trades[:2],
            console=console,
        )

        output = console.export_text()
        assert "Journal Summary" in output
        assert "$200.00" in output
        assert "Equity Curve" in output
        assert "Recent Trades" in output

    def test_journal_report_empty(self, console):
        display_journal_report(calculate_dashboard_stats([]), [], [], console=console)

        output = console.export_text()
        assert "insufficient data" in output
        assert "Recent Trades" not in output

    def test_trade_result(self, console, trade_factory):
        display_trade_result(trade_factory("-25", symbol="AMD"), console=console)

        output = console.export_text()
        assert "AMD" in output
        assert "-$25.00" in output
        assert "Loss" in output

    def test_position_size(self, console):
        result = calculate_position_size(
            account_balance=Decimal("10000"),
            risk_percent=Decimal("1"),
            entry_price=Decimal("150"),
            stop_loss=Decimal("147.5"),
            target_price=Decimal("160"),
            leverage=Decimal("2"),
        )

        display_position_size(result, console=console)

        output = console.export_text()
        assert "40 units" in output
        assert "1 : 4.00" in output
        assert "30.0% of account" in output
        assert "margin used" in output
