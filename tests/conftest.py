"""Shared fixtures for Chance tests."""

from datetime import date
from decimal import Decimal

import pytest

from chance.libraries.performance.models import Trade, TradeDirection
from chance.libraries.performance.pnl import build_trade_from_fields


def make_trade(
    pnl: str | int = "0",
    *,
    symbol: str = "AAPL",
    exit_date: date = date(2024, 1, 15),
    trade_id: str | None = None,
    direction: TradeDirection = TradeDirection.LONG,
    setup: str = "",
    notes: str = "",
) -> Trade:
    """Build a one-unit trade at entry 100 whose net P&L equals pnl."""
    pnl_value = Decimal(str(pnl))
    exit_price = Decimal("100") + pnl_value if direction == TradeDirection.LONG else Decimal("100") - pnl_value
    return build_trade_from_fields(
        symbol=symbol,
        entry_date=exit_date,
        exit_date=exit_date,
        direction=direction,
        entry_price=Decimal("100"),
        exit_price=exit_price,
        quantity=Decimal("1"),
        fees=Decimal("0"),
        setup=setup,
        notes=notes,
        trade_id=trade_id,
    )


@pytest.fixture
def trade_factory():
    """Fixture exposing make_trade()."""
    return make_trade


@pytest.fixture
def mixed_trades() -> list[Trade]:
    """Four trades with P&L +100, -50, +200, -50 on consecutive days."""
    return [
        make_trade("100", symbol="AAPL", exit_date=date(2024, 1, 1)),
        make_trade("-50", symbol="MSFT", exit_date=date(2024, 1, 2)),
        make_trade("200", symbol="NVDA", exit_date=date(2024, 1, 3)),
        make_trade("-50", symbol="TSLA", exit_date=date(2024, 1, 4)),
    ]
