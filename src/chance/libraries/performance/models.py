"""Trade journal data models.

Pydantic models for trade records and the views derived from them.
Trades are immutable once built; derived views (stats, equity curve)
are recomputed from the trade collection and never updated in place.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ZERO = Decimal("0")


def utc_today() -> date:
    """Current calendar date in UTC (used for date defaults)."""
    return datetime.now(timezone.utc).date()


class TradeDirection(str, Enum):
    """Side of a round-trip trade."""

    LONG = "Long"
    SHORT = "Short"


class TradeStatus(str, Enum):
    """Outcome classification of a trade.

    OPEN is reserved for trades without both prices; no creation path
    produces it.
    """

    WIN = "Win"
    LOSS = "Loss"
    BREAKEVEN = "Breakeven"
    OPEN = "Open"


class TradeInput(BaseModel):
    """
    Raw trade data as entered by the user (manual entry form).

    Validated before the P&L calculator runs, so a TradeInput always has
    a positive entry notional.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    entry_date: date = Field(default_factory=utc_today)
    exit_date: date = Field(default_factory=utc_today)
    direction: TradeDirection = TradeDirection.LONG
    entry_price: Decimal = Field(gt=0)
    exit_price: Decimal = Field(ge=0)
    quantity: Decimal = Field(default=Decimal("1"), gt=0)
    fees: Decimal = Field(default=ZERO, ge=0)
    setup: str = ""
    notes: str = ""

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        """Trim and upper-case; reject empty symbols."""
        v = v.strip().upper()
        if not v:
            raise ValueError("symbol cannot be empty")
        return v


class Trade(BaseModel):
    """
    Record of one closed round-trip trade with its computed outcome.

    The computed fields (pnl, return_percent, status) must agree with the
    input fields; use pnl.build_trade() to create trades. Constructing a
    Trade with inconsistent computed fields raises a ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    entry_date: date
    exit_date: date
    direction: TradeDirection
    entry_price: Decimal
    exit_price: Decimal
    quantity: Decimal
    fees: Decimal
    setup: str = ""
    notes: str = ""

    # Computed fields
    pnl: Decimal
    return_percent: Decimal
    status: TradeStatus

    @model_validator(mode="after")
    def check_computed_fields(self) -> "Trade":
        """Reject records whose outcome disagrees with the P&L formula."""
        from chance.libraries.performance.pnl import calculate_pnl

        expected = calculate_pnl(
            direction=self.direction,
            entry_price=self.entry_price,
            exit_price=self.exit_price,
            quantity=self.quantity,
            fees=self.fees,
            guard_zero_notional=True,
        )
        if self.pnl != expected.pnl:
            raise ValueError(f"pnl {self.pnl} inconsistent with inputs (expected {expected.pnl})")
        if self.status != expected.status:
            raise ValueError(f"status {self.status.value} inconsistent with pnl {self.pnl}")
        if self.return_percent != expected.return_percent:
            raise ValueError(
                f"return_percent {self.return_percent} inconsistent with inputs (expected {expected.return_percent})"
            )
        return self

    @property
    def is_winner(self) -> bool:
        """Trade was profitable (breakeven is not a win)."""
        return self.pnl > ZERO

    @property
    def notional(self) -> Decimal:
        """Entry notional (entry price x quantity)."""
        return self.entry_price * self.quantity


class PnLResult(BaseModel):
    """Outcome of the P&L calculation for a single trade."""

    model_config = ConfigDict(frozen=True)

    gross_pnl: Decimal
    pnl: Decimal
    return_percent: Decimal
    status: TradeStatus


class DashboardStats(BaseModel):
    """
    Aggregate statistics over the whole trade collection.

    Breakeven trades count as losses here even though their own status
    is BREAKEVEN. avg_loss and total_loss_pnl are non-negative magnitudes.
    """

    model_config = ConfigDict(frozen=True)

    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    win_rate: Decimal = ZERO  # Percentage (0-100)
    net_pnl: Decimal = ZERO
    total_win_pnl: Decimal = ZERO
    total_loss_pnl: Decimal = ZERO
    profit_factor: Decimal = ZERO
    avg_win: Decimal = ZERO
    avg_loss: Decimal = ZERO
    best_trade: Decimal = ZERO
    worst_trade: Decimal = ZERO
    expectancy: Decimal = ZERO  # Expected P&L per trade
    risk_reward_ratio: Decimal = ZERO  # avg_win / avg_loss (avg_loss of 0 treated as 1)


class EquityPoint(BaseModel):
    """Single point on the cumulative P&L curve (one per closed trade)."""

    model_config = ConfigDict(frozen=True)

    date: date
    equity: Decimal
    trade_pnl: Decimal
    symbol: str
