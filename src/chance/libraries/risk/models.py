"""Position sizing models.

Immutable data structures for sizing inputs and results.

Design Principles:
- Immutable (frozen dataclasses)
- Pure data (no business logic beyond validation)
- Validation in __post_init__
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

RewardRating = Literal["favorable", "neutral", "unfavorable"]


@dataclass(frozen=True)
class SizingInputs:
    """Inputs for risk-based position sizing.

    Attributes:
        account_balance: Account equity in account currency
        risk_percent: Percent of balance to risk on the trade (e.g., 1.0 = 1%)
        entry_price: Planned entry price
        stop_loss: Protective stop price
        target_price: Profit target price
        leverage: Account leverage (1 = no margin)

    Example:
        >>> inputs = SizingInputs(
        ...     account_balance=Decimal("10000"),
        ...     risk_percent=Decimal("1"),
        ...     entry_price=Decimal("150"),
        ...     stop_loss=Decimal("147.5"),
        ...     target_price=Decimal("160"),
        ... )
    """

    account_balance: Decimal
    risk_percent: Decimal
    entry_price: Decimal
    stop_loss: Decimal
    target_price: Decimal
    leverage: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        """Validate sizing inputs."""
        if self.account_balance < 0:
            raise ValueError(f"account_balance must be non-negative, got {self.account_balance}")

        if self.risk_percent < 0:
            raise ValueError(f"risk_percent must be non-negative, got {self.risk_percent}")

        for name in ("entry_price", "stop_loss", "target_price"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.leverage < 0:
            raise ValueError(f"leverage must be non-negative, got {self.leverage}")


@dataclass(frozen=True)
class PositionSizeResult:
    """Outcome of a position sizing calculation.

    Attributes:
        risk_amount: Currency amount at risk (balance x risk%)
        risk_per_share: Distance from entry to stop
        position_size: Whole units to trade (floored)
        position_value: Notional value of the position
        capital_required: Notional divided by leverage
        reward_per_share: Distance from entry to target
        potential_profit: Profit if the target is hit
        rr_ratio: Reward per share over risk per share
        capital_usage_percent: Capital required as % of balance
        uses_margin: Leverage above 1
    """

    risk_amount: Decimal
    risk_per_share: Decimal
    position_size: int
    position_value: Decimal
    capital_required: Decimal
    reward_per_share: Decimal
    potential_profit: Decimal
    rr_ratio: Decimal
    capital_usage_percent: Decimal
    uses_margin: bool

    @property
    def rr_rating(self) -> RewardRating:
        """favorable at 2:1 or better, neutral from 1:1, otherwise unfavorable."""
        if self.rr_ratio >= 2:
            return "favorable"
        if self.rr_ratio >= 1:
            return "neutral"
        return "unfavorable"
