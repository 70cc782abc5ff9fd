"""Position sizing tools.

Pure functions for sizing a trade from the amount of account equity the
trader is willing to lose if the stop is hit.

Supported Models:
- Fixed Risk: risk a fixed % of the balance per trade; size is set by the
  distance between entry and stop, never by leverage
"""

from decimal import ROUND_FLOOR, Decimal

from chance.libraries.risk.models import PositionSizeResult, SizingInputs

ZERO = Decimal("0")


def calculate_position_size(
    *,
    account_balance: Decimal,
    risk_percent: Decimal,
    entry_price: Decimal,
    stop_loss: Decimal,
    target_price: Decimal,
    leverage: Decimal = Decimal("1"),
) -> PositionSizeResult:
    """Calculate a fixed-risk position size.

    Formula:
        risk_amount = balance * risk_percent / 100
        risk_per_share = |entry - stop|
        position_size = floor(risk_amount / risk_per_share)
        capital_required = position_size * entry / leverage

    Args:
        account_balance: Account equity
        risk_percent: Percent of balance to risk (e.g., 1 = 1%)
        entry_price: Planned entry price
        stop_loss: Stop price (either side of entry)
        target_price: Target price (either side of entry)
        leverage: Account leverage; 0 is treated as no leverage

    Returns:
        PositionSizeResult. Size and R:R are 0 when entry equals stop;
        capital usage is 0 when the balance is 0.

    Raises:
        ValueError: If balance, risk percent, any price or leverage is negative

    Examples:
        >>> result = calculate_position_size(
        ...     account_balance=Decimal("10000"),
        ...     risk_percent=Decimal("1"),
        ...     entry_price=Decimal("150"),
        ...     stop_loss=Decimal("147.5"),
        ...     target_price=Decimal("160"),
        ... )
        >>> result.position_size, result.rr_ratio, result.capital_required
        (40, Decimal('4'), Decimal('6000'))

        >>> # 5x leverage: same size, a fifth of the capital
        >>> calculate_position_size(
        ...     account_balance=Decimal("10000"),
        ...     risk_percent=Decimal("1"),
        ...     entry_price=Decimal("150"),
        ...     stop_loss=Decimal("147.5"),
        ...     target_price=Decimal("160"),
        ...     leverage=Decimal("5"),
        ... ).capital_required
        Decimal('1200')
    """
    inputs = SizingInputs(
        account_balance=account_balance,
        risk_percent=risk_percent,
        entry_price=entry_price,
        stop_loss=stop_loss,
        target_price=target_price,
        leverage=leverage,
    )

    risk_amount = inputs.account_balance * inputs.risk_percent / Decimal("100")
    risk_per_share = abs(inputs.entry_price - inputs.stop_loss)

    if risk_per_share > ZERO:
        position_size = int((risk_amount / risk_per_share).to_integral_value(rounding=ROUND_FLOOR))
    else:
        position_size = 0

    position_value = position_size * inputs.entry_price
    capital_required = position_value / inputs.leverage if inputs.leverage > ZERO else position_value

    reward_per_share = abs(inputs.target_price - inputs.entry_price)
    potential_profit = position_size * reward_per_share
    rr_ratio = reward_per_share / risk_per_share if risk_per_share > ZERO else ZERO

    if inputs.account_balance > ZERO:
        capital_usage_percent = capital_required / inputs.account_balance * Decimal("100")
    else:
        capital_usage_percent = ZERO

    return PositionSizeResult(
        risk_amount=risk_amount,
        risk_per_share=risk_per_share,
        position_size=position_size,
        position_value=position_value,
        capital_required=capital_required,
        reward_per_share=reward_per_share,
        potential_profit=potential_profit,
        rr_ratio=rr_ratio,
        capital_usage_percent=capital_usage_percent,
        uses_margin=inputs.leverage > Decimal("1"),
    )
