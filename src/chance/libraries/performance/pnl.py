"""Trade P&L calculation.

Pure functions turning raw trade inputs into a signed net P&L, a return
relative to entry notional, and an outcome status. build_trade() is the
single place Trade records are created.

Usage:
    >>> from decimal import Decimal
    >>> from chance.libraries.performance.models import TradeDirection
    >>> from chance.libraries.performance.pnl import calculate_pnl
    >>> result = calculate_pnl(
    ...     direction=TradeDirection.LONG,
    ...     entry_price=Decimal("150"),
    ...     exit_price=Decimal("155"),
    ...     quantity=Decimal("100"),
    ...     fees=Decimal("2"),
    ... )
    >>> result.pnl
    Decimal('498')
"""

import secrets
import time
from datetime import date
from decimal import Decimal

from chance.libraries.performance.models import PnLResult, Trade, TradeDirection, TradeInput, TradeStatus

RETURN_PRECISION = Decimal("0.0001")


class ZeroNotionalError(ValueError):
    """Raised when a return is requested for a trade with zero entry notional."""


def new_trade_id() -> str:
    """
    Generate a unique trade id.

    Millisecond timestamp prefix (base 36) plus a random suffix, so ids
    generated in the same batch never collide.
    """
    millis = int(time.time() * 1000)
    return f"{_to_base36(millis)}-{secrets.token_hex(4)}"


def _to_base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    out = ""
    while value:
        value, rem = divmod(value, 36)
        out = digits[rem] + out
    return out or "0"


def calculate_gross_pnl(
    direction: TradeDirection,
    entry_price: Decimal,
    exit_price: Decimal,
    quantity: Decimal,
) -> Decimal:
    """
    Calculate P&L before fees.

    Args:
        direction: LONG profits when price rises, SHORT when it falls
        entry_price: Entry fill price
        exit_price: Exit fill price
        quantity: Position size (units)

    Returns:
        Signed gross P&L

    Example:
        >>> calculate_gross_pnl(TradeDirection.SHORT, Decimal("100"), Decimal("90"), Decimal("10"))
        Decimal('100')
    """
    if direction == TradeDirection.LONG:
        return (exit_price - entry_price) * quantity
    return (entry_price - exit_price) * quantity


def calculate_return_percent(
    net_pnl: Decimal,
    entry_price: Decimal,
    quantity: Decimal,
    *,
    guard_zero_notional: bool = False,
) -> Decimal:
    """
    Calculate return on entry notional as a percentage.

    Args:
        net_pnl: P&L after fees
        entry_price: Entry fill price
        quantity: Position size
        guard_zero_notional: Return 0 instead of raising when notional is zero

    Returns:
        Return percentage rounded to 4 decimal places

    Raises:
        ZeroNotionalError: If entry_price * quantity is zero and not guarded
    """
    notional = entry_price * quantity
    if notional == 0:
        if guard_zero_notional:
            return Decimal("0")
        raise ZeroNotionalError(f"entry notional is zero (entry_price={entry_price}, quantity={quantity})")

    return (net_pnl / notional * Decimal("100")).quantize(RETURN_PRECISION)


def classify_status(net_pnl: Decimal) -> TradeStatus:
    """Win if net P&L is positive, Loss if negative, Breakeven at exactly zero."""
    if net_pnl > 0:
        return TradeStatus.WIN
    if net_pnl < 0:
        return TradeStatus.LOSS
    return TradeStatus.BREAKEVEN


def calculate_pnl(
    *,
    direction: TradeDirection,
    entry_price: Decimal,
    exit_price: Decimal,
    quantity: Decimal,
    fees: Decimal,
    guard_zero_notional: bool = False,
) -> PnLResult:
    """
    Calculate the full outcome of a closed trade.

    Formula:
        gross = (exit - entry) * qty        (LONG)
        gross = (entry - exit) * qty        (SHORT)
        net = gross - fees
        return_percent = net / (entry * qty) * 100

    Args:
        direction: Trade direction
        entry_price: Entry fill price
        exit_price: Exit fill price
        quantity: Position size
        fees: Total fees and commissions
        guard_zero_notional: Treat zero notional as a 0% return instead of raising

    Returns:
        PnLResult with gross_pnl, pnl (net), return_percent and status

    Raises:
        ZeroNotionalError: If entry notional is zero and not guarded

    Example:
        >>> calculate_pnl(
        ...     direction=TradeDirection.LONG,
        ...     entry_price=Decimal("150"),
        ...     exit_price=Decimal("155"),
        ...     quantity=Decimal("100"),
        ...     fees=Decimal("2"),
        ... ).return_percent
        Decimal('3.3200')
    """
    gross = calculate_gross_pnl(direction, entry_price, exit_price, quantity)
    net = gross - fees
    return PnLResult(
        gross_pnl=gross,
        pnl=net,
        return_percent=calculate_return_percent(net, entry_price, quantity, guard_zero_notional=guard_zero_notional),
        status=classify_status(net),
    )


def build_trade(
    data: TradeInput,
    *,
    trade_id: str | None = None,
    guard_zero_notional: bool = False,
) -> Trade:
    """
    Build a Trade record from validated input, computing its outcome.

    Args:
        data: Trade input fields
        trade_id: Explicit id; a fresh one is generated when omitted
        guard_zero_notional: Passed through to calculate_pnl

    Returns:
        Immutable Trade with consistent computed fields

    Raises:
        ZeroNotionalError: If entry notional is zero and not guarded
    """
    return build_trade_from_fields(**data.model_dump(), trade_id=trade_id, guard_zero_notional=guard_zero_notional)


def build_trade_from_fields(
    *,
    symbol: str,
    entry_date: date,
    exit_date: date,
    direction: TradeDirection,
    entry_price: Decimal,
    exit_price: Decimal,
    quantity: Decimal,
    fees: Decimal,
    setup: str = "",
    notes: str = "",
    trade_id: str | None = None,
    guard_zero_notional: bool = False,
) -> Trade:
    """
    Build a Trade from loosely validated fields (CSV import path).

    Unlike build_trade(), no TradeInput validation runs, so rows with a zero
    entry price or quantity can be built when guard_zero_notional is set.
    """
    result = calculate_pnl(
        direction=direction,
        entry_price=entry_price,
        exit_price=exit_price,
        quantity=quantity,
        fees=fees,
        guard_zero_notional=guard_zero_notional,
    )
    return Trade(
        id=trade_id or new_trade_id(),
        symbol=symbol,
        entry_date=entry_date,
        exit_date=exit_date,
        direction=direction,
        entry_price=entry_price,
        exit_price=exit_price,
        quantity=quantity,
        fees=fees,
        setup=setup,
        notes=notes,
        pnl=result.pnl,
        return_percent=result.return_percent,
        status=result.status,
    )
