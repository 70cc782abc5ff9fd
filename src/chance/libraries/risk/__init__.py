"""
Risk Management Library.

Pure function-based position sizing.

Architecture:
- tools/sizing.py: Position sizing functions
- models.py: Input and result dataclasses

Usage:
    >>> from chance.libraries.risk import calculate_position_size
    >>> result = calculate_position_size(
    ...     account_balance=Decimal("10000"),
    ...     risk_percent=Decimal("1"),
    ...     entry_price=Decimal("150"),
    ...     stop_loss=Decimal("147.5"),
    ...     target_price=Decimal("160"),
    ... )
    >>> result.position_size
    40
"""

from chance.libraries.risk.models import PositionSizeResult, SizingInputs
from chance.libraries.risk.tools.sizing import calculate_position_size

__all__ = [
    "calculate_position_size",
    "SizingInputs",
    "PositionSizeResult",
]
