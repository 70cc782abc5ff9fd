"""Tests for position sizing models."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from chance.libraries.risk.models import SizingInputs


class TestSizingInputs:
    """Test SizingInputs validation."""

    def test_valid_inputs(self):
        inputs = SizingInputs(
            account_balance=Decimal("10000"),
            risk_percent=Decimal("1"),
            entry_price=Decimal("150"),
            stop_loss=Decimal("147.5"),
            target_price=Decimal("160"),
        )

        assert inputs.leverage == Decimal("1")

    def test_frozen(self):
        inputs = SizingInputs(
            account_balance=Decimal("1"),
            risk_percent=Decimal("1"),
            entry_price=Decimal("1"),
            stop_loss=Decimal("1"),
            target_price=Decimal("1"),
        )

        with pytest.raises(FrozenInstanceError):
            inputs.leverage = Decimal("2")  # type: ignore[misc]

    def test_negative_balance_rejected(self):
        with pytest.raises(ValueError, match="account_balance must be non-negative"):
            SizingInputs(
                account_balance=Decimal("-1"),
                risk_percent=Decimal("1"),
                entry_price=Decimal("1"),
                stop_loss=Decimal("1"),
                target_price=Decimal("1"),
            )
