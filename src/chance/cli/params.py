"""Shared click parameter types."""

from decimal import Decimal, InvalidOperation

import click


class DecimalParamType(click.ParamType):
    """Parse an option value into a Decimal (money, prices, quantities)."""

    name = "decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid number", param, ctx)
        if not result.is_finite():
            self.fail(f"{value!r} is not a finite number", param, ctx)
        return result


DECIMAL = DecimalParamType()
