"""Console reporting for the journal (rich)."""

from chance.services.reporting.formatters import (
    create_trades_table,
    display_journal_report,
    display_position_size,
    display_trade_result,
)

__all__ = [
    "display_journal_report",
    "display_trade_result",
    "display_position_size",
    "create_trades_table",
]
