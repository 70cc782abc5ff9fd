"""Trade CSV export.

Serializes the journal to a fixed 13-column CSV that parse_trades_csv()
reads back without loss of symbol, direction or P&L.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Sequence

from chance.libraries.performance.models import Trade, utc_today
from chance.system import LoggerFactory

logger = LoggerFactory.get_logger()

EXPORT_HEADERS = (
    "ID",
    "Symbol",
    "Entry Date",
    "Exit Date",
    "Direction",
    "Entry Price",
    "Exit Price",
    "Quantity",
    "Fees",
    "Setup",
    "Notes",
    "PnL",
    "Status",
)


class EmptyExportError(ValueError):
    """Raised when exporting a journal with no trades."""

    def __init__(self) -> None:
        super().__init__("No trades to export.")


def _quote(value: object) -> str:
    if isinstance(value, Decimal):
        text = format(value, "f")
    elif isinstance(value, date):
        text = value.isoformat()
    elif isinstance(value, Enum):
        text = str(value.value)
    else:
        text = str(value)
    return '"' + text.replace('"', '""') + '"'


def _row(trade: Trade) -> str:
    return ",".join(
        _quote(v)
        for v in (
            trade.id,
            trade.symbol,
            trade.entry_date,
            trade.exit_date,
            trade.direction,
            trade.entry_price,
            trade.exit_price,
            trade.quantity,
            trade.fees,
            trade.setup,
            trade.notes,
            trade.pnl,
            trade.status,
        )
    )


def export_trades_csv(trades: Sequence[Trade]) -> str:
    """
    Serialize trades to CSV text.

    The header row is unquoted; every data value is double-quoted with
    embedded quotes doubled. Rows are newline-joined with no trailing newline.

    Args:
        trades: Trades in the order they should appear

    Returns:
        CSV text

    Raises:
        EmptyExportError: If there are no trades
    """
    if not trades:
        raise EmptyExportError()

    return "\n".join([",".join(EXPORT_HEADERS), *(_row(t) for t in trades)])


def export_filename(today: date | None = None) -> str:
    """Default export file name, e.g. trades_export_2024-01-15.csv."""
    return f"trades_export_{(today or utc_today()).isoformat()}.csv"


def write_export(trades: Sequence[Trade], directory: Path | str, today: date | None = None) -> Path:
    """
    Write trades to <directory>/trades_export_<date>.csv.

    Raises:
        EmptyExportError: If there are no trades (no file is created)
    """
    content = export_trades_csv(trades)

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(today)
    path.write_text(content, encoding="utf-8")

    logger.info("csv_export.written", path=str(path), trades=len(trades))
    return path
