"""Broker CSV trade import.

Parses arbitrary trade CSV exports into Trade records by matching header
names heuristically. Column order and naming vary between brokers, so each
logical field has an ordered list of header substrings to look for:

    symbol       symbol, ticker
    direction    direction, side, type
    entry_date   entry date, open date, date
    exit_date    exit date, close date
    entry_price  entry price, price in, entry
    exit_price   exit price, price out, exit
    quantity     quantity, qty, size, shares
    fees         fees, fee, comm, commission
    setup        setup, strategy
    notes        notes, comments

Earlier substrings win over later ones, so "Entry Date" never shadows
"Entry Price" for the entry price column.

Row handling:
  - Blank lines are ignored
  - Rows without a symbol, with a non-positive entry price, or with a
    negative exit price, quantity or fee are skipped
  - Unparseable numbers fall back to 0 (quantity falls back to 1)
  - Unparseable dates reset both dates to today

Example:
    >>> result = parse_trades_csv("Ticker,Date,Side,Entry,Exit,Qty,Fee\\nAAPL,2024-01-15,Buy,150,151,100,1")
    >>> result.count, result.trades[0].pnl
    (1, Decimal('99'))
"""

import csv
import re
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field

from chance.libraries.performance.models import Trade, TradeDirection, utc_today
from chance.libraries.performance.pnl import build_trade_from_fields, new_trade_id
from chance.system import LoggerFactory

logger = LoggerFactory.get_logger()

UNKNOWN_SYMBOL = "UNKNOWN"
EMPTY_OR_INVALID_MESSAGE = "CSV file appears empty or invalid."

FIELD_HEADERS: dict[str, tuple[str, ...]] = {
    "symbol": ("symbol", "ticker"),
    "direction": ("direction", "side", "type"),
    "entry_date": ("entry date", "open date", "date"),
    "exit_date": ("exit date", "close date"),
    "entry_price": ("entry price", "price in", "entry"),
    "exit_price": ("exit price", "price out", "exit"),
    "quantity": ("quantity", "qty", "size", "shares"),
    "fees": ("fees", "fee", "comm", "commission"),
    "setup": ("setup", "strategy"),
    "notes": ("notes", "comments"),
}

_LINE_SPLIT = re.compile(r"\r\n|\n")
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ImportStatus(str, Enum):
    """Outcome of a CSV import."""

    OK = "ok"
    EMPTY_OR_INVALID = "empty_or_invalid"
    NO_VALID_TRADES = "no_valid_trades"


class ImportResult(BaseModel):
    """Trades accepted from a CSV file plus a user-facing summary."""

    model_config = ConfigDict(frozen=True)

    status: ImportStatus
    trades: list[Trade] = Field(default_factory=list)
    skipped: int = 0
    message: str

    @property
    def count(self) -> int:
        """Number of accepted trades."""
        return len(self.trades)

    @property
    def ok(self) -> bool:
        return self.status == ImportStatus.OK


def _split_line(line: str) -> list[str]:
    """Split a CSV line on commas outside double-quoted fields.

    The reader removes enclosing quotes and unescapes doubled ones, so a
    value such as He said "hi" survives an export round trip intact.
    """
    row = next(csv.reader([line], skipinitialspace=True), [])
    return [v.strip() for v in row]


def resolve_columns(headers: list[str]) -> dict[str, int | None]:
    """
    Map each logical field to a header index.

    Args:
        headers: Normalized (lower-case, trimmed) header names

    Returns:
        Field name -> column index, or None when no header matches
    """
    columns: dict[str, int | None] = {}
    for field, substrings in FIELD_HEADERS.items():
        columns[field] = None
        for substring in substrings:
            index = next((i for i, h in enumerate(headers) if substring in h), None)
            if index is not None:
                columns[field] = index
                break
    return columns


def parse_number(value: str, default: Decimal) -> Decimal:
    """
    Parse the leading numeric part of a string.

    "150.25", "150.25 USD" and "1e3" parse; "$150" and "" give the default.
    """
    match = _LEADING_NUMBER.match(value.strip())
    if not match:
        return default
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return default


def parse_date(value: str) -> date:
    """
    Parse a date in any common format.

    Timezone-aware timestamps are converted to their UTC calendar date.

    Raises:
        ValueError: If the value cannot be parsed
    """
    try:
        parsed: datetime = date_parser.parse(value)
    except OverflowError as e:
        raise ValueError(f"date out of range: {value}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def _resolve_dates(raw_entry: str, raw_exit: str, today: date) -> tuple[date, date]:
    try:
        entry_date = parse_date(raw_entry) if raw_entry else today
        exit_date = parse_date(raw_exit) if raw_exit else entry_date
    except ValueError:
        logger.debug("csv_import.date_parse_failed", entry_date=raw_entry, exit_date=raw_exit)
        return today, today
    return entry_date, exit_date


def parse_trades_csv(
    text: str,
    *,
    today: date | None = None,
    id_factory: Callable[[], str] = new_trade_id,
) -> ImportResult:
    """
    Parse CSV text into trades.

    Args:
        text: Full CSV contents (header line first)
        today: Date used for missing or unparseable dates (UTC today if None)
        id_factory: Generates a unique id per accepted row

    Returns:
        ImportResult with accepted trades in file order
    """
    today = today or utc_today()
    lines = _LINE_SPLIT.split(text)

    if len(lines) < 2:
        logger.warning("csv_import.empty_or_invalid", line_count=len(lines))
        return ImportResult(status=ImportStatus.EMPTY_OR_INVALID, message=EMPTY_OR_INVALID_MESSAGE)

    headers = [h.lower() for h in _split_line(lines[0])]
    columns = resolve_columns(headers)
    logger.debug(
        "csv_import.columns_resolved",
        headers=headers,
        unresolved=[f for f, idx in columns.items() if idx is None],
    )

    def value(row: list[str], field: str) -> str:
        index = columns[field]
        if index is None or index >= len(row):
            return ""
        return row[index]

    trades: list[Trade] = []
    skipped = 0

    for line_number, line in enumerate(lines[1:], start=2):
        line = line.strip()
        if not line:
            continue

        try:
            row = _split_line(line)
        except csv.Error as e:
            skipped += 1
            logger.debug("csv_import.row_unreadable", line=line_number, error=str(e))
            continue

        symbol = value(row, "symbol").upper() or UNKNOWN_SYMBOL
        direction = TradeDirection.SHORT if "short" in value(row, "direction").lower() else TradeDirection.LONG
        entry_date, exit_date = _resolve_dates(value(row, "entry_date"), value(row, "exit_date"), today)

        entry_price = parse_number(value(row, "entry_price"), Decimal("0"))
        exit_price = parse_number(value(row, "exit_price"), Decimal("0"))
        quantity = parse_number(value(row, "quantity"), Decimal("1"))
        if quantity == 0:
            quantity = Decimal("1")
        fees = parse_number(value(row, "fees"), Decimal("0"))

        if symbol == UNKNOWN_SYMBOL or entry_price <= 0 or min(exit_price, quantity, fees) < 0:
            skipped += 1
            logger.debug(
                "csv_import.row_skipped",
                line=line_number,
                symbol=symbol,
                entry_price=str(entry_price),
                exit_price=str(exit_price),
                quantity=str(quantity),
                fees=str(fees),
            )
            continue

        try:
            trade = build_trade_from_fields(
                symbol=symbol,
                entry_date=entry_date,
                exit_date=exit_date,
                direction=direction,
                entry_price=entry_price,
                exit_price=exit_price,
                quantity=quantity,
                fees=fees,
                setup=value(row, "setup"),
                notes=value(row, "notes"),
                trade_id=id_factory(),
                guard_zero_notional=True,
            )
        except InvalidOperation as e:
            # Values beyond Decimal precision (e.g. 1e-30 entry, 1e30 exit)
            skipped += 1
            logger.debug("csv_import.row_unreadable", line=line_number, error=repr(e))
            continue
        trades.append(trade)

    if not trades:
        logger.warning("csv_import.no_valid_trades", skipped=skipped)
        return ImportResult(
            status=ImportStatus.NO_VALID_TRADES,
            skipped=skipped,
            message="No valid trades found in CSV. Please check your file format.",
        )

    logger.info("csv_import.completed", imported=len(trades), skipped=skipped)
    return ImportResult(
        status=ImportStatus.OK,
        trades=trades,
        skipped=skipped,
        message=f"Successfully imported {len(trades)} trades.",
    )
