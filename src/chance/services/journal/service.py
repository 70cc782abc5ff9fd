"""
Journal Service.

Owns the trade store and runs every journal operation through the
analytics core:

- log_trade: manual entry (validated TradeInput -> Trade)
- import_csv / import_csv_file: broker CSV import
- delete_trade: removal by id
- export_csv / export_to: CSV export
- stats / equity_curve: derived views, recomputed on each call
"""

from pathlib import Path

from chance.libraries.performance.equity import build_equity_curve
from chance.libraries.performance.metrics import calculate_dashboard_stats
from chance.libraries.performance.models import DashboardStats, EquityPoint, Trade, TradeInput
from chance.libraries.performance.pnl import build_trade
from chance.services.data.csv_export import export_trades_csv, write_export
from chance.services.data.csv_import import EMPTY_OR_INVALID_MESSAGE, ImportResult, ImportStatus, parse_trades_csv
from chance.services.journal.store import TradeStore
from chance.system import LoggerFactory

logger = LoggerFactory.get_logger()


class JournalService:
    """
    Trading journal session.

    Example:
        >>> service = JournalService()
        >>> result = service.import_csv(Path("trades.csv").read_text())
        >>> service.stats().win_rate
        Decimal('50')
    """

    def __init__(self, store: TradeStore | None = None) -> None:
        self._store = store if store is not None else TradeStore()

    @property
    def store(self) -> TradeStore:
        return self._store

    def trades(self) -> list[Trade]:
        """All trades, newest first."""
        return self._store.list()

    def log_trade(self, data: TradeInput) -> Trade:
        """
        Record a manually entered trade.

        Args:
            data: Validated form input (positive entry price and quantity)

        Returns:
            The stored Trade
        """
        trade = build_trade(data)
        self._store.add(trade)
        logger.info(
            "journal_service.trade_logged",
            trade_id=trade.id,
            symbol=trade.symbol,
            direction=trade.direction.value,
            pnl=str(trade.pnl),
            status=trade.status.value,
        )
        return trade

    def import_csv(self, text: str) -> ImportResult:
        """
        Import trades from CSV text and prepend them to the journal.

        The store is only changed when the import produced trades.
        """
        result = parse_trades_csv(text)
        if result.ok:
            self._store.add_many(result.trades)
            logger.info("journal_service.trades_imported", count=result.count, total=len(self._store))
        return result

    def import_csv_file(self, path: Path | str) -> ImportResult:
        """
        Read a CSV file and import it.

        A file that is not valid UTF-8 is reported as an empty or invalid
        import and leaves the journal unchanged.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        logger.debug("journal_service.reading_csv", path=str(path))
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning("journal_service.csv_not_utf8", path=str(path), error=str(e))
            return ImportResult(status=ImportStatus.EMPTY_OR_INVALID, message=EMPTY_OR_INVALID_MESSAGE)
        return self.import_csv(text)

    def delete_trade(self, trade_id: str) -> bool:
        """Delete a trade; returns False when the id is unknown."""
        removed = self._store.remove(trade_id)
        if removed:
            logger.info("journal_service.trade_deleted", trade_id=trade_id)
        else:
            logger.debug("journal_service.trade_not_found", trade_id=trade_id)
        return removed

    def export_csv(self) -> str:
        """
        Export the journal as CSV text.

        Raises:
            EmptyExportError: If the journal is empty
        """
        return export_trades_csv(self._store.list())

    def export_to(self, directory: Path | str) -> Path:
        """
        Write the export file into directory.

        Raises:
            EmptyExportError: If the journal is empty
        """
        return write_export(self._store.list(), directory)

    def stats(self) -> DashboardStats:
        return calculate_dashboard_stats(self._store.list())

    def equity_curve(self) -> list[EquityPoint]:
        return build_equity_curve(self._store.list())
