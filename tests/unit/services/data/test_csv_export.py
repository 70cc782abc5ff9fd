"""Unit tests for trade CSV export."""

from datetime import date

import pytest

from chance.services.data.csv_export import (
    EXPORT_HEADERS,
    EmptyExportError,
    export_filename,
    export_trades_csv,
    write_export,
)


class TestExportTradesCsv:
    """Test CSV serialization."""

    def test_header_and_row_layout(self, trade_factory):
        # Arrange
        trade = trade_factory("5", symbol="AAPL", trade_id="t-1", setup="Breakout", exit_date=date(2024, 1, 15))

        # Act
        text = export_trades_csv([trade])

        # Assert
        header, row = text.split("\n")
        assert header == "ID,Symbol,Entry Date,Exit Date,Direction,Entry Price,Exit Price,Quantity,Fees,Setup,Notes,PnL,Status"
        assert row == (
            '"t-1","AAPL","2024-01-15","2024-01-15","Long","100","105","1","0","Breakout","","5","Win"'
        )

    def test_no_trailing_newline(self, mixed_trades):
        text = export_trades_csv(mixed_trades)

        assert not text.endswith("\n")
        assert len(text.split("\n")) == len(mixed_trades) + 1

    def test_rows_in_collection_order(self, mixed_trades):
        rows = export_trades_csv(mixed_trades).split("\n")[1:]

        assert [row.split(",")[1].strip('"') for row in rows] == [t.symbol for t in mixed_trades]

    def test_embedded_quotes_doubled(self, trade_factory):
        trade = trade_factory("1", notes='Said "never again"', trade_id="q")

        row = export_trades_csv([trade]).split("\n")[1]

        assert '"Said ""never again"""' in row

    def test_empty_collection_raises(self):
        with pytest.raises(EmptyExportError, match="No trades to export."):
            export_trades_csv([])

    def test_thirteen_columns(self):
        assert len(EXPORT_HEADERS) == 13


class TestExportFile:
    """Test export file naming and writing."""

    def test_filename(self):
        assert export_filename(date(2024, 1, 15)) == "trades_export_2024-01-15.csv"

    def test_write_export(self, tmp_path, mixed_trades):
        path = write_export(mixed_trades, tmp_path / "exports", today=date(2024, 3, 1))

        assert path == tmp_path / "exports" / "trades_export_2024-03-01.csv"
        assert path.read_text(encoding="utf-8") == export_trades_csv(mixed_trades)

    def test_write_export_empty_creates_nothing(self, tmp_path):
        with pytest.raises(EmptyExportError):
            write_export([], tmp_path / "exports")

        assert not (tmp_path / "exports").exists()
