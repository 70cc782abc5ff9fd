"""Trade data import and export (CSV)."""

from chance.services.data.csv_export import EmptyExportError, export_filename, export_trades_csv, write_export
from chance.services.data.csv_import import ImportResult, ImportStatus, parse_trades_csv

__all__ = [
    "parse_trades_csv",
    "ImportResult",
    "ImportStatus",
    "export_trades_csv",
    "export_filename",
    "write_export",
    "EmptyExportError",
]
