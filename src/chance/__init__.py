"""
Chance - Personal Trading Journal

Trade analytics engine: P&L, dashboard statistics, equity curve,
CSV import/export, position sizing and AI trade review.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("chance-journal")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"  # Fallback for development


__all__ = [
    "__version__",
]
