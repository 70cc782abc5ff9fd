"""Trade analytics library.

1. **Models** (`models.py`): Pydantic data structures
   - TradeInput: Manual entry form data
   - Trade: Closed round-trip trade with computed outcome
   - DashboardStats, EquityPoint: Derived views

2. **P&L** (`pnl.py`): Outcome of a single trade and Trade construction

3. **Metrics** (`metrics.py`): Pure statistics over the trade collection
   - win_rate, profit_factor, expectancy, risk_reward_ratio

4. **Equity** (`equity.py`): Cumulative P&L curve

Design Principles:
    - Decimal precision for financial calculations
    - Explicit edge case handling (zero trades, no losses, zero notional)
    - Derived views are recomputed, never updated in place
"""

from chance.libraries.performance.equity import build_equity_curve
from chance.libraries.performance.metrics import (
    calculate_dashboard_stats,
    calculate_expectancy,
    calculate_profit_factor,
    calculate_risk_reward_ratio,
    calculate_win_rate,
)
from chance.libraries.performance.models import (
    DashboardStats,
    EquityPoint,
    PnLResult,
    Trade,
    TradeDirection,
    TradeInput,
    TradeStatus,
)
from chance.libraries.performance.pnl import (
    ZeroNotionalError,
    build_trade,
    build_trade_from_fields,
    calculate_gross_pnl,
    calculate_pnl,
    calculate_return_percent,
    classify_status,
    new_trade_id,
)

__all__ = [
    # Models
    "TradeInput",
    "Trade",
    "TradeDirection",
    "TradeStatus",
    "PnLResult",
    "DashboardStats",
    "EquityPoint",
    # P&L
    "calculate_gross_pnl",
    "calculate_return_percent",
    "classify_status",
    "calculate_pnl",
    "build_trade",
    "build_trade_from_fields",
    "new_trade_id",
    "ZeroNotionalError",
    # Metrics
    "calculate_dashboard_stats",
    "calculate_win_rate",
    "calculate_profit_factor",
    "calculate_expectancy",
    "calculate_risk_reward_ratio",
    # Equity
    "build_equity_curve",
]
