"""Trade analyst interface (Protocol).

Defines the contract for AI commentary providers so the CLI and tests can
swap the LLM-backed implementation for a stub.
"""

from typing import Protocol, Sequence

from chance.libraries.performance.models import Trade

MISSING_API_KEY_MESSAGE = "API Key is missing. Please configure your environment."
NO_TRADES_MESSAGE = "No trades available to analyze. Please add some trades to your journal first."
ANALYSIS_FAILED_MESSAGE = "An error occurred while analyzing your trades. Please try again later."
EMPTY_RESPONSE_MESSAGE = "Unable to generate analysis at this time."


class TradeAnalyst(Protocol):
    """
    Produces free-text commentary on a trade history.

    Implementations never raise: missing credentials, an empty history and
    provider failures are all reported as user-facing text.

    Example:
        >>> analyst: TradeAnalyst = ClaudeTradeAnalyst(config)
        >>> print(analyst.analyze(service.trades()))
    """

    def analyze(self, trades: Sequence[Trade]) -> str:
        """
        Analyze trades.

        Args:
            trades: Journal trades (any order)

        Returns:
            Markdown-ish commentary, or one of the fixed status messages
        """
        ...
