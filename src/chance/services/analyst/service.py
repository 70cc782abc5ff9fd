"""Claude-backed trade analyst.

Sends a compact JSON summary of the journal to the Anthropic Messages API
with a trading-mentor prompt and returns the model's Markdown reply.
The API key is read from the environment variable named in AnalystConfig.
"""

import json
import os
from typing import Any, Callable, Sequence

import anthropic

from chance.libraries.performance.models import Trade
from chance.services.analyst.interface import (
    ANALYSIS_FAILED_MESSAGE,
    EMPTY_RESPONSE_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    NO_TRADES_MESSAGE,
)
from chance.system import LoggerFactory
from chance.system.config import AnalystConfig

logger = LoggerFactory.get_logger()

SYSTEM_PROMPT = (
    "Act as a professional trading mentor and risk manager. "
    "Keep the tone professional, encouraging, but strict on risk management. Format with Markdown."
)

PROMPT_TEMPLATE = """Review the following trading journal data (JSON format).

Data:
{data}

Please provide a concise analysis covering:
1. Overall performance observation.
2. Pattern recognition: What setups are working best? What aren't?
3. Psychological analysis based on notes (if any) and P&L swings.
4. Actionable advice for the next trading session.
"""

ClientFactory = Callable[[str, float], Any]


def _default_client(api_key: str, timeout: float) -> anthropic.Anthropic:
    return anthropic.Anthropic(api_key=api_key, timeout=timeout)


def summarize_trades(trades: Sequence[Trade]) -> list[dict[str, Any]]:
    """Reduce trades to the fields the analyst needs."""
    return [
        {
            "symbol": t.symbol,
            "direction": t.direction.value,
            "pnl": float(t.pnl),
            "setup": t.setup,
            "date": t.entry_date.isoformat(),
            "notes": t.notes,
        }
        for t in trades
    ]


def build_prompt(trades: Sequence[Trade]) -> str:
    """Render the user prompt for a trade history."""
    return PROMPT_TEMPLATE.format(data=json.dumps(summarize_trades(trades)))


class ClaudeTradeAnalyst:
    """
    TradeAnalyst implementation using the Anthropic Messages API.

    Args:
        config: Analyst settings (key env var, model, token and time limits)
        client_factory: Builds the API client from (api_key, timeout); tests
            inject a fake here
    """

    def __init__(self, config: AnalystConfig | None = None, client_factory: ClientFactory | None = None) -> None:
        self._config = config or AnalystConfig()
        self._client_factory = client_factory or _default_client

    def analyze(self, trades: Sequence[Trade]) -> str:
        api_key = os.environ.get(self._config.api_key_env, "")
        if not api_key:
            logger.warning("analyst.missing_api_key", env_var=self._config.api_key_env)
            return MISSING_API_KEY_MESSAGE

        if not trades:
            return NO_TRADES_MESSAGE

        logger.info("analyst.request", model=self._config.model, trades=len(trades))

        try:
            client = self._client_factory(api_key, self._config.timeout_seconds)
            response = client.messages.create(
                model=self._config.model,
                max_tokens=self._config.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_prompt(trades)}],
            )
        except anthropic.AnthropicError as e:
            logger.error("analyst.call_failed", model=self._config.model, error_type=type(e).__name__, error=str(e))
            return ANALYSIS_FAILED_MESSAGE

        try:
            text = "".join(getattr(block, "text", "") for block in response.content or [])
        except (AttributeError, TypeError) as e:
            logger.error("analyst.malformed_response", model=self._config.model, error=str(e))
            return ANALYSIS_FAILED_MESSAGE

        if not text.strip():
            logger.warning("analyst.empty_response", model=self._config.model)
            return EMPTY_RESPONSE_MESSAGE

        logger.debug("analyst.response", chars=len(text))
        return text
