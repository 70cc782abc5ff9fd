"""AI trade analyst: provider interface, Claude implementation and output rendering."""

from chance.services.analyst.interface import TradeAnalyst
from chance.services.analyst.render import AnalysisBlock, parse_analysis, render_analysis
from chance.services.analyst.service import ClaudeTradeAnalyst

__all__ = [
    "TradeAnalyst",
    "ClaudeTradeAnalyst",
    "AnalysisBlock",
    "parse_analysis",
    "render_analysis",
]
