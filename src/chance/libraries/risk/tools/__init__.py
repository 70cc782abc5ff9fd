"""Risk tools: pure sizing functions."""

from chance.libraries.risk.tools.sizing import calculate_position_size

__all__ = ["calculate_position_size"]
