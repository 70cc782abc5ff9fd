"""CLI commands."""

from chance.cli.commands.analyze import analyze_command
from chance.cli.commands.journal import export_command, pnl_command, report_command
from chance.cli.commands.size import size_command

__all__ = [
    "report_command",
    "pnl_command",
    "export_command",
    "size_command",
    "analyze_command",
]
