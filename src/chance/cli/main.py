"""Chance CLI main entry point."""

from pathlib import Path
from typing import Literal, Optional, cast

import click

from chance import __version__
from chance.cli.commands import analyze_command, export_command, pnl_command, report_command, size_command
from chance.system import LoggerFactory
from chance.system.config import reload_system_config


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="Path to system configuration file (default: config/system.yaml or $CHANCE_CONFIG)",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override logging level from the system configuration",
)
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]):
    """Chance - Trading Journal and Performance Analytics"""
    system_config = reload_system_config(config_path)

    if log_level:
        system_config.logging.level = cast(Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], log_level.upper())
    LoggerFactory.configure(system_config.logging.to_logger_config())

    ctx.obj = system_config


# Register commands
main.add_command(report_command)
main.add_command(pnl_command)
main.add_command(export_command)
main.add_command(size_command)
main.add_command(analyze_command)


if __name__ == "__main__":
    main()
