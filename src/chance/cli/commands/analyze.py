"""AI trade analysis command."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from chance.services.analyst import ClaudeTradeAnalyst, parse_analysis, render_analysis
from chance.services.journal import JournalService
from chance.system.config import SystemConfig

console = Console()


@click.command("analyze")
@click.option(
    "--file",
    "-f",
    "csv_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to trades CSV",
)
@click.option("--model", help="Override the analyst model from the system config")
@click.pass_obj
def analyze_command(config: SystemConfig, csv_file: Path, model: Optional[str]):
    """
    Get AI mentor commentary on a trade history.

    Requires an Anthropic API key in the environment variable named by
    analyst.api_key_env (ANTHROPIC_API_KEY by default).

    \b
    Examples:
        chance analyze -f trades.csv
        chance analyze -f trades.csv --model claude-opus-4-1
    """
    service = JournalService()
    result = service.import_csv_file(csv_file)
    if result.ok:
        console.print(f"[green]✓ {result.message}[/green]")
    else:
        console.print(f"[yellow]⚠ {result.message}[/yellow]")

    analyst_config = replace(config.analyst, model=model) if model else config.analyst
    analyst = ClaudeTradeAnalyst(analyst_config)

    with console.status("[cyan]Analyzing trades...[/cyan]"):
        analysis = analyst.analyze(service.trades())

    console.print()
    console.print(Panel(render_analysis(parse_analysis(analysis)), title="🧠 AI Trade Analysis", border_style="yellow"))
