"""CLI entry point for suggestion-desk."""

import sys
from pathlib import Path

import click
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import (  # noqa: E402
    add,
    clear,
    export,
    follow_up,
    list_suggestions,
    rate,
    remove,
    search,
    stats,
    thread,
)
from cli.config import load_config_model  # noqa: E402
from cli.logging_config import setup_logging  # noqa: E402

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(verbose: bool, json_logs: bool):
    """Suggestion desk - store and search AI fix suggestions for code issues."""
    try:
        config = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    setup_logging(
        json_mode=json_logs or config.logging.json_mode,
        level=level,
        log_file=config.paths.log_file,
    )


cli.add_command(list_suggestions)
cli.add_command(search)
cli.add_command(add)
cli.add_command(remove)
cli.add_command(clear)
cli.add_command(rate)
cli.add_command(follow_up)
cli.add_command(thread)
cli.add_command(export)
cli.add_command(stats)


if __name__ == "__main__":
    cli()
