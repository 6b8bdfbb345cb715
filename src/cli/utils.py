"""Shared CLI utilities."""

import sys

from rich.console import Console

console = Console()


def get_components():
    """Build config and a loaded SuggestionBoard."""
    from cli.config import load_config_model
    from suggestions import SuggestionBoard, SuggestionFileStore

    try:
        config = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    board = SuggestionBoard(SuggestionFileStore(config.paths.store_file))
    board.load()

    return {
        "config": config,
        "board": board,
    }


def preview(text: str, limit: int) -> str:
    """Single-line preview truncated to limit chars."""
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[: limit - 1] + "…"
