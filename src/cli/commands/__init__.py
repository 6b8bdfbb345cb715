"""CLI command modules."""

from .suggestions import (
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

__all__ = [
    "list_suggestions",
    "search",
    "add",
    "remove",
    "clear",
    "rate",
    "follow_up",
    "thread",
    "export",
    "stats",
]
