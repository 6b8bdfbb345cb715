"""Suggestion CLI commands."""

import sys
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from cli.utils import get_components, preview
from shared_types import ExportFormat, SuggestionStatus
from suggestions.exceptions import SuggestionError
from suggestions.search import file_basename

console = Console()

_STATUS_STYLE = {
    SuggestionStatus.SUCCESS: "green",
    SuggestionStatus.ERROR: "red",
    SuggestionStatus.PENDING: "yellow",
    SuggestionStatus.USER: "cyan",
}


def _fail(error: Exception):
    console.print(f"[red]Error:[/] {error}")
    sys.exit(1)


def _render_table(records, title: str, preview_chars: int):
    table = Table(title=title)
    table.add_column("ID", style="dim", width=16)
    table.add_column("Status", width=7)
    table.add_column("Issue")
    table.add_column("File", width=16)
    table.add_column("Rating", width=5)
    table.add_column("Date", width=10)

    for r in records:
        style = _STATUS_STYLE.get(r.status, "white")
        table.add_row(
            r.id,
            f"[{style}]{r.status}[/]",
            preview(r.issue, preview_chars),
            file_basename(r.file) if r.file else "",
            "★" * r.rating if r.rating else "",
            r.timestamp.strftime("%Y-%m-%d"),
        )
    console.print(table)


@click.command("list")
@click.option("-q", "--query", default="", help="Filter query (all terms must match)")
@click.option("-n", "--limit", default=None, type=int, help="Max suggestions to show")
@click.option("--finding", "finding_id", default=None, help="Only suggestions for this finding")
def list_suggestions(query: str, limit: int | None, finding_id: str | None):
    """List stored suggestions, optionally filtered."""
    c = get_components()
    board = c["board"]
    config = c["config"]

    records = list(board.search(query))
    if finding_id:
        records = [r for r in records if r.finding_id == finding_id]

    if not records:
        if len(board.suggestions) == 0:
            console.print("[yellow]No suggestions yet.[/]")
        else:
            console.print(f'[yellow]No suggestions match "{query}".[/]')
        return

    limit = limit or config.search.max_results
    title = f"Suggestions ({len(records)} of {len(board.suggestions)})"
    _render_table(records[:limit], title, config.search.preview_chars)


@click.command("search")
@click.argument("query", nargs=-1, required=True)
def search(query: tuple[str, ...]):
    """Search suggestions by keyword across issue, body, file, feature and tags."""
    c = get_components()
    board = c["board"]
    raw = " ".join(query)
    records = board.search(raw)

    if not records:
        console.print(f'[yellow]No suggestions match "{raw}".[/]')
        return

    _render_table(
        records,
        f'Matches for "{board.state.query}" ({len(records)})',
        c["config"].search.preview_chars,
    )


@click.command("add")
@click.option("--issue", required=True, help="Issue description")
@click.option("--suggestion", "body", default=None, help="Suggested fix (opens editor if omitted)")
@click.option("--feature", default=None, help="Feature name")
@click.option("--file", "file_path", default=None, help="Related file path")
@click.option("--finding-id", default=None, help="Originating finding id")
@click.option("--tags", default=None, help="Comma-separated tags")
@click.option(
    "--status",
    default=SuggestionStatus.SUCCESS.value,
    type=click.Choice([s.value for s in SuggestionStatus]),
    help="Suggestion status",
)
def add(issue, body, feature, file_path, finding_id, tags, status):
    """Store a suggestion obtained for an issue."""
    c = get_components()

    if body is None:
        body = click.edit("# Write the suggestion here\n\n")
        if not body:
            console.print("[yellow]No suggestion provided, cancelled.[/]")
            return

    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else []
    try:
        record = c["board"].add(
            issue,
            body,
            status=SuggestionStatus(status),
            feature=feature,
            file=file_path,
            finding_id=finding_id,
            tags=tag_list,
        )
    except SuggestionError as e:
        _fail(e)

    console.print(f"[green]Added:[/] {record.id}")


@click.command("remove")
@click.argument("suggestion_id")
def remove(suggestion_id: str):
    """Remove a suggestion by id."""
    c = get_components()
    board = c["board"]
    existed = board.state.get(suggestion_id) is not None
    board.remove(suggestion_id)
    if existed:
        console.print(f"[green]Removed:[/] {suggestion_id}")
    else:
        console.print(f"[yellow]Not found (nothing removed):[/] {suggestion_id}")


@click.command("clear")
@click.confirmation_option(prompt="Delete all stored suggestions?")
def clear():
    """Delete all stored suggestions."""
    c = get_components()
    count = c["board"].clear()
    console.print(f"[green]Cleared {count} suggestions.[/]")


@click.command("rate")
@click.argument("suggestion_id")
@click.argument("rating", type=int)
def rate(suggestion_id: str, rating: int):
    """Rate a suggestion from 1 to 5."""
    c = get_components()
    try:
        c["board"].rate(suggestion_id, rating)
    except SuggestionError as e:
        _fail(e)
    console.print(f"[green]Rated {suggestion_id}:[/] {'★' * rating}")


@click.command("follow-up")
@click.argument("parent_id")
@click.argument("message")
def follow_up(parent_id: str, message: str):
    """Post a follow-up question on a suggestion."""
    c = get_components()
    try:
        record = c["board"].follow_up(parent_id, message)
    except (SuggestionError, ValueError) as e:
        _fail(e)
    console.print(f"[green]Follow-up added:[/] {record.id} (conversation {record.conversation_id})")


@click.command("thread")
@click.argument("conversation_id")
def thread(conversation_id: str):
    """Show a suggestion and its follow-ups."""
    c = get_components()
    records = c["board"].thread(conversation_id)
    if not records:
        console.print(f"[yellow]No conversation found:[/] {conversation_id}")
        return

    for r in records:
        stamp = r.timestamp.strftime("%Y-%m-%d %H:%M")
        if r.is_user_message:
            console.print(f"\n[cyan]You[/] [dim]{stamp}[/]: {r.issue}")
        else:
            console.print(f"\n[bold]{r.issue}[/] [dim]{r.id} {stamp}[/]")
            console.print(Markdown(r.suggestion))


@click.command("export")
@click.option("-o", "--output", default=None, type=click.Path(), help="Output path")
@click.option(
    "-f",
    "--format",
    "fmt",
    default=None,
    type=click.Choice([f.value for f in ExportFormat]),
    help="Export format",
)
@click.option("-q", "--query", default="", help="Only export suggestions matching this query")
@click.option("--conversation", "conversation_id", default=None, help="Export one conversation")
def export(output: str | None, fmt: str | None, query: str, conversation_id: str | None):
    """Export suggestions to Markdown or JSON."""
    c = get_components()
    board = c["board"]
    config = c["config"]

    fmt = ExportFormat(fmt) if fmt else config.export.default_format
    if output:
        output_path = Path(output)
    else:
        suffix = "json" if fmt == ExportFormat.JSON else "md"
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = config.paths.export_dir / f"suggestions_{stamp}.{suffix}"

    board.search(query)
    count = board.export(output_path, fmt, conversation_id=conversation_id)
    console.print(f"[green]Exported {count} suggestions to {output_path}[/]")


@click.command("stats")
def stats():
    """Show suggestion counts and ratings."""
    c = get_components()
    s = c["board"].stats()

    console.print(f"Total suggestions: {s.total}")
    for status, count in sorted(s.by_status.items()):
        console.print(f"  {status}: {count}")
    if s.average_rating is not None:
        console.print(f"Average rating: {s.average_rating} ({s.rated} rated)")
    if s.tokens_used:
        console.print(f"Tokens used: {s.tokens_used}")
    if s.average_response_time is not None:
        console.print(f"Average response time: {s.average_response_time:.0f}ms")
