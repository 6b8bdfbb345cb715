"""Suggestion export to JSON and Markdown."""

import json
from datetime import datetime
from pathlib import Path
from typing import Sequence

import structlog

from shared_types import ExportFormat

from .models import Suggestion

logger = structlog.get_logger()


def export_json(records: Sequence[Suggestion], output_path: Path) -> int:
    """Export records to JSON.

    Args:
        records: Suggestions to write, in display order
        output_path: Output file path

    Returns:
        Number of records exported
    """
    export_data = {
        "exported_at": datetime.now().isoformat(),
        "count": len(records),
        "suggestions": [r.to_dict() for r in records],
    }

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(export_data, f, indent=2, default=str)

    return len(records)


def export_markdown(records: Sequence[Suggestion], output_path: Path) -> int:
    """Export records to Markdown. Returns number of records exported."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "# Suggestions Export",
        "",
        f"Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        f"Suggestions: {len(records)}",
        "",
        "---",
        "",
    ]

    for r in records:
        lines.extend(_markdown_section(r))

    with open(output_path, "w") as f:
        f.write("\n".join(lines))

    return len(records)


def _markdown_section(record: Suggestion) -> list[str]:
    if record.is_user_message:
        lines = [f"### Follow-up: {record.issue}", ""]
    else:
        lines = [f"## {record.issue}", ""]

    meta = [f"**Status:** {record.status}", f"**Date:** {record.timestamp.strftime('%Y-%m-%d %H:%M')}"]
    if record.feature:
        meta.append(f"**Feature:** {record.feature}")
    if record.file:
        meta.append(f"**File:** `{record.file}`")
    if record.finding_id:
        meta.append(f"**Finding:** {record.finding_id}")
    if record.rating:
        meta.append(f"**Rating:** {record.rating}/5")
    lines.append(" | ".join(meta))
    if record.tags:
        lines.append(f"**Tags:** {', '.join(record.tags)}")
    lines.append("")
    if record.suggestion:
        lines.append(record.suggestion)
        lines.append("")
    lines.append("---")
    lines.append("")
    return lines


def export_suggestions(
    records: Sequence[Suggestion],
    output_path: Path,
    fmt: ExportFormat | str = ExportFormat.MARKDOWN,
) -> int:
    """Export in the requested format. Raises ValueError for unknown formats."""
    fmt = ExportFormat(fmt)
    if fmt == ExportFormat.JSON:
        count = export_json(records, output_path)
    else:
        count = export_markdown(records, output_path)
    logger.info("suggestions_exported", format=str(fmt), count=count, path=str(output_path))
    return count
