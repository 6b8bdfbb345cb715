"""Follow-up threads and finding lookups over the suggestion collection."""

from datetime import datetime
from typing import Sequence

from shared_types import SuggestionStatus

from .exceptions import NotFoundError
from .models import Suggestion
from .state import SuggestionState, append_suggestion


def make_follow_up(
    parent: Suggestion,
    message: str,
    *,
    id: str,
    timestamp: datetime | None = None,
) -> Suggestion:
    """Build the user-authored record for a follow-up question on ``parent``."""
    message = (message or "").strip()
    if not message:
        raise ValueError("Follow-up message must not be empty")
    return Suggestion(
        id=id,
        issue=message,
        suggestion="",
        timestamp=timestamp or datetime.now(),
        status=SuggestionStatus.USER,
        feature=parent.feature,
        file=parent.file,
        finding_id=parent.finding_id,
        conversation_id=parent.conversation_id or parent.id,
        parent_id=parent.id,
    )


def follow_up(
    state: SuggestionState,
    parent_id: str,
    message: str,
    *,
    id: str,
    timestamp: datetime | None = None,
) -> SuggestionState:
    parent = state.get(parent_id)
    if parent is None:
        raise NotFoundError(parent_id)
    return append_suggestion(state, make_follow_up(parent, message, id=id, timestamp=timestamp))


def conversation_thread(records: Sequence[Suggestion], conversation_id: str) -> list[Suggestion]:
    """Root record plus every record threaded under it, in insertion order."""
    return [
        r for r in records if r.id == conversation_id or r.conversation_id == conversation_id
    ]


def group_conversations(records: Sequence[Suggestion]) -> dict[str, list[Suggestion]]:
    """Group records by thread, keyed by conversation id in order of first appearance."""
    threads: dict[str, list[Suggestion]] = {}
    for r in records:
        key = r.conversation_id or r.id
        threads.setdefault(key, []).append(r)
    return threads


def suggestions_for_finding(records: Sequence[Suggestion], finding_id: str) -> list[Suggestion]:
    return [r for r in records if r.finding_id == finding_id]


def has_suggestion_for_finding(records: Sequence[Suggestion], finding_id: str) -> bool:
    return any(r.finding_id == finding_id for r in records)
