"""SuggestionBoard, the single writer that threads state through store operations."""

import uuid
from datetime import datetime
from pathlib import Path

import structlog

from observability import UsageTracker, log_usage_summary
from shared_types import ExportFormat, SuggestionStatus

from .export import export_suggestions
from .models import Suggestion
from .state import (
    SuggestionState,
    append_suggestion,
    apply_search,
    clear_suggestions,
    initialize_state,
    remove_suggestion,
    update_rating,
)
from .stats import SuggestionStats, summarize
from .storage import SuggestionFileStore
from .threads import conversation_thread, follow_up, suggestions_for_finding
from .validation import decode_suggestion

logger = structlog.get_logger()


def new_suggestion_id() -> str:
    return uuid.uuid4().hex[:16]


class SuggestionBoard:
    """Holds the current SuggestionState and persists after every mutation."""

    def __init__(self, store: SuggestionFileStore | None = None, usage: UsageTracker | None = None):
        self.store = store
        self.usage = usage or UsageTracker()
        self.state = SuggestionState()

    @property
    def suggestions(self) -> tuple[Suggestion, ...]:
        return self.state.suggestions

    @property
    def visible(self) -> tuple[Suggestion, ...]:
        return self.state.visible

    def load(self) -> SuggestionState:
        raw = self.store.load() if self.store else []
        self.state = initialize_state(raw)
        logger.info("suggestions_loaded", count=len(self.state), candidates=len(raw))
        return self.state

    def search(self, query: object) -> tuple[Suggestion, ...]:
        self.state = apply_search(self.state, query)
        logger.debug("suggestions_filtered", query=self.state.query, visible=len(self.state.visible))
        return self.state.visible

    def add(
        self,
        issue: str,
        suggestion: str,
        *,
        status: SuggestionStatus = SuggestionStatus.SUCCESS,
        feature: str | None = None,
        file: str | None = None,
        finding_id: str | None = None,
        tags: list[str] | None = None,
        tokens_used: int | None = None,
        response_time: float | None = None,
        id: str | None = None,
        timestamp: datetime | None = None,
    ) -> Suggestion:
        """Store a newly obtained suggestion and count it as an AI request."""
        record = Suggestion(
            id=id or new_suggestion_id(),
            issue=issue,
            suggestion=suggestion,
            timestamp=timestamp or datetime.now(),
            status=SuggestionStatus(status),
            feature=feature,
            file=file,
            finding_id=finding_id,
            tokens_used=tokens_used,
            response_time=response_time,
            tags=tuple(tags or ()),
        )
        # same rules as loading, so every stored record survives a reload
        decode_suggestion(record).unwrap()
        self._commit(append_suggestion(self.state, record))
        if record.status == SuggestionStatus.SUCCESS:
            self.usage.record_success(tokens_used, response_time)
        elif record.status == SuggestionStatus.ERROR:
            self.usage.record_failure(suggestion)
        if record.status in (SuggestionStatus.SUCCESS, SuggestionStatus.ERROR):
            log_usage_summary(self.usage)
        logger.info("suggestion_added", id=record.id, status=str(record.status))
        return record

    def remove(self, suggestion_id: str) -> None:
        self._commit(remove_suggestion(self.state, suggestion_id))
        logger.info("suggestion_removed", id=suggestion_id)

    def clear(self) -> int:
        count = len(self.state)
        self._commit(clear_suggestions(self.state))
        logger.info("suggestions_cleared", count=count)
        return count

    def rate(self, suggestion_id: str, rating: int) -> Suggestion:
        self._commit(update_rating(self.state, suggestion_id, rating))
        logger.info("suggestion_rated", id=suggestion_id, rating=rating)
        return self.state.get(suggestion_id)

    def follow_up(self, parent_id: str, message: str) -> Suggestion:
        message_id = new_suggestion_id()
        self._commit(follow_up(self.state, parent_id, message, id=message_id))
        logger.info("follow_up_added", id=message_id, parent_id=parent_id)
        return self.state.get(message_id)

    def thread(self, conversation_id: str) -> list[Suggestion]:
        return conversation_thread(self.state.suggestions, conversation_id)

    def for_finding(self, finding_id: str) -> list[Suggestion]:
        return suggestions_for_finding(self.state.suggestions, finding_id)

    def stats(self) -> SuggestionStats:
        return summarize(self.state.suggestions)

    def export(
        self,
        output_path: Path,
        fmt: ExportFormat | str = ExportFormat.MARKDOWN,
        conversation_id: str | None = None,
    ) -> int:
        """Export the visible view, or one conversation thread when given."""
        records = self.thread(conversation_id) if conversation_id else list(self.state.visible)
        return export_suggestions(records, output_path, fmt)

    def _commit(self, state: SuggestionState) -> None:
        self.state = state
        if self.store:
            self.store.save(state.suggestions)
