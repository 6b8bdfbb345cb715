"""Suggestion store: immutable snapshots of the collection and its filtered view.

Every operation returns a new SuggestionState. Mutations re-run the filter with
the active raw query so ``visible`` always equals
``filter_suggestions(suggestions, raw_query).visible``. Callers must serialize
mutations (one writer at a time) to keep ids unique.
"""

import dataclasses
from dataclasses import dataclass
from typing import Iterable

import structlog

from .exceptions import DuplicateIdError, InvalidRatingError, NotFoundError
from .models import RATING_MAX, RATING_MIN, Suggestion
from .search import filter_suggestions
from .validation import parse_stored_suggestions

logger = structlog.get_logger()


@dataclass(frozen=True)
class SuggestionState:
    suggestions: tuple[Suggestion, ...] = ()
    visible: tuple[Suggestion, ...] = ()
    query: str = ""
    raw_query: str = ""

    def get(self, suggestion_id: str) -> Suggestion | None:
        for s in self.suggestions:
            if s.id == suggestion_id:
                return s
        return None

    def __contains__(self, suggestion_id: object) -> bool:
        return any(s.id == suggestion_id for s in self.suggestions)

    def __len__(self) -> int:
        return len(self.suggestions)


def _with_suggestions(
    state: SuggestionState, suggestions: Iterable[Suggestion]
) -> SuggestionState:
    return apply_search(dataclasses.replace(state, suggestions=tuple(suggestions)), state.raw_query)


def initialize_state(raw_records: object) -> SuggestionState:
    """Build state from untrusted stored records. Malformed ones are dropped."""
    suggestions = tuple(parse_stored_suggestions(raw_records))
    return SuggestionState(suggestions=suggestions, visible=suggestions)


def apply_search(state: SuggestionState, raw_query: object) -> SuggestionState:
    """Set the active query and recompute the visible view."""
    result = filter_suggestions(state.suggestions, raw_query)
    return dataclasses.replace(
        state,
        visible=result.visible,
        query=result.query,
        raw_query=result.raw_query,
    )


def append_suggestion(state: SuggestionState, record: Suggestion) -> SuggestionState:
    """Add a record at the end of the collection.

    Raises:
        DuplicateIdError: a record with the same id is already stored
    """
    if record.id in state:
        raise DuplicateIdError(record.id)
    return _with_suggestions(state, (*state.suggestions, record))


def remove_suggestion(state: SuggestionState, suggestion_id: str) -> SuggestionState:
    """Remove a record by id. Unknown ids are a no-op."""
    if suggestion_id not in state:
        logger.debug("remove_missing_suggestion", id=suggestion_id)
    return _with_suggestions(state, (s for s in state.suggestions if s.id != suggestion_id))


def clear_suggestions(state: SuggestionState) -> SuggestionState:
    """Drop every record and reset the search."""
    return SuggestionState()


def update_rating(state: SuggestionState, suggestion_id: str, rating: int) -> SuggestionState:
    """Set a record's rating (1-5), keeping its position.

    Raises:
        InvalidRatingError: rating is not an integer from 1 to 5
        NotFoundError: no record has this id
    """
    if isinstance(rating, bool) or not isinstance(rating, int) or not RATING_MIN <= rating <= RATING_MAX:
        raise InvalidRatingError(rating)
    if suggestion_id not in state:
        raise NotFoundError(suggestion_id)
    return _with_suggestions(
        state,
        (
            dataclasses.replace(s, rating=rating) if s.id == suggestion_id else s
            for s in state.suggestions
        ),
    )
