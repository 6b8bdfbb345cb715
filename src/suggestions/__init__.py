"""AI suggestion store: ordered collection plus keyword-filtered view."""

from .board import SuggestionBoard
from .exceptions import (
    DuplicateIdError,
    InvalidRatingError,
    NotFoundError,
    SuggestionError,
    SuggestionValidationError,
)
from .models import Suggestion
from .search import SearchResult, filter_suggestions
from .state import (
    SuggestionState,
    append_suggestion,
    apply_search,
    clear_suggestions,
    initialize_state,
    remove_suggestion,
    update_rating,
)
from .storage import SuggestionFileStore

__all__ = [
    "Suggestion",
    "SuggestionState",
    "SearchResult",
    "SuggestionBoard",
    "SuggestionFileStore",
    "filter_suggestions",
    "initialize_state",
    "apply_search",
    "append_suggestion",
    "remove_suggestion",
    "clear_suggestions",
    "update_rating",
    "SuggestionError",
    "SuggestionValidationError",
    "NotFoundError",
    "DuplicateIdError",
    "InvalidRatingError",
]
