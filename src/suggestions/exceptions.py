"""Typed failures for suggestion store operations."""


class SuggestionError(Exception):
    """Base exception for suggestion errors."""
    pass


class SuggestionValidationError(SuggestionError):
    """Candidate record rejected at the persistence boundary."""

    def __init__(self, message: str, candidate: object = None):
        super().__init__(message)
        self.candidate = candidate


class NotFoundError(SuggestionError):
    """Raised when a by-id mutation targets a missing suggestion."""

    def __init__(self, suggestion_id: str):
        super().__init__(f"Suggestion not found: {suggestion_id}")
        self.suggestion_id = suggestion_id


class DuplicateIdError(SuggestionError):
    """Raised when appending a suggestion whose id is already stored."""

    def __init__(self, suggestion_id: str):
        super().__init__(f"Suggestion id already exists: {suggestion_id}")
        self.suggestion_id = suggestion_id


class InvalidRatingError(SuggestionError, ValueError):
    """Raised when a rating falls outside 1-5."""

    def __init__(self, rating: object):
        super().__init__(f"Rating must be an integer from 1 to 5, got {rating!r}")
        self.rating = rating
