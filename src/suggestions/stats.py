"""Aggregate figures over a suggestion collection."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from .models import Suggestion


@dataclass
class SuggestionStats:
    total: int = 0
    by_status: dict[str, int] = field(default_factory=dict)
    rated: int = 0
    average_rating: float | None = None
    tokens_used: int = 0
    average_response_time: float | None = None


def summarize(records: Sequence[Suggestion]) -> SuggestionStats:
    ratings = [r.rating for r in records if r.rating]
    times = [r.response_time for r in records if r.response_time is not None]
    return SuggestionStats(
        total=len(records),
        by_status=dict(Counter(str(r.status) for r in records)),
        rated=len(ratings),
        average_rating=round(sum(ratings) / len(ratings), 1) if ratings else None,
        tokens_used=sum(r.tokens_used or 0 for r in records),
        average_response_time=sum(times) / len(times) if times else None,
    )
