"""Tests for collection statistics."""

import pytest

from shared_types import SuggestionStatus
from suggestions.stats import SuggestionStats, summarize


class TestSummarize:
    def test_sample_collection(self, sample_suggestions):
        stats = summarize(sample_suggestions)
        assert stats.total == 3
        assert stats.by_status == {"success": 2, "error": 1}
        assert stats.rated == 3
        assert stats.average_rating == 4.0
        assert stats.tokens_used == 325
        assert stats.average_response_time == pytest.approx(783.33, abs=0.01)

    def test_empty_collection(self):
        assert summarize([]) == SuggestionStats()

    def test_unrated_records_excluded_from_average(self, make_suggestion):
        records = [
            make_suggestion(id="a", rating=2),
            make_suggestion(id="b"),
            make_suggestion(id="c", rating=5, status=SuggestionStatus.PENDING),
        ]
        stats = summarize(records)
        assert stats.rated == 2
        assert stats.average_rating == 3.5
        assert stats.by_status == {"success": 2, "pending": 1}
        assert stats.average_response_time is None
