"""Tests for decoding stored records at the persistence boundary."""

from datetime import datetime

from shared_types import SuggestionStatus
from suggestions.models import Suggestion
from suggestions.validation import decode_suggestion, parse_stored_suggestions


def _raw(**overrides):
    record = {
        "id": "valid-1",
        "issue": "Test issue",
        "suggestion": "Test suggestion",
        "status": "success",
        "timestamp": "2023-01-01T12:00:00Z",
    }
    record.update(overrides)
    return record


class TestDecodeSuggestion:
    def test_valid_record(self):
        result = decode_suggestion(_raw(findingId="f-9", tags=["a"]))
        assert result.ok
        s = result.unwrap()
        assert isinstance(s, Suggestion)
        assert s.finding_id == "f-9"
        assert s.tags == ("a",)
        assert isinstance(s.timestamp, datetime)

    def test_non_mapping_rejected(self):
        for candidate in (None, "string", 123, ["id"]):
            result = decode_suggestion(candidate)
            assert not result.ok
            assert result.value is None

    def test_error_names_bad_fields(self):
        result = decode_suggestion(_raw(id="", issue=""))
        assert not result.ok
        message = str(result.error)
        assert "id" in message
        assert "issue" in message
        assert result.error.candidate["id"] == ""

    def test_rating_out_of_range_rejected(self):
        assert not decode_suggestion(_raw(rating=6)).ok
        assert not decode_suggestion(_raw(rating=0)).ok

    def test_wrong_typed_numbers_rejected(self):
        assert not decode_suggestion(_raw(rating="5")).ok
        assert not decode_suggestion(_raw(rating=True)).ok
        assert not decode_suggestion(_raw(rating=4.0)).ok
        assert not decode_suggestion(_raw(tokensUsed="12")).ok
        assert not decode_suggestion(_raw(responseTime="800")).ok

    def test_numeric_fields_kept_as_stored(self):
        s = decode_suggestion(_raw(rating=5, tokensUsed=12, responseTime=800)).unwrap()
        assert s.rating == 5
        assert s.tokens_used == 12
        assert s.response_time == 800

    def test_unknown_status_rejected(self):
        assert not decode_suggestion(_raw(status="archived")).ok

    def test_missing_status_defaults_to_success(self):
        raw = _raw()
        del raw["status"]
        assert decode_suggestion(raw).unwrap().status == SuggestionStatus.SUCCESS

    def test_unknown_keys_ignored(self):
        assert decode_suggestion(_raw(extra="ignored")).ok

    def test_null_tags_become_empty(self):
        assert decode_suggestion(_raw(tags=None)).unwrap().tags == ()


class TestParseStoredSuggestions:
    def test_non_list_input(self):
        assert parse_stored_suggestions(None) == []
        assert parse_stored_suggestions("string") == []
        assert parse_stored_suggestions(123) == []
        assert parse_stored_suggestions({}) == []

    def test_filters_invalid_entries(self):
        raw = [
            None,
            "string",
            123,
            _raw(id="valid-1"),
            _raw(id=""),
            {"status": "success"},
            _raw(id="valid-2", timestamp="2023-01-01"),
        ]
        result = parse_stored_suggestions(raw)
        assert [s.id for s in result] == ["valid-1", "valid-2"]

    def test_drops_empty_id(self):
        raw = [_raw(id="", issue="x", suggestion="y", timestamp=datetime.now())]
        assert parse_stored_suggestions(raw) == []

    def test_drops_missing_or_bad_timestamp(self):
        no_ts = _raw(id="a")
        del no_ts["timestamp"]
        bad_ts = _raw(id="b", timestamp="yesterday-ish")
        assert parse_stored_suggestions([no_ts, bad_ts]) == []

    def test_drops_empty_suggestion_unless_user_message(self):
        raw = [
            _raw(id="assistant", suggestion=""),
            _raw(id="user-1", suggestion="", status="user"),
        ]
        result = parse_stored_suggestions(raw)
        assert [s.id for s in result] == ["user-1"]
        assert result[0].status == SuggestionStatus.USER

    def test_keeps_first_of_duplicate_ids(self):
        raw = [_raw(id="dup", issue="first"), _raw(id="dup", issue="second")]
        result = parse_stored_suggestions(raw)
        assert len(result) == 1
        assert result[0].issue == "first"

    def test_drops_wrong_typed_numbers(self):
        raw = [
            _raw(id="a", rating="5"),
            _raw(id="b", tokensUsed="12"),
            _raw(id="c", rating=True),
            _raw(id="d", rating=2),
        ]
        assert [s.id for s in parse_stored_suggestions(raw)] == ["d"]

    def test_preserves_order(self, raw_suggestions):
        result = parse_stored_suggestions(raw_suggestions)
        assert [s.id for s in result] == ["suggestion-1", "suggestion-2", "suggestion-3"]

    def test_accepts_suggestion_objects(self, make_suggestion):
        s = make_suggestion(id="obj-1")
        assert parse_stored_suggestions([s]) == [s]
