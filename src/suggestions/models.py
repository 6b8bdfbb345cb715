"""Data models for stored AI suggestions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shared_types import SuggestionStatus

RATING_MIN = 1
RATING_MAX = 5

# attribute name -> wire key for optional fields, in wire order
OPTIONAL_WIRE_KEYS = {
    "feature": "feature",
    "file": "file",
    "finding_id": "findingId",
    "conversation_id": "conversationId",
    "parent_id": "parentId",
    "tokens_used": "tokensUsed",
    "response_time": "responseTime",
    "rating": "rating",
}


def normalize_timestamp(value: object) -> datetime | None:
    """Coerce a stored timestamp to a datetime.

    Accepts datetime objects, ISO-8601 strings (a trailing ``Z`` is allowed)
    and epoch milliseconds. Returns None for anything that can't be parsed.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class Suggestion:
    id: str
    issue: str
    suggestion: str
    timestamp: datetime = field(default_factory=datetime.now)
    status: SuggestionStatus = SuggestionStatus.SUCCESS
    feature: str | None = None
    file: str | None = None
    finding_id: str | None = None
    conversation_id: str | None = None
    parent_id: str | None = None
    tokens_used: int | None = None
    response_time: float | None = None
    rating: int | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tags", tuple(self.tags or ()))

    @property
    def is_user_message(self) -> bool:
        return self.status == SuggestionStatus.USER

    def to_dict(self) -> dict:
        """Serialize to the persisted wire form. Unset optionals are omitted."""
        data = {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "issue": self.issue,
            "suggestion": self.suggestion,
            "status": str(self.status),
        }
        for attr, key in OPTIONAL_WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        if self.tags:
            data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Suggestion":
        """Decode a wire dict, raising SuggestionValidationError if malformed."""
        from .validation import decode_suggestion

        return decode_suggestion(data).unwrap()
