"""Persistence boundary: decode untrusted stored records into Suggestions.

Each candidate is decoded on its own into a DecodeResult. Bulk loading keeps
the successes and drops the rest, so one corrupt entry never fails a load.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from shared_types import SuggestionStatus

from .exceptions import SuggestionValidationError
from .models import RATING_MAX, RATING_MIN, Suggestion, normalize_timestamp

logger = structlog.get_logger()


class StoredSuggestion(BaseModel):
    """Wire schema for a persisted suggestion (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    issue: str = Field(..., min_length=1)
    suggestion: str = ""
    timestamp: datetime
    status: SuggestionStatus = SuggestionStatus.SUCCESS
    feature: Optional[str] = None
    file: Optional[str] = None
    finding_id: Optional[str] = Field(None, alias="findingId")
    conversation_id: Optional[str] = Field(None, alias="conversationId")
    parent_id: Optional[str] = Field(None, alias="parentId")
    tokens_used: Optional[int] = Field(None, alias="tokensUsed", strict=True)
    response_time: Optional[float] = Field(None, alias="responseTime", strict=True)
    rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX, strict=True)
    tags: Optional[list[str]] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_timestamp(cls, v: object) -> datetime:
        parsed = normalize_timestamp(v)
        if parsed is None:
            raise ValueError(f"Unparseable timestamp: {v!r}")
        return parsed

    @model_validator(mode="after")
    def require_suggestion_body(self):
        """Only user-authored follow-ups may carry an empty suggestion."""
        if not self.suggestion and self.status != SuggestionStatus.USER:
            raise ValueError("suggestion must be non-empty unless status is 'user'")
        return self

    def to_suggestion(self) -> Suggestion:
        return Suggestion(
            id=self.id,
            issue=self.issue,
            suggestion=self.suggestion,
            timestamp=self.timestamp,
            status=self.status,
            feature=self.feature,
            file=self.file,
            finding_id=self.finding_id,
            conversation_id=self.conversation_id,
            parent_id=self.parent_id,
            tokens_used=self.tokens_used,
            response_time=self.response_time,
            rating=self.rating,
            tags=tuple(self.tags or ()),
        )


@dataclass
class DecodeResult:
    """Either a decoded Suggestion or the reason the candidate was rejected."""

    value: Suggestion | None = None
    error: SuggestionValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Suggestion:
        if self.error is not None:
            raise self.error
        return self.value


def decode_suggestion(candidate: object) -> DecodeResult:
    """Validate one stored candidate."""
    if isinstance(candidate, Suggestion):
        candidate = candidate.to_dict()
    if not isinstance(candidate, dict):
        return DecodeResult(
            error=SuggestionValidationError(
                f"Expected a mapping, got {type(candidate).__name__}", candidate
            )
        )
    try:
        record = StoredSuggestion.model_validate(candidate)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) or "record" for err in e.errors()})
        return DecodeResult(
            error=SuggestionValidationError(f"Invalid fields: {', '.join(fields)}", candidate)
        )
    return DecodeResult(value=record.to_suggestion())


def parse_stored_suggestions(raw: object) -> list[Suggestion]:
    """Decode a stored collection, keeping valid records in their original order.

    Non-list input yields an empty list. Records repeating an id that was
    already accepted are dropped.
    """
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            logger.warning("stored_suggestions_not_a_list", type=type(raw).__name__)
        return []

    accepted: list[Suggestion] = []
    seen: set[str] = set()
    dropped = 0
    for index, candidate in enumerate(raw):
        result = decode_suggestion(candidate)
        if not result.ok:
            dropped += 1
            logger.debug("stored_suggestion_dropped", index=index, reason=str(result.error))
            continue
        if result.value.id in seen:
            dropped += 1
            logger.debug("stored_suggestion_duplicate", index=index, id=result.value.id)
            continue
        seen.add(result.value.id)
        accepted.append(result.value)

    if dropped:
        logger.info("stored_suggestions_parsed", accepted=len(accepted), dropped=dropped)
    return accepted
