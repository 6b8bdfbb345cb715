"""Keyword filter over stored suggestions.

Matching is case-insensitive, literal substring containment with AND
semantics across terms: a record is kept when every term appears in at least
one of its haystack strings. Results keep the collection's original order.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from .models import Suggestion

_CAMEL_BOUNDARY = re.compile(r"(?<=.)([A-Z])")
_PATH_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class SearchResult:
    visible: tuple[Suggestion, ...]
    query: str
    raw_query: str


def normalize_query(raw: object) -> str:
    """Trim, lower-case and collapse whitespace. Anything but a string is ''."""
    if not isinstance(raw, str):
        return ""
    return " ".join(raw.lower().split())


def search_terms(raw: object) -> list[str]:
    normalized = normalize_query(raw)
    return normalized.split(" ") if normalized else []


def file_basename(path: str) -> str:
    """Last path segment, splitting on both / and \\."""
    return _PATH_SEPARATORS.split(path)[-1]


def humanize_feature(feature: str) -> str:
    """'asyncFunctions' -> 'async Functions', 'css-grid' -> 'css grid'."""
    spaced = _CAMEL_BOUNDARY.sub(r" \1", feature)
    return spaced.replace("-", " ").replace("_", " ")


def build_haystacks(record: Suggestion) -> list[str]:
    """Lower-cased match targets for a record, in a fixed field order."""
    values: list[object] = [
        record.issue,
        record.suggestion,
        record.feature,
        record.file,
        record.finding_id,
        record.conversation_id,
        record.parent_id,
        record.status,
        record.rating,
    ]
    values.extend(record.tags or [])
    values.extend([record.tokens_used, record.response_time])
    if record.file:
        values.append(file_basename(record.file))
    if record.feature:
        values.append(humanize_feature(record.feature))

    haystacks = []
    for value in values:
        if value is None:
            continue
        text = str(value).lower()
        if text:
            haystacks.append(text)
    return haystacks


def matches(record: Suggestion, terms: Iterable[str]) -> bool:
    haystacks = build_haystacks(record)
    return all(any(term in hay for hay in haystacks) for term in terms)


def filter_suggestions(records: Sequence[Suggestion], raw_query: object) -> SearchResult:
    """Filter records by a raw query string.

    Args:
        records: Full collection, in insertion order
        raw_query: Query as typed; non-string or blank means no filter

    Returns:
        SearchResult with the visible subsequence, the normalized query and
        the raw query kept for redisplay ('' when raw_query isn't a string)
    """
    raw = raw_query if isinstance(raw_query, str) else ""
    terms = search_terms(raw)
    if not terms:
        return SearchResult(visible=tuple(records), query="", raw_query=raw)

    visible = tuple(r for r in records if matches(r, terms))
    return SearchResult(visible=visible, query=" ".join(terms), raw_query=raw)
