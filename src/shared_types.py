"""Shared enums and types for suggestion-desk."""

from enum import StrEnum


class SuggestionStatus(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    PENDING = "pending"
    USER = "user"


class ExportFormat(StrEnum):
    MARKDOWN = "markdown"
    JSON = "json"
