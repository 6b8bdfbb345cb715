"""Shared test fixtures for suggestion-desk."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def raw_suggestions():
    """Stored wire-form records, as persisted by the panel."""
    return [
        {
            "id": "suggestion-1",
            "issue": "How to fix async/await syntax error?",
            "suggestion": "Use proper Promise handling with async/await syntax.",
            "timestamp": "2023-01-01T10:00:00Z",
            "status": "success",
            "rating": 5,
            "tags": ["javascript", "async", "promises"],
            "tokensUsed": 120,
            "responseTime": 800,
            "feature": "async-functions",
        },
        {
            "id": "suggestion-2",
            "issue": "CSS Grid layout not working in older browsers",
            "suggestion": "Consider using flexbox as a fallback for CSS Grid.",
            "timestamp": "2023-01-01T11:00:00Z",
            "status": "success",
            "rating": 4,
            "tags": ["css", "grid"],
            "tokensUsed": 95,
            "responseTime": 650,
            "feature": "cssGrid",
            "file": "C:\\work\\styles\\layout.css",
        },
        {
            "id": "suggestion-3",
            "issue": "Fetch API compatibility issues",
            "suggestion": "Use a polyfill for fetch in older browsers.",
            "timestamp": "2023-01-01T12:00:00Z",
            "status": "error",
            "rating": 3,
            "tags": ["javascript", "fetch"],
            "tokensUsed": 110,
            "responseTime": 900,
            "feature": "fetch_api",
            "file": "/workspace/src/network.ts",
            "findingId": "finding-42",
        },
    ]


@pytest.fixture
def sample_suggestions(raw_suggestions):
    """The same records decoded into Suggestion objects."""
    from suggestions.validation import parse_stored_suggestions

    return parse_stored_suggestions(raw_suggestions)


@pytest.fixture
def make_suggestion():
    """Factory for Suggestion records with sensible defaults."""
    from suggestions.models import Suggestion

    def _make(id="s1", issue="Issue text", suggestion="Fix text", **kwargs):
        kwargs.setdefault("timestamp", datetime(2024, 1, 1, 9, 30))
        return Suggestion(id=id, issue=issue, suggestion=suggestion, **kwargs)

    return _make
