"""JSON file persistence for the suggestion collection."""

import json
from pathlib import Path
from typing import Sequence

import structlog

from .models import Suggestion

logger = structlog.get_logger()


class SuggestionFileStore:
    """Reads and writes the raw suggestion list as a JSON array."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def load(self) -> list:
        """Return the stored raw records. Missing or corrupt files yield []."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("suggestion_store_read_failed", path=str(self.path), error=str(e))
            return []
        if not isinstance(data, list):
            logger.warning("suggestion_store_not_a_list", path=str(self.path))
            return []
        return data

    def save(self, records: Sequence[Suggestion]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [r.to_dict() for r in records]
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except Exception as e:
            logger.error("suggestion_store_write_failed", path=str(self.path), error=str(e))
            tmp_path.unlink(missing_ok=True)
            raise
