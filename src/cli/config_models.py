"""Pydantic configuration models for suggestion-desk."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import ExportFormat

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class PathsConfig(BaseModel):
    """File paths configuration."""

    store_file: Path = Path("~/.suggestion-desk/suggestions.json")
    log_file: Path | None = None
    export_dir: Path = Path("~/.suggestion-desk/exports")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.store_file = self.store_file.expanduser()
        self.export_dir = self.export_dir.expanduser()
        if self.log_file is not None:
            self.log_file = self.log_file.expanduser()
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class SearchConfig(BaseModel):
    """Listing defaults."""

    max_results: int = Field(50, ge=1)
    preview_chars: int = Field(80, ge=10)


class ExportConfig(BaseModel):
    """Export defaults."""

    default_format: ExportFormat = ExportFormat.MARKDOWN


class DeskConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "DeskConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
