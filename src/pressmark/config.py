"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:            str = "pressmark"
    output_dir:          str = Field(default="dist",       description="Directory for rendered HTML, print JSON and post payload")
    inline_preset:       str = Field(default="commonmark", description="MarkdownIt preset used for inline markup")
    callout_marker:      str = Field(default="tl;dr",      description="Text that opens a callout run (case-insensitive substring)")
    callout_label:       str = Field(default="TL;DR",      description="Label printed on the callout box")
    track_links:         bool = Field(default=True,        description="Append campaign tracking params to markup links")
    utm_source:          str = "guide"
    utm_medium:          str = "pdf"
    section_break_level: int = Field(default=1, ge=0, le=3, description="Heading level that opens a new print section; 0 = one section")
    hoist_callouts:      bool = Field(default=False,       description="Print callouts ahead of other content")
    cover_logo:          Optional[str] = Field(default=None, description="Cover page logo URL")
    header_logo:         Optional[str] = Field(default=None, description="Content page header logo URL")

    @field_validator("callout_marker")
    @classmethod
    def _marker_not_blank(cls, v: str) -> str:
        # a blank marker would match every line
        v = v.strip()
        if not v:
            raise ValueError("callout_marker must not be blank")
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then PRESSMARK_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"PRESSMARK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
