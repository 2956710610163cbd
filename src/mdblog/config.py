"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "mdblog"
    site_url:      str = Field(default="https://example.com", description="Absolute site URL used in structured data")
    author_name:   str = Field(default="Anonymous",  description="Author name for BlogPosting markup")
    output_dir:    str = Field(default="dist",       description="Directory for rendered HTML + JSON files")
    parser_config: str = Field(default="gfm-like",   description="MarkdownIt parser preset name")
    toc_max_level: int = Field(default=3, ge=1, le=3, description="Deepest heading level listed in the TOC")
    root_margin:   str = Field(default="-20% 0px -80% 0px", description="Observer root margin for active tracking")
    threshold:     float = Field(default=0.1, ge=0.0, le=1.0, description="Observer intersection threshold")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
