"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    app_name:          str = "knitpost"
    output_dir:        str = Field(default="_posts", description="Directory for converted articles")
    tags_dir:          Optional[str] = Field(default=None, description="Tag index root; default is <src>/../tags")
    host_extensions:   list[str] = Field(default=[".cpp"], description="Suffixes converted through the chunk classifier")
    markup_extensions: list[str] = Field(default=[".Rmd", ".md"], description="Suffixes already in markup form")
    host_language:     str = Field(default="cpp", description="Highlight language for host code chunks")
    embedded_language: str = Field(default="r",   description="Highlight language for embedded snippets")
    default_layout:    str = Field(default="post", description="Layout added when front matter has none")
    fence_style:       str = Field(default="fence", pattern="^(fence|liquid)$", description="fence or liquid")
    parser_config:     str = Field(default="gfm-like", description="MarkdownIt preset used by liquid rendering")
    log_level:         str = Field(default="WARNING", description="Root logging level")

    @field_validator("host_extensions", "markup_extensions", mode="before")
    @classmethod
    def _split_extensions(cls, v: Any) -> Any:
        """Accept 'a,b' strings from env vars as lists."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def extensions(self) -> set[str]:
        return set(self.host_extensions) | set(self.markup_extensions)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then KNITPOST_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"KNITPOST_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
