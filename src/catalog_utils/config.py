"""Configuration helpers for the resource catalog tooling."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

ClassifierName = Literal["auto", "registry", "static", "none"]


class AppConfig(BaseModel):
    """Application level configuration."""

    classifier: ClassifierName = Field(default="auto")
    file_types_path: Optional[Path] = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if value.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {sorted(valid_levels)}; got {value!r}")
        return value.upper()


def load_config(path: Optional[Path]) -> AppConfig:
    """Load configuration from a YAML file; missing files yield defaults."""

    data: Dict[str, Any] = {}
    if path is not None and path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
