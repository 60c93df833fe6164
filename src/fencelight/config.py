"""Filter configuration: settings schema and environment/CLI loader"""

import logging
import os
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from fencelight.core.highlight import DEFAULT_ALIASES, DEFAULT_LANGUAGES


ENV_PREFIX = "FENCELIGHT_"


class Settings(BaseModel):
    languages: list[str]      = Field(default_factory=lambda: list(DEFAULT_LANGUAGES), description="Language ids to register")
    aliases:   dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ALIASES),   description="Language id -> Pygments lexer name")
    log_level: str            = Field(default="WARNING", description="Diagnostics level written to stderr")

    @field_validator("languages", mode="before")
    @classmethod
    def split_languages(cls, v: Any) -> Any:
        """Accept 'python,rust' as well as a list."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("aliases", mode="before")
    @classmethod
    def split_aliases(cls, v: Any) -> Any:
        """Accept 'markup=html,svg=xml' as well as a mapping."""
        if isinstance(v, str):
            pairs = [p.strip() for p in v.split(",") if p.strip()]
            if any("=" not in p for p in pairs):
                raise ValueError(f"expected id=lexer pairs, got '{v}'")
            return dict(p.split("=", 1) for p in pairs)
        return v

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from defaults, then FENCELIGHT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e.errors()[0]['loc'][0]}: {e.errors()[0]['msg']}") from e
