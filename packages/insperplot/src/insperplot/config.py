"""Pydantic settings for insperplot -- YAML files + environment variables.

``InsperSettings`` carries the session's font state (``fonts_loaded``) and
the theme/export defaults. It is immutable; functions that change state
return an updated copy instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from insperplot.colors import INSPER_PALETTES
from insperplot.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("insperplot.yaml")


class ThemeConfig(BaseModel):
    """Default arguments for theme_insper()."""

    model_config = {"frozen": True, "extra": "forbid"}

    base_size: float = Field(default=12, gt=0)
    font_title: str = "EB Garamond"
    font_text: str = "Barlow"
    grid: bool = True
    border: Literal["none", "half", "closed"] = "none"


class ExportConfig(BaseModel):
    """Default sizing for save_insper_plot()."""

    model_config = {"frozen": True, "extra": "forbid"}

    height: float = Field(default=4.3, gt=0)
    aspect: float = Field(default=1.618, gt=0)
    dpi: int = Field(default=300, ge=72, le=1200)
    px_per_inch: int = Field(default=96, gt=0)


class InsperSettings(BaseSettings):
    """Session settings, loaded from init kwargs, env vars or YAML."""

    model_config = SettingsConfigDict(
        env_prefix="INSPERPLOT_",
        env_nested_delimiter="__",
        frozen=True,
        extra="forbid",
    )

    fonts_loaded: bool = False
    default_palette: str = "categorical"
    theme: ThemeConfig = ThemeConfig()
    export: ExportConfig = ExportConfig()

    @field_validator("default_palette")
    @classmethod
    def validate_palette(cls, v: str) -> str:
        if v not in INSPER_PALETTES:
            raise ValueError(
                f"Unknown palette '{v}'. Available: {', '.join(sorted(INSPER_PALETTES))}"
            )
        return v

    @classmethod
    def from_yaml(cls, config_path: Path = DEFAULT_CONFIG_PATH, **overrides) -> InsperSettings:
        """Load from YAML, merge keyword overrides (highest priority)."""
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            data = {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        data = _deep_merge(data, {k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**data)
        except Exception as e:
            raise ConfigError(f"Configuration error: {e}") from e


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def resolve_settings(settings: InsperSettings | None) -> InsperSettings:
    """Settings passed by the caller, or a fresh default instance."""
    return settings if settings is not None else InsperSettings()
