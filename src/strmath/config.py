from __future__ import annotations

"""Settings and batch-input schema models."""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .distance import Recurrence

Method = Literal["rolling", "matrix"]


class DistanceSettings(BaseModel):
    """How distances are computed by the CLI and batch runner."""

    method: Method = "rolling"
    recurrence: Recurrence = Recurrence.LEVENSHTEIN
    handle_trivial: bool = True
    log_level: str = "WARNING"

    @field_validator("recurrence", mode="before")
    @classmethod
    def _parse_recurrence(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Recurrence):
            return Recurrence.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @model_validator(mode="after")
    def _rolling_is_global_only(self) -> "DistanceSettings":
        if self.method == "rolling" and self.recurrence is not Recurrence.LEVENSHTEIN:
            raise ValueError(
                f"recurrence '{self.recurrence.value}' requires method 'matrix'"
            )
        return self


class PairModel(BaseModel):
    """One row of a batch input file."""

    id: Optional[str] = None
    source: str
    target: str


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings file cannot be located."""


def load_settings(path: Optional[Path] = None) -> DistanceSettings:
    """Load settings from a YAML file, or return defaults when *path* is None."""

    if path is None:
        return DistanceSettings()
    if not path.exists():
        raise SettingsNotFoundError(f"Settings file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return DistanceSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {path}: {exc}") from exc
