"""Configuration file support for the link checker."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .models import DEFAULT_BRANCHES
from .remote import DEFAULT_REMOTE_NAME

CONFIG_FILENAME = ".mdlinks.yaml"


class CheckerConfig(BaseModel):
    """Options read from ``.mdlinks.yaml`` and the command line."""

    remote: str | None = None
    remote_name: str = DEFAULT_REMOTE_NAME
    branches: list[str] = Field(default_factory=lambda: list(DEFAULT_BRANCHES))
    exclude: list[str] = Field(default_factory=list)
    jobs: int = Field(default=1, ge=1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("branches")
    @classmethod
    def _require_branches(cls, value: list[str]) -> list[str]:
        cleaned = [item.strip() for item in value if item.strip()]
        if not cleaned:
            raise ValueError("at least one branch name is required")
        return cleaned


def load_config(path: Path | str, required: bool = False) -> CheckerConfig:
    """Load a configuration file.

    Parameters
    ----------
    path
        Path to the YAML file.
    required
        Raise :class:`ConfigError` instead of returning defaults when the file
        does not exist.

    Returns
    -------
    CheckerConfig
        Parsed configuration. Defaults are returned when the file does not
        exist or is empty.
    """

    path = Path(path)
    try:
        present = path.exists()
    except OSError as exc:
        raise ConfigError(f"Unable to access configuration {path}: {exc}") from exc
    if not present:
        if required:
            raise ConfigError(f"Configuration file not found: {path}")
        return CheckerConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Unable to read configuration {path}: {exc}") from exc
    if data is None:
        return CheckerConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration {path} must contain a mapping at the top level"
        )
    try:
        return CheckerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration {path}: {exc}") from exc


def apply_overrides(config: CheckerConfig, **overrides: Any) -> CheckerConfig:
    """Return a copy of ``config`` with the non-``None`` overrides applied."""

    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return config
    try:
        return CheckerConfig.model_validate({**config.model_dump(), **update})
    except ValidationError as exc:
        raise ConfigError(f"Invalid option: {exc}") from exc


__all__ = ["CONFIG_FILENAME", "CheckerConfig", "apply_overrides", "load_config"]
