"""Configuration dataclasses and loading helpers for progress reporting."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from tick_eta.reporting import DEFAULT_TEMPLATE

ENV_PREFIX = "TICK_ETA_"


def _parse_optional_positive_int(value: Any, default: Optional[int]) -> Optional[int]:
    """Parse a positive integer with fallback to default."""
    if value is None:
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def _parse_log_level(value: Any, default: int) -> int:
    """Accept numeric levels or level names such as ``"debug"``."""
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default


def _parse_path(value: Any) -> Optional[Path]:
    if value is None:
        return None
    text = str(value).strip()
    return Path(text) if text else None


@dataclass(frozen=True)
class ReporterSettings:
    """Settings dictating how progress lines are rendered and logged."""

    template: str = DEFAULT_TEMPLATE
    every: Optional[int] = None
    log_level: int = logging.INFO
    log_file: Optional[Path] = None


def _parse_reporter_settings(raw: Mapping[str, Any]) -> ReporterSettings:
    default = ReporterSettings()
    template = raw.get("template")
    return ReporterSettings(
        template=str(template) if template else default.template,
        every=_parse_optional_positive_int(raw.get("every"), default.every),
        log_level=_parse_log_level(raw.get("log_level"), default.log_level),
        log_file=_parse_path(raw.get("log_file")),
    )


def _load_env_settings(env: Mapping[str, str]) -> ReporterSettings:
    """Fallback configuration derived from environment variables."""
    return _parse_reporter_settings({
        "template": env.get(f"{ENV_PREFIX}TEMPLATE"),
        "every": env.get(f"{ENV_PREFIX}EVERY"),
        "log_level": env.get(f"{ENV_PREFIX}LOG_LEVEL"),
        "log_file": env.get(f"{ENV_PREFIX}LOG_FILE"),
    })


def load_settings(
    config_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> ReporterSettings:
    """Load reporter settings from a JSON file or environment defaults."""
    source_env = os.environ if env is None else env

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
            if not isinstance(data, Mapping):
                raise ValueError(f"Configuration in {path} must be a JSON object")
            return _parse_reporter_settings(data)

    return _load_env_settings(source_env)


__all__ = ["ENV_PREFIX", "ReporterSettings", "load_settings"]
