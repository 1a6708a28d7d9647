from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .log import get_logger
from .utils import coerce_orientation

logger = get_logger(__name__)

ENV_GHOSTSCRIPT = "EPS2PDF_GHOSTSCRIPT"
ENV_ORIENTATION = "EPS2PDF_ORIENTATION"
ENV_LOG_LEVEL = "EPS2PDF_LOG_LEVEL"


@dataclass
class Settings:
    """Defaults applied when the caller does not pass an explicit value."""

    ghostscript_path: Optional[str] = None
    orientation: int = 0
    log_level: str = "INFO"


def _read_config_file(path: str) -> dict:
    if not os.path.exists(path):
        logger.warning("Config file not found at %s, using defaults", path)
        return {}
    with open(path, "r", encoding="utf-8") as config_file:
        try:
            data = json.load(config_file) or {}
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a JSON object")
    return data


def load_settings(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from an optional JSON file, then environment overrides."""
    env = os.environ if environ is None else environ
    data = _read_config_file(path) if path else {}

    settings = Settings(
        ghostscript_path=data.get("ghostscript_path") or None,
        orientation=coerce_orientation(data.get("orientation", 0)),
        log_level=str(data.get("log_level", "INFO")).upper(),
    )
    if env.get(ENV_GHOSTSCRIPT):
        settings.ghostscript_path = env[ENV_GHOSTSCRIPT]
    if env.get(ENV_ORIENTATION):
        settings.orientation = coerce_orientation(env[ENV_ORIENTATION])
    if env.get(ENV_LOG_LEVEL):
        settings.log_level = env[ENV_LOG_LEVEL].upper()
    return settings
