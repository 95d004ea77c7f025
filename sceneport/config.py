"""Global configuration: constants, output defaults, runtime settings."""

from __future__ import annotations

import logging
import os
from enum import IntEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Namespace every Unity class tag lives under; the suffix is the class id.
UNITY_TAG_PREFIX = "tag:unity3d.com,2011:"


class ComponentType(IntEnum):
    """Unity class ids the exporter knows about."""

    GAME_OBJECT = 1
    TRANSFORM = 4
    CAMERA = 20
    MESH_RENDERER = 23
    MESH_FILTER = 33
    LIGHT = 108


# Default output directory for exported scenes
DEFAULT_OUTPUT_DIR = Path("Build")

# Appended to the scene file name: Main.unity -> Main.unity.json
OUTPUT_SUFFIX = ".json"

# three.js Object format metadata
FORMAT_VERSION = 4.5
FORMAT_TYPE = "Object"
GENERATOR_NAME = "SceneExporter"

# Shared box geometry
BOX_SIZE = 1
BOX_SEGMENTS = 1

# Shared phong material
MATERIAL_COLOR = 0xFFFFFF
MATERIAL_REFLECTIVITY = 1
MATERIAL_REFRACTION_RATIO = 0.98
MATERIAL_SHININESS = 30

# Environment variables read by ExportSettings.from_env
_ENV_PREFIX = "SCENEPORT_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExportSettings(BaseModel):
    """Runtime settings for file exports."""

    output_dir: Path = DEFAULT_OUTPUT_DIR
    """Directory the JSON document is written into."""

    indent: int | None = Field(default=2, ge=0)
    """JSON indentation; ``None`` writes a single line."""

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ExportSettings:
        """Load settings from ``SCENEPORT_*`` environment variables.

        Unset variables keep their defaults.  An empty ``SCENEPORT_INDENT``
        selects compact output.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in ("output_dir", "indent", "log_level"):
            key = _ENV_PREFIX + name.upper()
            if key in env:
                values[name] = env[key]
        if values.get("indent") == "":
            values["indent"] = None
        return cls(**values)


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stream handler to the ``sceneport`` logger.

    *level* defaults to ``SCENEPORT_LOG_LEVEL``.  The library itself never
    calls this; it is for hosts and scripts.
    """
    if level is None:
        level = ExportSettings.from_env().log_level
    logger = logging.getLogger("sceneport")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(level.upper())
