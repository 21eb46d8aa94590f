"""Mini README: Centralised runtime settings for scenebundle.

Structure:
    * SceneBundleSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Drivers call ``get_settings`` to find the project, choose a graph
    provider and pick export defaults. Every field can be overridden with a
    ``SCENEBUNDLE_`` prefixed environment variable or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .classification import ExportMode
from .logging_utils import level_from_name
from .staging import DEFAULT_STAGING_ROOT


class SceneBundleSettings(BaseSettings):
    """Runtime configuration for scenebundle drivers."""

    project_root: Path = Field(
        Path("."),
        description="Project directory that contains the Assets/ folder.",
    )
    manifest_path: Optional[Path] = Field(
        None,
        description="Dependency manifest; defaults to dependencies.json in the project root.",
    )
    graph_provider: str = Field(
        "manifest",
        description="Registered dependency-graph provider used to resolve closures.",
    )
    default_mode: ExportMode = Field(
        ExportMode.VISUALS_AND_ANIMATIONS,
        description="Export mode used when a driver does not pass one.",
    )
    staging_root_name: str = Field(
        DEFAULT_STAGING_ROOT,
        description="Folder created under Assets/ for organised exports.",
    )
    delete_staging_after_export: bool = Field(
        True,
        description="Remove the staging run directory after a successful export.",
    )
    output_directory: Path = Field(
        Path("."),
        description="Directory packages are written to when no output file is given.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the JSON preview service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON preview service listens on.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "SCENEBUNDLE_"
        env_file = ".env"
        case_sensitive = False

    @validator("project_root", "output_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories and make paths absolute."""

        return Path(value or ".").expanduser().resolve()

    @validator("default_mode", pre=True)
    def _coerce_mode(cls, value: object) -> ExportMode:
        """Accept ``VisualsOnly`` style names as well as enum values."""

        if isinstance(value, ExportMode):
            return value
        return ExportMode.from_str(str(value))

    @validator("log_level", pre=True)
    def _check_log_level(cls, value: object) -> str:
        """Reject level names the logging module does not know."""

        name = str(value or "INFO").strip().upper()
        level_from_name(name)
        return name


@lru_cache()
def get_settings() -> SceneBundleSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SceneBundleSettings()
