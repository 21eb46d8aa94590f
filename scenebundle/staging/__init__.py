"""Mini README: Staging layout planning for organised exports."""

from .planner import (
    DEFAULT_STAGING_ROOT,
    MAX_RENAME_ATTEMPTS,
    StagingPlanner,
    make_run_id,
    sanitize_folder_name,
)

__all__ = [
    "DEFAULT_STAGING_ROOT",
    "MAX_RENAME_ATTEMPTS",
    "StagingPlanner",
    "make_run_id",
    "sanitize_folder_name",
]
