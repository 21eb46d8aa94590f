"""Mini README: Core package initializer for scenebundle.

scenebundle extracts a scene and everything it depends on into a minimal,
portable package. The heavy lifting lives in subpackages (classification,
dependencies, filtering, selection, staging, export); this module only
re-exports the pieces drivers reach for first.
"""

from .errors import (
    CollaboratorIOError,
    ConfigError,
    EmptySelectionError,
    SceneBundleError,
    StagingCollisionExhausted,
    StagingEmptyError,
)
from .logging_utils import get_logger

__all__ = [
    "CollaboratorIOError",
    "ConfigError",
    "EmptySelectionError",
    "SceneBundleError",
    "StagingCollisionExhausted",
    "StagingEmptyError",
    "get_logger",
]
