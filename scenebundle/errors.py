"""Mini README: Exception taxonomy shared by every scenebundle component.

Structure:
    * SceneBundleError - base class so drivers can catch one type.
    * ConfigError - root artifact missing or not a scene.
    * EmptySelectionError - export requested with nothing selected.
    * StagingCollisionExhausted - no free staging file name within the bound.
    * StagingEmptyError - staging produced no packageable files.
    * CollaboratorIOError - a filesystem or graph call failed.
"""

from __future__ import annotations

from typing import Optional


class SceneBundleError(Exception):
    """Base class for recoverable scenebundle failures."""


class ConfigError(SceneBundleError):
    """The export configuration cannot be used (for example no valid scene)."""


class EmptySelectionError(SceneBundleError):
    """Export was invoked while no path is selected."""


class StagingCollisionExhausted(SceneBundleError):
    """Every candidate staging file name up to the attempt bound is taken."""

    def __init__(self, destination: str, attempts: int) -> None:
        super().__init__(
            f"Could not find a free staging name for {destination} after {attempts} attempts"
        )
        self.destination = destination
        self.attempts = attempts


class StagingEmptyError(SceneBundleError):
    """The staging run directory holds nothing valid after copying."""


class CollaboratorIOError(SceneBundleError):
    """A collaborator (filesystem, graph provider, package writer) failed.

    The original exception is kept as ``__cause__`` via ``raise ... from``.
    """

    def __init__(self, operation: str, path: str, message: Optional[str] = None) -> None:
        detail = f": {message}" if message else ""
        super().__init__(f"{operation} failed for {path}{detail}")
        self.operation = operation
        self.path = path
