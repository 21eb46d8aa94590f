"""Mini README: Destination planning for organised (staged) exports.

Structure:
    * sanitize_folder_name - make a user-provided staging root safe to create.
    * make_run_id - per-run directory name derived from the scene and a timestamp.
    * StagingPlanner - maps every selected path to
      ``<stagingRoot>/<runId>/<Category>/<filename>`` with collision-free names.

Planning never touches the disk itself; it asks an existence oracle (usually
``FileSystemAdapter.file_exists``) whether a candidate is already taken.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import PurePosixPath
from typing import Callable, Dict, Iterable, Optional, Set

from ..classification import AssetClassifier
from ..errors import StagingCollisionExhausted
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_STAGING_ROOT = "__SceneExport_Staging"
MAX_RENAME_ATTEMPTS = 9999

_UNSAFE_CHARACTERS = re.compile(r'[<>:"/\\|?*\x00-\x1f\s]')


def sanitize_folder_name(name: Optional[str]) -> str:
    """Replace filesystem-invalid characters and whitespace with ``_``.

    A blank name, or one made only of dots, falls back to
    ``DEFAULT_STAGING_ROOT`` so the folder stays inside its parent.
    """

    if not name or not name.strip().strip("."):
        return DEFAULT_STAGING_ROOT
    return _UNSAFE_CHARACTERS.sub("_", name)


def make_run_id(scene_path: str, now: datetime) -> str:
    """``<sceneName>_<YYYYmmdd_HHMMSS>`` for the staging run directory."""

    return f"{PurePosixPath(scene_path).stem}_{now:%Y%m%d_%H%M%S}"


class StagingPlanner:
    """Compute a unique staging destination for each selected path."""

    def __init__(
        self,
        classifier: Optional[AssetClassifier] = None,
        exists: Optional[Callable[[str], bool]] = None,
        *,
        max_attempts: int = MAX_RENAME_ATTEMPTS,
    ) -> None:
        self.classifier = classifier or AssetClassifier()
        self._exists = exists or (lambda _path: False)
        self.max_attempts = max_attempts

    def staged_label(self, path: str) -> str:
        """``<Category>/<filename>`` as shown next to a path in previews."""

        return f"{self.classifier.category_of(path)}/{PurePosixPath(path).name}"

    def _unique_destination(self, desired: str, taken: Set[str]) -> str:
        if desired not in taken and not self._exists(desired):
            return desired

        candidate_path = PurePosixPath(desired)
        for index in range(1, self.max_attempts):
            candidate = str(
                candidate_path.with_name(f"{candidate_path.stem}_{index}{candidate_path.suffix}")
            )
            if candidate not in taken and not self._exists(candidate):
                return candidate
        raise StagingCollisionExhausted(desired, self.max_attempts)

    def plan(self, selected_paths: Iterable[str], staging_root: str, run_id: str) -> Dict[str, str]:
        """Return ``{source: destination}`` in the order of ``selected_paths``.

        Raises ``StagingCollisionExhausted`` before anything is copied when a
        destination cannot be made unique.
        """

        base = PurePosixPath(staging_root) / run_id
        plan: Dict[str, str] = {}
        taken: Set[str] = set()
        for source in selected_paths:
            if source in plan:
                continue
            desired = str(base / self.classifier.category_of(source) / PurePosixPath(source).name)
            destination = self._unique_destination(desired, taken)
            if destination != desired:
                LOGGER.debug("Renamed staged copy of %s to %s", source, destination)
            taken.add(destination)
            plan[source] = destination
        LOGGER.info("Planned %s staged copies under %s", len(plan), base)
        return plan
