"""Mini README: Pruning of the raw dependency closure.

Structure:
    * ExclusionRules - the four folder toggles, OR-combined.
    * is_valid_asset_path - the validity predicate (also used on staged files).
    * is_allowed_by_mode - export mode eligibility by extension.
    * AssetFilter - applies validity, exclusion and mode, then sorts.

Mode eligibility is expressed through the extension predicates from
``classification`` rather than through ``AssetKind`` so that display labels
can change without touching what gets exported. Both read the same tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from ..classification import ExportMode, is_animation, is_code, is_scene
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ASSET_ROOT_PREFIX = "Assets/"
META_SUFFIX = ".meta"
EDITOR_FOLDER_NAME = "editor"

PLUGINS_PREFIX = "Assets/Plugins/"
ADDRESSABLES_PREFIX = "Assets/AddressableAssetsData/"
STREAMING_ASSETS_PREFIX = "Assets/StreamingAssets/"


@dataclass(frozen=True, slots=True)
class ExclusionRules:
    """Independent folder exclusions; any enabled match excludes a path."""

    exclude_plugins: bool = False
    exclude_editor_folders: bool = False
    exclude_addressables_data: bool = False
    exclude_streaming_assets: bool = False

    def as_flags(self) -> Tuple[bool, bool, bool, bool]:
        return (
            self.exclude_plugins,
            self.exclude_editor_folders,
            self.exclude_addressables_data,
            self.exclude_streaming_assets,
        )

    def excludes(self, path: str) -> bool:
        """Return ``True`` when ``path`` matches an enabled rule."""

        lowered = path.lower()
        if self.exclude_plugins and lowered.startswith(PLUGINS_PREFIX.lower()):
            return True
        if self.exclude_addressables_data and lowered.startswith(ADDRESSABLES_PREFIX.lower()):
            return True
        if self.exclude_streaming_assets and lowered.startswith(STREAMING_ASSETS_PREFIX.lower()):
            return True
        if self.exclude_editor_folders:
            return EDITOR_FOLDER_NAME in lowered.split("/")
        return False


def is_valid_asset_path(path: str, is_folder: Optional[Callable[[str], bool]] = None) -> bool:
    """Under ``Assets/``, not a ``.meta`` sidecar and not a folder."""

    if not path:
        return False
    lowered = path.lower()
    if not lowered.startswith(ASSET_ROOT_PREFIX.lower()):
        return False
    if lowered.endswith(META_SUFFIX):
        return False
    if is_folder is not None and is_folder(path):
        return False
    return True


def is_allowed_by_mode(path: str, mode: ExportMode) -> bool:
    """Scenes always pass; code and animations depend on ``mode``."""

    if is_scene(path):
        return True
    if mode is ExportMode.VISUALS_ONLY:
        return not is_code(path) and not is_animation(path)
    if mode is ExportMode.VISUALS_AND_ANIMATIONS:
        return not is_code(path)
    return True


class AssetFilter:
    """Apply validity, exclusion and mode rules to a raw path set.

    ``is_folder`` is the folder oracle used by the validity rule, normally
    ``DependencyGraphProvider.is_folder``.
    """

    def __init__(self, is_folder: Optional[Callable[[str], bool]] = None) -> None:
        self._is_folder = is_folder

    def filter(
        self,
        paths: Iterable[str],
        mode: ExportMode,
        exclusions: Optional[ExclusionRules] = None,
    ) -> List[str]:
        """Return the surviving paths, deduplicated and sorted."""

        exclusions = exclusions or ExclusionRules()
        kept = {
            path
            for path in paths
            if is_valid_asset_path(path, self._is_folder)
            and not exclusions.excludes(path)
            and is_allowed_by_mode(path, mode)
        }
        return sorted(kept)

    def valid_only(self, paths: Iterable[str]) -> List[str]:
        """Apply only the validity rule; used on freshly staged files."""

        return sorted({path for path in paths if is_valid_asset_path(path, self._is_folder)})
