"""Mini README: Persistent per-path selection state.

Structure:
    * reconcile - carry previous selections onto a new path list.
    * SelectionModel - ordered selection map with bulk helpers.

New paths default to selected; paths that vanish are dropped, so a path
that disappears and later reappears starts selected again. The
recommended selection is only a suggestion on top of an already
mode-filtered list; users may re-select anything it turns off.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from ..classification import AssetKind, ExportMode
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def reconcile(previous: Mapping[str, bool], new_paths: Iterable[str]) -> Dict[str, bool]:
    """Return the selection for ``new_paths`` keeping known values."""

    return {path: previous.get(path, True) for path in new_paths}


def recommended_selection(kind: AssetKind, mode: ExportMode) -> bool:
    """Whether a path of ``kind`` is recommended for export in ``mode``."""

    if kind is AssetKind.CODE:
        return mode is ExportMode.COMPLETE_PROJECT
    if kind is AssetKind.ANIMATION:
        return mode is not ExportMode.VISUALS_ONLY
    return True


class SelectionModel:
    """Track which computed paths are selected for export.

    Insertion order follows the order paths were reconciled in, which is the
    sorted filter output, so ``selected_paths`` is deterministic.
    """

    def __init__(self, initial: Mapping[str, bool] | None = None) -> None:
        self._selected: Dict[str, bool] = dict(initial or {})

    def __contains__(self, path: object) -> bool:
        return path in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def reconcile(self, new_paths: Iterable[str]) -> Dict[str, bool]:
        self._selected = reconcile(self._selected, new_paths)
        return self.snapshot()

    def reset(self) -> None:
        LOGGER.debug("Clearing %s remembered selections", len(self._selected))
        self._selected = {}

    def snapshot(self) -> Dict[str, bool]:
        return dict(self._selected)

    def is_selected(self, path: str) -> bool:
        return self._selected.get(path, False)

    def set_selected(self, path: str, value: bool) -> None:
        """Change a single path; unknown paths are rejected."""

        if path not in self._selected:
            raise KeyError(f"Path {path} is not part of the computed set")
        self._selected[path] = bool(value)

    def set_all(self, value: bool) -> None:
        for path in self._selected:
            self._selected[path] = bool(value)

    def select_recommended(self, kinds: Mapping[str, AssetKind], mode: ExportMode) -> None:
        """Reset every path to the recommendation for ``mode``."""

        for path in self._selected:
            self._selected[path] = recommended_selection(kinds.get(path, AssetKind.OTHER), mode)
        LOGGER.info(
            "Applied recommended selection for %s: %s of %s selected",
            mode.value,
            self.selected_count(),
            len(self._selected),
        )

    def selected_paths(self) -> List[str]:
        return [path for path, selected in self._selected.items() if selected]

    def selected_count(self) -> int:
        return sum(1 for selected in self._selected.values() if selected)
