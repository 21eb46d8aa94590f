"""Mini README: Search helpers for preview listings.

Drivers show the computed path list with a free-text search box and a
"selected only" toggle. ``filter_for_display`` applies both without
changing the underlying order.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Callable, Iterable, List, Optional


def filter_for_display(
    paths: Iterable[str],
    search: Optional[str] = None,
    *,
    selected_only: bool = False,
    is_selected: Optional[Callable[[str], bool]] = None,
) -> List[str]:
    """Keep paths whose file name or full path contains ``search`` (case-insensitive)."""

    needle = (search or "").strip().lower()
    visible: List[str] = []
    for path in paths:
        if needle and needle not in PurePosixPath(path).name.lower() and needle not in path.lower():
            continue
        if selected_only and (is_selected is None or not is_selected(path)):
            continue
        visible.append(path)
    return visible
