"""Mini README: Utility helpers for scenebundle.

Exports the entry-point plugin loader used by the graph provider registry
and the preview search helper used by the drivers.
"""

from .plugin_loader import load_entry_point_plugins
from .preview import filter_for_display

__all__ = ["filter_for_display", "load_entry_point_plugins"]
