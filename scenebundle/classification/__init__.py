"""Mini README: Asset classification subsystem.

Exports the kind/mode enumerations and the classifier. The extension tables
in ``classifier`` are the only place suffixes are listed; filtering and
staging import them from here.
"""

from .classifier import (
    ANIMATION_EXTENSIONS,
    CODE_EXTENSIONS,
    AssetClassifier,
    AssetKind,
    ExportMode,
    is_animation,
    is_code,
    is_scene,
)

__all__ = [
    "ANIMATION_EXTENSIONS",
    "CODE_EXTENSIONS",
    "AssetClassifier",
    "AssetKind",
    "ExportMode",
    "is_animation",
    "is_code",
    "is_scene",
]
