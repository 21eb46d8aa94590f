"""Mini README: Extension-driven classification of project assets.

Structure:
    * AssetKind - coarse kind used for mode eligibility and recommendations.
    * ExportMode - how much of the closure an export is allowed to carry.
    * CODE_EXTENSIONS / ANIMATION_EXTENSIONS / CATEGORY_EXTENSIONS - the
      lookup tables every other module reads instead of comparing suffixes.
    * AssetClassifier - maps a path to its kind and its staging category.

``category_of`` always defers to ``classify`` first, so a path classified as
code can only ever be staged under ``Scripts`` and an animation only under
``Animations``. The finer categories and the type-hint fallback apply to
everything else.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Callable, Dict, FrozenSet, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

SCENE_EXTENSION = ".unity"

CODE_EXTENSIONS: FrozenSet[str] = frozenset({".cs", ".asmdef", ".asmref", ".dll", ".rsp"})
ANIMATION_EXTENSIONS: FrozenSet[str] = frozenset(
    {".anim", ".controller", ".overridecontroller", ".mask", ".playable", ".timeline"}
)

SCENES_CATEGORY = "Scenes"
SCRIPTS_CATEGORY = "Scripts"
ANIMATIONS_CATEGORY = "Animations"
OTHER_CATEGORY = "Other"

CATEGORY_EXTENSIONS: Dict[str, FrozenSet[str]] = {
    "Prefabs": frozenset({".prefab"}),
    "Materials": frozenset({".mat"}),
    "Shaders": frozenset({".shader", ".shadergraph", ".shadersubgraph", ".compute"}),
    "Textures": frozenset(
        {".png", ".jpg", ".jpeg", ".tga", ".psd", ".tif", ".tiff", ".exr", ".hdr"}
    ),
    "Models": frozenset({".fbx", ".obj", ".dae", ".blend"}),
    "Audio": frozenset({".wav", ".mp3", ".ogg", ".aiff", ".aif"}),
    "Fonts": frozenset({".ttf", ".otf"}),
    "VFX": frozenset({".vfx", ".vfxgraph"}),
    "Data": frozenset({".asset"}),
}

# Engine type names reported by a graph provider, consulted only when the
# extension is not in any table above.
TYPE_HINT_CATEGORIES: Dict[str, str] = {
    "Material": "Materials",
    "Shader": "Shaders",
    "AnimationClip": ANIMATIONS_CATEGORY,
    "AudioClip": "Audio",
    "Font": "Fonts",
}
TEXTURE_TYPE_HINTS: FrozenSet[str] = frozenset(
    {
        "Texture",
        "Texture2D",
        "Texture3D",
        "Texture2DArray",
        "Cubemap",
        "CubemapArray",
        "RenderTexture",
        "CustomRenderTexture",
    }
)


class AssetKind(str, Enum):
    """Coarse asset kinds."""

    SCENE = "scene"
    CODE = "code"
    ANIMATION = "animation"
    OTHER = "other"


class ExportMode(str, Enum):
    """Export modes ordered from least to most inclusive."""

    VISUALS_ONLY = "visuals_only"
    VISUALS_AND_ANIMATIONS = "visuals_and_animations"
    COMPLETE_PROJECT = "complete_project"

    @classmethod
    def from_str(cls, value: str) -> "ExportMode":
        """Accept values like ``VisualsOnly``, ``visuals-only`` or ``visuals_only``."""

        try:
            compact = value.strip().replace("-", "").replace("_", "").lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported export mode: {value}") from error
        for mode in cls:
            if mode.value.replace("_", "") == compact:
                return mode
        raise ValueError(f"Unsupported export mode: {value}")

    @property
    def rank(self) -> int:
        return _MODE_ORDER.index(self)

    @property
    def description(self) -> str:
        return _MODE_DESCRIPTIONS[self]


_MODE_ORDER = [
    ExportMode.VISUALS_ONLY,
    ExportMode.VISUALS_AND_ANIMATIONS,
    ExportMode.COMPLETE_PROJECT,
]

_MODE_DESCRIPTIONS = {
    ExportMode.VISUALS_ONLY: (
        "Exports the scene with visual assets only (models, materials, textures, prefabs,"
        " shaders). No animations or scripts included."
    ),
    ExportMode.VISUALS_AND_ANIMATIONS: (
        "Exports visual assets plus animation clips and controllers. Scripts are not included."
    ),
    ExportMode.COMPLETE_PROJECT: (
        "Full export including visuals, animations, and all related scripts/assemblies."
    ),
}


def extension_of(path: str) -> str:
    """Lower-cased final suffix of ``path`` including the dot, or ``""``."""

    return PurePosixPath(path).suffix.lower()


def is_scene(path: str) -> bool:
    return extension_of(path) == SCENE_EXTENSION


def is_code(path: str) -> bool:
    return extension_of(path) in CODE_EXTENSIONS


def is_animation(path: str) -> bool:
    return extension_of(path) in ANIMATION_EXTENSIONS


class AssetClassifier:
    """Classify asset paths into kinds and staging categories.

    ``type_lookup`` is an optional callable returning an engine type name for
    a path (usually ``DependencyGraphProvider.get_asset_type``). It is only
    used by ``category_of`` when the extension alone says nothing.
    """

    def __init__(self, type_lookup: Optional[Callable[[str], Optional[str]]] = None) -> None:
        self._type_lookup = type_lookup

    def classify(self, path: str) -> AssetKind:
        """Return the coarse kind of ``path``."""

        if is_scene(path):
            return AssetKind.SCENE
        if is_code(path):
            return AssetKind.CODE
        if is_animation(path):
            return AssetKind.ANIMATION
        return AssetKind.OTHER

    def category_of(self, path: str, type_hint: Optional[str] = None) -> str:
        """Return the staging folder label for ``path``.

        ``type_hint`` overrides the configured lookup when given.
        """

        kind = self.classify(path)
        if kind is AssetKind.SCENE:
            return SCENES_CATEGORY
        if kind is AssetKind.CODE:
            return SCRIPTS_CATEGORY
        if kind is AssetKind.ANIMATION:
            return ANIMATIONS_CATEGORY

        extension = extension_of(path)
        for category, extensions in CATEGORY_EXTENSIONS.items():
            if extension in extensions:
                return category

        if type_hint is None and self._type_lookup is not None:
            type_hint = self._type_lookup(path)
        if type_hint:
            if type_hint in TYPE_HINT_CATEGORIES:
                return TYPE_HINT_CATEGORIES[type_hint]
            if type_hint in TEXTURE_TYPE_HINTS:
                return "Textures"
            LOGGER.debug("No category for type hint %s on %s", type_hint, path)
        return OTHER_CATEGORY
