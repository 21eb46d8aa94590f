"""Mini README: Tests for asset kinds, staging categories and export modes."""

from __future__ import annotations

import pytest

from scenebundle.classification import (
    ANIMATION_EXTENSIONS,
    CODE_EXTENSIONS,
    AssetClassifier,
    AssetKind,
    ExportMode,
)


def test_classify_uses_extension_tables() -> None:
    classifier = AssetClassifier()

    assert classifier.classify("Assets/Scenes/Main.UNITY") is AssetKind.SCENE
    assert classifier.classify("Assets/Scripts/Player.cs") is AssetKind.CODE
    assert classifier.classify("Assets/Plugins/Native.DLL") is AssetKind.CODE
    assert classifier.classify("Assets/Anim/Run.anim") is AssetKind.ANIMATION
    assert classifier.classify("Assets/Anim/Cut.timeline") is AssetKind.ANIMATION
    assert classifier.classify("Assets/Materials/Rock.mat") is AssetKind.OTHER
    assert classifier.classify("Assets/README") is AssetKind.OTHER


@pytest.mark.parametrize("extension", sorted(CODE_EXTENSIONS | ANIMATION_EXTENSIONS))
def test_code_and_animation_always_land_in_their_category(extension: str) -> None:
    """Type hints must never pull code or animations into another folder."""

    classifier = AssetClassifier(type_lookup=lambda _path: "Material")
    path = f"Assets/Things/item{extension}"

    category = classifier.category_of(path, type_hint="Texture2D")
    if classifier.classify(path) is AssetKind.CODE:
        assert category == "Scripts"
    else:
        assert category == "Animations"


def test_category_of_fine_grained_buckets() -> None:
    classifier = AssetClassifier()

    assert classifier.category_of("Assets/Main.unity") == "Scenes"
    assert classifier.category_of("Assets/Props/Barrel.prefab") == "Prefabs"
    assert classifier.category_of("Assets/Shaders/Water.shadergraph") == "Shaders"
    assert classifier.category_of("Assets/Art/tex.PNG") == "Textures"
    assert classifier.category_of("Assets/Art/ship.fbx") == "Models"
    assert classifier.category_of("Assets/Sfx/boom.ogg") == "Audio"
    assert classifier.category_of("Assets/Ui/Inter.otf") == "Fonts"
    assert classifier.category_of("Assets/Fx/Smoke.vfx") == "VFX"
    assert classifier.category_of("Assets/Data/Config.asset") == "Data"
    assert classifier.category_of("Assets/Data/notes.txt") == "Other"


def test_category_of_falls_back_to_type_hints() -> None:
    types = {
        "Assets/Art/sky.cubemap": "Cubemap",
        "Assets/Art/legacy.material": "Material",
        "Assets/Sfx/voice.raw": "AudioClip",
        "Assets/Misc/thing.bytes": "TextAsset",
    }
    classifier = AssetClassifier(type_lookup=types.get)

    assert classifier.category_of("Assets/Art/sky.cubemap") == "Textures"
    assert classifier.category_of("Assets/Art/legacy.material") == "Materials"
    assert classifier.category_of("Assets/Sfx/voice.raw") == "Audio"
    assert classifier.category_of("Assets/Misc/thing.bytes") == "Other"
    # Extension wins over the hint.
    assert classifier.category_of("Assets/Art/tex.png", type_hint="Font") == "Textures"


def test_export_mode_parsing_and_order() -> None:
    assert ExportMode.from_str("VisualsOnly") is ExportMode.VISUALS_ONLY
    assert ExportMode.from_str("visuals-and-animations") is ExportMode.VISUALS_AND_ANIMATIONS
    assert ExportMode.from_str(" complete_project ") is ExportMode.COMPLETE_PROJECT
    assert (
        ExportMode.VISUALS_ONLY.rank
        < ExportMode.VISUALS_AND_ANIMATIONS.rank
        < ExportMode.COMPLETE_PROJECT.rank
    )
    assert "Scripts are not included" in ExportMode.VISUALS_AND_ANIMATIONS.description

    with pytest.raises(ValueError):
        ExportMode.from_str("everything")
