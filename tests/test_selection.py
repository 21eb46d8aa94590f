"""Mini README: Tests for selection persistence and recommended selection."""

from __future__ import annotations

import pytest

from scenebundle.classification import AssetKind, ExportMode
from scenebundle.selection import SelectionModel, reconcile

KINDS = {
    "Assets/Main.unity": AssetKind.SCENE,
    "Assets/A.cs": AssetKind.CODE,
    "Assets/B.mat": AssetKind.OTHER,
    "Assets/C.anim": AssetKind.ANIMATION,
}


def test_reconcile_keeps_known_values_and_defaults_new_paths() -> None:
    previous = {"Assets/a.mat": False, "Assets/gone.mat": False}

    result = reconcile(previous, ["Assets/a.mat", "Assets/new.png"])

    assert result == {"Assets/a.mat": False, "Assets/new.png": True}


def test_path_that_disappears_and_returns_is_selected_again() -> None:
    model = SelectionModel()
    model.reconcile(["Assets/a.mat", "Assets/b.mat"])
    model.set_selected("Assets/a.mat", False)

    model.reconcile(["Assets/b.mat"])
    model.reconcile(["Assets/a.mat", "Assets/b.mat"])

    assert model.is_selected("Assets/a.mat")


def test_set_all_and_counts() -> None:
    model = SelectionModel()
    model.reconcile(KINDS)

    model.set_all(False)
    assert model.selected_count() == 0
    assert model.selected_paths() == []

    model.set_all(True)
    assert model.selected_paths() == list(KINDS)


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (ExportMode.VISUALS_ONLY, ["Assets/Main.unity", "Assets/B.mat"]),
        (ExportMode.VISUALS_AND_ANIMATIONS, ["Assets/Main.unity", "Assets/B.mat", "Assets/C.anim"]),
        (ExportMode.COMPLETE_PROJECT, list(KINDS)),
    ],
)
def test_select_recommended_by_mode(mode: ExportMode, expected: list) -> None:
    model = SelectionModel()
    model.reconcile(KINDS)
    model.set_all(False)

    model.select_recommended(KINDS, mode)

    assert model.selected_paths() == expected


def test_recommendation_can_be_overridden_manually() -> None:
    model = SelectionModel()
    model.reconcile(KINDS)
    model.select_recommended(KINDS, ExportMode.VISUALS_ONLY)

    model.set_selected("Assets/A.cs", True)

    assert model.is_selected("Assets/A.cs")


def test_unknown_paths_are_rejected() -> None:
    model = SelectionModel()
    model.reconcile(["Assets/a.mat"])

    with pytest.raises(KeyError):
        model.set_selected("Assets/other.mat", False)
    assert not model.is_selected("Assets/other.mat")
