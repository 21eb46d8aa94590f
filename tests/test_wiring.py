"""Mini README: Tests for building coordinators from settings.

Every built-in graph provider must be constructible through the settings
layer, since that is the only way the CLI and JSON service pick one.
"""

from __future__ import annotations

import json

import pytest

from scenebundle.configuration import SceneBundleSettings
from scenebundle.dependencies import InMemoryGraphProvider, ManifestGraphProvider
from scenebundle.export import ExportConfig
from scenebundle.interface import build_coordinator


@pytest.mark.parametrize(
    ("name", "provider_type"),
    [("manifest", ManifestGraphProvider), ("memory", InMemoryGraphProvider), ("Memory", InMemoryGraphProvider)],
)
def test_every_builtin_provider_builds_from_settings(tmp_path, name, provider_type) -> None:
    settings = SceneBundleSettings(project_root=tmp_path, graph_provider=name)

    coordinator = build_coordinator(settings)

    assert isinstance(coordinator.provider, provider_type)
    assert coordinator.computed_paths == []


def test_manifest_provider_uses_configured_manifest(tmp_path) -> None:
    scene = tmp_path / "Assets" / "Main.unity"
    scene.parent.mkdir(parents=True)
    scene.write_text("scene", encoding="utf-8")
    (tmp_path / "Assets" / "a.mat").write_text("mat", encoding="utf-8")
    manifest = tmp_path / "graph.json"
    manifest.write_text(
        json.dumps({"dependencies": {"Assets/Main.unity": ["Assets/a.mat"]}}), encoding="utf-8"
    )
    settings = SceneBundleSettings(project_root=tmp_path, manifest_path=manifest)

    coordinator = build_coordinator(settings, ExportConfig(root_path="Assets/Main.unity"))

    assert coordinator.computed_paths == ["Assets/Main.unity", "Assets/a.mat"]


def test_unknown_provider_is_rejected(tmp_path) -> None:
    with pytest.raises(KeyError):
        build_coordinator(SceneBundleSettings(project_root=tmp_path, graph_provider="nope"))
