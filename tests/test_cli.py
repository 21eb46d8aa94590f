"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

import json
import zipfile

from typer.testing import CliRunner

from scenebundle_cli import cli

runner = CliRunner()


def _build_project(root) -> None:
    for relative in (
        "Assets/Scenes/Main.unity",
        "Assets/Props/Crate.mat",
        "Assets/Props/crate.png",
        "Assets/Code/Crate.cs",
    ):
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(relative, encoding="utf-8")
    (root / "dependencies.json").write_text(
        json.dumps(
            {
                "dependencies": {
                    "Assets/Scenes/Main.unity": ["Assets/Props/Crate.mat", "Assets/Code/Crate.cs"],
                    "Assets/Props/Crate.mat": ["Assets/Props/crate.png"],
                }
            }
        ),
        encoding="utf-8",
    )


def test_preview_prints_layout(tmp_path) -> None:
    _build_project(tmp_path)

    result = runner.invoke(
        cli,
        [
            "preview",
            "Assets/Scenes/Main.unity",
            "--project",
            str(tmp_path),
            "--mode",
            "VisualsOnly",
            "--reorganize",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "[x] Assets/Props/Crate.mat  ->  Materials/Crate.mat" in result.output
    assert "Assets/Code/Crate.cs" not in result.output
    assert "All deps: 4 | After filters: 3" in result.output


def test_preview_with_extra_code_file_still_filtered_by_mode(tmp_path) -> None:
    _build_project(tmp_path)

    result = runner.invoke(
        cli,
        [
            "preview",
            "Assets/Scenes/Main.unity",
            "--project",
            str(tmp_path),
            "--mode",
            "visuals_and_animations",
            "--extra",
            "Assets/Code/Crate.cs",
            "--recommended",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Assets/Code/Crate.cs" not in result.output
    assert "Total: 3   |   Selected: 3" in result.output


def test_export_writes_zip(tmp_path) -> None:
    _build_project(tmp_path)
    output = tmp_path / "out" / "bundle.zip"

    result = runner.invoke(
        cli,
        [
            "export",
            "Assets/Scenes/Main.unity",
            "--project",
            str(tmp_path),
            "--mode",
            "CompleteProject",
            "--output",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    with zipfile.ZipFile(output) as archive:
        assert sorted(archive.namelist()) == [
            "Assets/Code/Crate.cs",
            "Assets/Props/Crate.mat",
            "Assets/Props/crate.png",
            "Assets/Scenes/Main.unity",
        ]


def test_export_of_non_scene_fails(tmp_path) -> None:
    _build_project(tmp_path)

    result = runner.invoke(
        cli,
        ["export", "Assets/Props/Crate.mat", "--project", str(tmp_path)],
    )

    assert result.exit_code == 1


def test_unknown_mode_is_rejected(tmp_path) -> None:
    result = runner.invoke(
        cli, ["preview", "Assets/Scenes/Main.unity", "--project", str(tmp_path), "--mode", "all"]
    )

    assert result.exit_code != 0
