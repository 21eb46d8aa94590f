"""Mini README: Entry point CLI for scenebundle.

This script exposes a Typer CLI that previews and exports a scene's
dependency closure, or launches the JSON preview service with uvicorn.
Project location, provider and defaults come from ``SCENEBUNDLE_``
environment variables unless overridden on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import uvicorn

from scenebundle.classification import ExportMode
from scenebundle.configuration import get_settings
from scenebundle.errors import SceneBundleError
from scenebundle.export import ExportConfig
from scenebundle.filtering import ExclusionRules
from scenebundle.interface import build_coordinator
from scenebundle.logging_utils import configure_root_logger

cli = typer.Typer(help="Preview and export a scene together with everything it depends on.")


def _settings(project: Optional[Path], manifest: Optional[Path]):
    settings = get_settings()
    updates = {}
    if project is not None:
        updates["project_root"] = project.expanduser().resolve()
    if manifest is not None:
        updates["manifest_path"] = manifest.expanduser().resolve()
    configure_root_logger(settings.log_level)
    return settings.model_copy(update=updates) if updates else settings


def _config(
    settings,
    scene: str,
    mode: Optional[str],
    exclude_plugins: bool,
    exclude_editor: bool,
    exclude_addressables: bool,
    exclude_streaming_assets: bool,
    extra: List[str],
    reorganize: bool,
) -> ExportConfig:
    try:
        export_mode = ExportMode.from_str(mode) if mode else None
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--mode") from error
    return ExportConfig.from_settings(
        settings,
        scene,
        mode=export_mode,
        exclusions=ExclusionRules(
            exclude_plugins=exclude_plugins,
            exclude_editor_folders=exclude_editor,
            exclude_addressables_data=exclude_addressables,
            exclude_streaming_assets=exclude_streaming_assets,
        ),
        extra_includes=extra,
        reorganize=reorganize,
    )


@cli.command()
def preview(
    scene: str = typer.Argument(..., help="Project-relative scene path, e.g. Assets/Main.unity."),
    mode: Optional[str] = typer.Option(None, help="VisualsOnly, VisualsAndAnimations or CompleteProject."),
    exclude_plugins: bool = typer.Option(False, help="Exclude Assets/Plugins."),
    exclude_editor: bool = typer.Option(False, help="Exclude any 'Editor' folder."),
    exclude_addressables: bool = typer.Option(False, help="Exclude Assets/AddressableAssetsData."),
    exclude_streaming_assets: bool = typer.Option(False, help="Exclude Assets/StreamingAssets."),
    extra: List[str] = typer.Option([], help="Extra file or folder to include (repeatable)."),
    reorganize: bool = typer.Option(False, help="Show the organised staging layout."),
    recommended: bool = typer.Option(False, help="Mark paths with the recommended selection."),
    project: Optional[Path] = typer.Option(None, help="Project directory containing Assets/."),
    manifest: Optional[Path] = typer.Option(None, help="Dependency manifest JSON file."),
) -> None:
    """List the filtered closure of SCENE."""

    settings = _settings(project, manifest)
    config = _config(
        settings, scene, mode, exclude_plugins, exclude_editor,
        exclude_addressables, exclude_streaming_assets, extra, reorganize,
    )
    try:
        coordinator = build_coordinator(settings, config)
    except SceneBundleError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    if recommended:
        coordinator.select_recommended()

    if not coordinator.computed_paths:
        typer.echo(f"Preview list is empty.\n{coordinator.note}")
        return
    staged = coordinator.staging_preview() if reorganize else {}
    for record in coordinator.records:
        marker = "x" if record.selected else " "
        line = f"[{marker}] {record.path}"
        if record.path in staged:
            line += f"  ->  {staged[record.path]}"
        typer.echo(line)
    summary = coordinator.summary()
    typer.echo(f"Total: {summary['total']}   |   Selected: {summary['selected']}")
    typer.echo(coordinator.note)


@cli.command()
def export(
    scene: str = typer.Argument(..., help="Project-relative scene path, e.g. Assets/Main.unity."),
    output: Optional[Path] = typer.Option(None, help="Package file to write."),
    mode: Optional[str] = typer.Option(None, help="VisualsOnly, VisualsAndAnimations or CompleteProject."),
    exclude_plugins: bool = typer.Option(False, help="Exclude Assets/Plugins."),
    exclude_editor: bool = typer.Option(False, help="Exclude any 'Editor' folder."),
    exclude_addressables: bool = typer.Option(False, help="Exclude Assets/AddressableAssetsData."),
    exclude_streaming_assets: bool = typer.Option(False, help="Exclude Assets/StreamingAssets."),
    extra: List[str] = typer.Option([], help="Extra file or folder to include (repeatable)."),
    reorganize: bool = typer.Option(False, help="Stage into Scripts/Materials/... folders first."),
    recommended: bool = typer.Option(False, help="Export only the recommended selection."),
    project: Optional[Path] = typer.Option(None, help="Project directory containing Assets/."),
    manifest: Optional[Path] = typer.Option(None, help="Dependency manifest JSON file."),
) -> None:
    """Write a package containing SCENE and its filtered closure."""

    settings = _settings(project, manifest)
    config = _config(
        settings, scene, mode, exclude_plugins, exclude_editor,
        exclude_addressables, exclude_streaming_assets, extra, reorganize,
    )
    try:
        coordinator = build_coordinator(settings, config)
        if recommended:
            coordinator.select_recommended()
        output_file = output or settings.output_directory / coordinator.default_package_name()
        report = coordinator.export(output_file)
    except SceneBundleError as error:
        typer.secho(f"Export failed: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error

    typer.echo(f"Exported {len(report.packaged_paths)} assets to {report.output_file}")
    if report.staging_directory and not report.staging_deleted:
        typer.echo(f"Staging kept at: {report.staging_directory}")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes (development only)."),
) -> None:
    """Start the JSON preview service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)
    typer.echo(f"Starting scenebundle preview service on http://{effective_host}:{effective_port}")
    uvicorn.run(
        "scenebundle.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
