"""Mini README: FastAPI JSON service around the export coordinator.

Structure:
    * create_application - application factory wiring the routes.
    * ConfigPayload / SelectionPayload / ExportPayload - request bodies.

The service is a thin driver: every route delegates to one
``ExportCoordinator`` and returns what it computed. Domain errors become
HTTP errors (400 for configuration and empty selections, 409 for staging
problems, 502 for collaborator failures).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..classification import ExportMode
from ..configuration import get_settings
from ..errors import (
    CollaboratorIOError,
    ConfigError,
    EmptySelectionError,
    SceneBundleError,
    StagingCollisionExhausted,
    StagingEmptyError,
)
from ..export import ExportConfig, ExportCoordinator
from ..filtering import ExclusionRules
from ..logging_utils import get_logger
from ..utils.preview import filter_for_display
from .wiring import build_coordinator

LOGGER = get_logger(__name__)


class ConfigPayload(BaseModel):
    root_path: str = ""
    mode: ExportMode = ExportMode.VISUALS_AND_ANIMATIONS
    exclude_plugins: bool = False
    exclude_editor_folders: bool = False
    exclude_addressables_data: bool = False
    exclude_streaming_assets: bool = False
    extra_includes: List[str] = Field(default_factory=list)
    reorganize: bool = False
    staging_root_name: Optional[str] = None
    delete_staging_after_export: Optional[bool] = None


class SelectionPayload(BaseModel):
    path: str
    selected: bool


class ExportPayload(BaseModel):
    output_file: Optional[str] = None


def _http_error(error: SceneBundleError) -> HTTPException:
    if isinstance(error, (ConfigError, EmptySelectionError)):
        status = 400
    elif isinstance(error, (StagingCollisionExhausted, StagingEmptyError)):
        status = 409
    elif isinstance(error, CollaboratorIOError):
        status = 502
    else:
        status = 500
    return HTTPException(status_code=status, detail=str(error))


def create_application(coordinator: Optional[ExportCoordinator] = None) -> FastAPI:
    """Create the FastAPI application bound to ``coordinator``."""

    app = FastAPI(title="scenebundle preview service", version="0.1.0")
    settings = get_settings()
    if coordinator is None:
        coordinator = build_coordinator(settings)

    def preview_payload(search: Optional[str] = None, selected_only: bool = False) -> dict:
        visible = set(
            filter_for_display(
                coordinator.computed_paths,
                search,
                selected_only=selected_only,
                is_selected=coordinator.selection.is_selected,
            )
        )
        staged = coordinator.staging_preview() if coordinator.config.reorganize else {}
        records = [
            {
                "path": record.path,
                "kind": record.kind.value,
                "category": coordinator.classifier.category_of(record.path),
                "selected": record.selected,
                "staged_as": staged.get(record.path),
            }
            for record in coordinator.records
            if record.path in visible
        ]
        return {
            "summary": coordinator.summary(),
            "mode_description": coordinator.config.mode.description,
            "records": records,
        }

    @app.get("/preview")
    async def preview(search: Optional[str] = None, selected_only: bool = False) -> JSONResponse:
        """Return the computed list, optionally narrowed for display."""

        try:
            coordinator.recompute()
        except SceneBundleError as error:
            raise _http_error(error) from error
        return JSONResponse(preview_payload(search, selected_only))

    @app.post("/config")
    async def configure(payload: ConfigPayload) -> JSONResponse:
        """Replace the export configuration and recompute when it changed."""

        config = ExportConfig(
            root_path=payload.root_path,
            mode=payload.mode,
            exclusions=ExclusionRules(
                exclude_plugins=payload.exclude_plugins,
                exclude_editor_folders=payload.exclude_editor_folders,
                exclude_addressables_data=payload.exclude_addressables_data,
                exclude_streaming_assets=payload.exclude_streaming_assets,
            ),
            extra_includes=tuple(payload.extra_includes),
            reorganize=payload.reorganize,
            staging_root_name=payload.staging_root_name or settings.staging_root_name,
            delete_staging_after_export=(
                settings.delete_staging_after_export
                if payload.delete_staging_after_export is None
                else payload.delete_staging_after_export
            ),
        )
        try:
            changed = coordinator.update_config(config)
        except SceneBundleError as error:
            raise _http_error(error) from error
        LOGGER.info("Configuration updated (recomputed=%s)", changed)
        return JSONResponse({"recomputed": changed, **preview_payload()})

    @app.post("/selection")
    async def select_path(payload: SelectionPayload) -> JSONResponse:
        """Toggle a single computed path."""

        try:
            coordinator.set_selected(payload.path, payload.selected)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"summary": coordinator.summary()})

    @app.post("/selection/all")
    async def select_all() -> JSONResponse:
        coordinator.select_all()
        return JSONResponse({"summary": coordinator.summary()})

    @app.post("/selection/none")
    async def select_none() -> JSONResponse:
        coordinator.select_none()
        return JSONResponse({"summary": coordinator.summary()})

    @app.post("/selection/recommended")
    async def select_recommended() -> JSONResponse:
        coordinator.select_recommended()
        return JSONResponse({"summary": coordinator.summary()})

    @app.post("/export")
    async def export(payload: ExportPayload) -> JSONResponse:
        """Write the package for the current selection."""

        output_file = (
            Path(payload.output_file)
            if payload.output_file
            else settings.output_directory / coordinator.default_package_name()
        )
        try:
            report = coordinator.export(output_file)
        except SceneBundleError as error:
            raise _http_error(error) from error
        return JSONResponse(
            {
                "output_file": str(report.output_file),
                "packaged_paths": report.packaged_paths,
                "staging_plan": report.staging_plan,
                "staging_directory": report.staging_directory,
                "staging_deleted": report.staging_deleted,
            }
        )

    return app
