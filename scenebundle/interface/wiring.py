"""Mini README: Builds a ready-to-use coordinator from runtime settings.

Both the CLI and the JSON service go through ``build_coordinator`` so they
resolve the same project with the same provider and adapters.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..configuration import SceneBundleSettings
from ..dependencies import REGISTRY
from ..export import ExportConfig, ExportCoordinator, LocalFileSystem, ZipPackageWriter
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _provider_options(settings: SceneBundleSettings) -> Dict[str, Any]:
    """Constructor keywords for the configured graph provider."""

    name = settings.graph_provider.lower()
    if name == "memory":
        return {}
    options: Dict[str, Any] = {"project_root": settings.project_root}
    if name == "manifest":
        options["manifest_path"] = settings.manifest_path
    return options


def build_coordinator(
    settings: SceneBundleSettings, config: Optional[ExportConfig] = None
) -> ExportCoordinator:
    """Create the provider, adapters and coordinator described by ``settings``."""

    provider = REGISTRY.create(settings.graph_provider, **_provider_options(settings))
    LOGGER.debug("Graph provider metadata: %s", provider.metadata())
    coordinator = ExportCoordinator(
        provider,
        LocalFileSystem(settings.project_root),
        ZipPackageWriter(settings.project_root),
        config=config,
    )
    if config is not None:
        coordinator.recompute()
    return coordinator
