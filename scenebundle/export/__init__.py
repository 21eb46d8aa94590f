"""Mini README: Export orchestration.

``config`` defines the per-export configuration, ``adapters`` the filesystem
and package-writer collaborators, and ``coordinator`` ties resolution,
filtering, selection, staging and packaging together.
"""

from .adapters import FileSystemAdapter, LocalFileSystem, PackageWriter, ZipPackageWriter
from .config import ExportConfig
from .coordinator import (
    AssetRecord,
    CoordinatorState,
    ExportCoordinator,
    ExportReport,
    PreviewResult,
    compute_preview,
    validate_root,
)

__all__ = [
    "AssetRecord",
    "CoordinatorState",
    "ExportConfig",
    "ExportCoordinator",
    "ExportReport",
    "FileSystemAdapter",
    "LocalFileSystem",
    "PackageWriter",
    "PreviewResult",
    "ZipPackageWriter",
    "compute_preview",
    "validate_root",
]
