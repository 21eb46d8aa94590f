"""Mini README: Filesystem and package-writer collaborators.

Structure:
    * FileSystemAdapter - abstract copy/create/delete/exists with batch brackets.
    * LocalFileSystem - adapter over a project directory on disk.
    * PackageWriter - abstract archive writer.
    * ZipPackageWriter - writes selected project files into a zip archive.

Adapters raise plain ``OSError``; the coordinator wraps those into
``CollaboratorIOError`` with the operation and path attached.
"""

from __future__ import annotations

import shutil
import zipfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

META_SUFFIX = ".meta"


class FileSystemAdapter(ABC):
    """Operations the exporter performs on project files."""

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """Copy ``source`` to ``destination`` (parent folder already exists)."""

    @abstractmethod
    def create_folder(self, parent: str, name: str) -> None:
        """Create ``parent/name``."""

    @abstractmethod
    def delete_directory(self, path: str) -> None:
        """Remove ``path`` and everything below it."""

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return ``True`` when a file exists at ``path``."""

    def begin_batch(self) -> None:
        """Start a bulk edit; observers should not react until ``end_batch``."""

    def end_batch(self) -> None:
        """Finish a bulk edit started with ``begin_batch``."""

    @contextmanager
    def batch(self) -> Iterator["FileSystemAdapter"]:
        self.begin_batch()
        try:
            yield self
        finally:
            self.end_batch()


class LocalFileSystem(FileSystemAdapter):
    """Adapter resolving project-relative paths under ``project_root``.

    Copies carry the ``.meta`` sidecar along when the source has one.
    """

    def __init__(self, project_root: Union[str, Path]) -> None:
        self.project_root = Path(project_root)
        self.batch_depth = 0

    def _disk_path(self, path: str) -> Path:
        return self.project_root / path

    def copy_file(self, source: str, destination: str) -> None:
        source_path = self._disk_path(source)
        destination_path = self._disk_path(destination)
        shutil.copy2(source_path, destination_path)
        sidecar = source_path.with_name(source_path.name + META_SUFFIX)
        if sidecar.exists():
            shutil.copy2(sidecar, destination_path.with_name(destination_path.name + META_SUFFIX))

    def create_folder(self, parent: str, name: str) -> None:
        self._disk_path(parent).joinpath(name).mkdir(parents=True, exist_ok=True)

    def delete_directory(self, path: str) -> None:
        target = self._disk_path(path)
        if target.exists():
            shutil.rmtree(target)
        sidecar = target.with_name(target.name + META_SUFFIX)
        if sidecar.exists():
            sidecar.unlink()

    def file_exists(self, path: str) -> bool:
        return self._disk_path(path).is_file()

    def begin_batch(self) -> None:
        self.batch_depth += 1
        LOGGER.debug("Batch edit started (depth %s)", self.batch_depth)

    def end_batch(self) -> None:
        self.batch_depth = max(0, self.batch_depth - 1)
        LOGGER.debug("Batch edit finished (depth %s)", self.batch_depth)


class PackageWriter(ABC):
    """Writes the final package; the archive format is the writer's business."""

    default_suffix: str = ".unitypackage"

    @abstractmethod
    def write_package(self, paths: Sequence[str], output_file: Path) -> Path:
        """Write ``paths`` (in order) into ``output_file`` and return it."""


class ZipPackageWriter(PackageWriter):
    """Store project files in a zip archive under their project-relative names."""

    default_suffix = ".zip"

    def __init__(self, project_root: Union[str, Path]) -> None:
        self.project_root = Path(project_root)

    def write_package(self, paths: Sequence[str], output_file: Path) -> Path:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        LOGGER.info("Writing %s files to %s", len(paths), output_file)
        with zipfile.ZipFile(output_file, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path in paths:
                archive.write(self.project_root / path, arcname=path)
        return output_file
