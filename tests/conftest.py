"""Mini README: Shared test doubles for scenebundle tests.

Structure:
    * RecordingFileSystem - in-memory ``FileSystemAdapter`` that mirrors
      copies into an ``InMemoryGraphProvider`` so staged files can be listed.
    * RecordingPackageWriter - ``PackageWriter`` that remembers what it wrote.
    * Fixtures building a small scene graph and a coordinator around it.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Set

import pytest

from scenebundle.dependencies import InMemoryGraphProvider
from scenebundle.export import ExportConfig, ExportCoordinator, FileSystemAdapter, PackageWriter

ROOT_SCENE = "Assets/Scenes/Main.unity"
FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15)


class RecordingFileSystem(FileSystemAdapter):
    """Filesystem double backed by the provider's file set."""

    def __init__(self, provider: InMemoryGraphProvider, *, add_sidecars: bool = True) -> None:
        self.provider = provider
        self.add_sidecars = add_sidecars
        self.events: List[str] = []
        self.deleted: List[str] = []
        self.fail_copy_for: Set[str] = set()
        self.drop_copies = False

    def copy_file(self, source: str, destination: str) -> None:
        if source in self.fail_copy_for:
            raise OSError(f"disk full while copying {source}")
        self.events.append(f"copy:{source}->{destination}")
        if self.drop_copies:
            return
        self.provider.files.add(destination)
        if self.add_sidecars:
            self.provider.files.add(destination + ".meta")

    def create_folder(self, parent: str, name: str) -> None:
        self.events.append(f"mkdir:{parent}/{name}")
        self.provider.folders.add(f"{parent}/{name}")

    def delete_directory(self, path: str) -> None:
        self.deleted.append(path)
        prefix = path + "/"
        self.provider.files = {f for f in self.provider.files if not f.startswith(prefix)}
        self.provider.folders = {
            f for f in self.provider.folders if f != path and not f.startswith(prefix)
        }

    def file_exists(self, path: str) -> bool:
        return path in self.provider.files

    def begin_batch(self) -> None:
        self.events.append("begin")

    def end_batch(self) -> None:
        self.events.append("end")


class RecordingPackageWriter(PackageWriter):
    """Package writer double; set ``fail`` to simulate a write error."""

    def __init__(self) -> None:
        self.writes: List[tuple] = []
        self.fail = False

    def write_package(self, paths: Sequence[str], output_file: Path) -> Path:
        if self.fail:
            raise OSError("no space left on device")
        self.writes.append((list(paths), Path(output_file)))
        return Path(output_file)


@pytest.fixture()
def provider() -> InMemoryGraphProvider:
    return InMemoryGraphProvider(
        {
            ROOT_SCENE: [
                "Assets/Scripts/A.cs",
                "Assets/Materials/B.mat",
                "Assets/Anim/C.anim",
            ],
            "Assets/Materials/B.mat": ["Assets/Textures/tex.png", "Assets/Shaders/Rock.shader"],
        },
        files=["Assets/Props/Barrel.prefab", "Assets/Props/Barrel.mat"],
    )


@pytest.fixture()
def filesystem(provider: InMemoryGraphProvider) -> RecordingFileSystem:
    return RecordingFileSystem(provider)


@pytest.fixture()
def writer() -> RecordingPackageWriter:
    return RecordingPackageWriter()


@pytest.fixture()
def make_coordinator(provider, filesystem, writer):
    def factory(config: Optional[ExportConfig] = None) -> ExportCoordinator:
        coordinator = ExportCoordinator(
            provider,
            filesystem,
            writer,
            config=config or ExportConfig(root_path=ROOT_SCENE),
            clock=lambda: FIXED_NOW,
        )
        coordinator.recompute()
        return coordinator

    return factory
