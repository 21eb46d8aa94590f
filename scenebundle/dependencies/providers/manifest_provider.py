"""Mini README: Dependency graph backed by a project folder and a JSON manifest.

Structure:
    * ManifestGraphProvider - reads direct dependencies and asset types from
      a manifest, and folder contents from the project directory on disk.

Manifest format::

    {
        "dependencies": {"Assets/Main.unity": ["Assets/Mat/Rock.mat"], ...},
        "types": {"Assets/Mat/Rock.mat": "Material", ...}
    }

Only direct dependencies are stored; closures are computed by walking the
graph, so cycles in the manifest are harmless.
"""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from ..base import DependencyGraphProvider
from ..registry import REGISTRY
from ...errors import CollaboratorIOError, ConfigError
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_MANIFEST_NAME = "dependencies.json"


class ManifestGraphProvider(DependencyGraphProvider):
    """Graph provider combining a manifest file with a real project tree."""

    provider_name = "manifest"

    def __init__(
        self,
        project_root: Union[str, Path],
        manifest_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.project_root = Path(project_root)
        self.manifest_path = (
            Path(manifest_path) if manifest_path else self.project_root / DEFAULT_MANIFEST_NAME
        )
        self._dependencies: Dict[str, List[str]] = {}
        self._types: Dict[str, str] = {}
        self._load_manifest()

    def _load_manifest(self) -> None:
        if not self.manifest_path.exists():
            LOGGER.warning("Manifest %s not found; dependency graph is empty", self.manifest_path)
            return
        try:
            payload = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except OSError as error:
            raise CollaboratorIOError("read manifest", str(self.manifest_path)) from error
        except json.JSONDecodeError as error:
            raise ConfigError(f"Manifest {self.manifest_path} is invalid JSON") from error
        if not isinstance(payload, dict):
            raise ConfigError(f"Manifest {self.manifest_path} must contain a JSON object")

        dependencies = self._section(payload, "dependencies")
        for deps in dependencies.values():
            if not isinstance(deps, list):
                raise ConfigError(
                    f"Manifest {self.manifest_path} dependency lists must be JSON arrays"
                )
        self._dependencies = {
            str(path): [str(dep) for dep in deps] for path, deps in dependencies.items()
        }
        self._types = {
            str(path): str(kind) for path, kind in self._section(payload, "types").items()
        }
        LOGGER.debug(
            "Loaded manifest %s with %s nodes and %s type hints",
            self.manifest_path,
            len(self._dependencies),
            len(self._types),
        )

    def _section(self, payload: Dict[str, Any], key: str) -> Dict[str, Any]:
        section = payload.get(key, {})
        if not isinstance(section, dict):
            raise ConfigError(f"Manifest {self.manifest_path} \"{key}\" must be a JSON object")
        return section

    def _disk_path(self, path: str) -> Path:
        return self.project_root / path

    def get_recursive_dependencies(self, path: str) -> Set[str]:
        """Breadth-first walk of the manifest from ``path`` (excluded from the result)."""

        seen: Set[str] = set()
        queue = deque(self._dependencies.get(path, []))
        while queue:
            current = queue.popleft()
            if current in seen or current == path:
                continue
            seen.add(current)
            queue.extend(self._dependencies.get(current, []))
        return seen

    def is_folder(self, path: str) -> bool:
        return self._disk_path(path).is_dir()

    def list_files_under(self, folder: str) -> Set[str]:
        base = self._disk_path(folder)
        if not base.is_dir():
            return set()
        try:
            return {
                candidate.relative_to(self.project_root).as_posix()
                for candidate in base.rglob("*")
                if candidate.is_file()
            }
        except OSError as error:
            raise CollaboratorIOError("list files", folder) from error

    def get_asset_type(self, path: str) -> Optional[str]:
        return self._types.get(path)

    def metadata(self) -> Dict[str, str]:
        return {
            "provider": self.provider_name,
            "project_root": str(self.project_root),
            "manifest": str(self.manifest_path),
        }


REGISTRY.register(ManifestGraphProvider)
