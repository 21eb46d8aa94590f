"""Mini README: In-memory dependency graph for demos and tests.

Structure:
    * InMemoryGraphProvider - canned dependency graph, file list and type
      hints held in dictionaries.

Folders are implied by file paths (``Assets/A/b.png`` makes ``Assets`` and
``Assets/A`` folders) and can also be declared explicitly, which is how an
adapter records an empty staging folder.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, Mapping, Optional, Set

from ..base import DependencyGraphProvider
from ..registry import REGISTRY


class InMemoryGraphProvider(DependencyGraphProvider):
    """Graph provider operating entirely on in-memory mappings."""

    provider_name = "memory"

    def __init__(
        self,
        dependencies: Optional[Mapping[str, Iterable[str]]] = None,
        *,
        files: Optional[Iterable[str]] = None,
        folders: Optional[Iterable[str]] = None,
        types: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.dependencies: Dict[str, Set[str]] = {
            path: set(deps) for path, deps in (dependencies or {}).items()
        }
        self.files: Set[str] = set(files or ())
        for path, deps in self.dependencies.items():
            self.files.add(path)
            self.files.update(deps)
        self.folders: Set[str] = {folder.rstrip("/") for folder in folders or ()}
        self.types: Dict[str, str] = dict(types or {})

    def get_recursive_dependencies(self, path: str) -> Set[str]:
        seen: Set[str] = set()
        queue = deque(self.dependencies.get(path, ()))
        while queue:
            current = queue.popleft()
            if current in seen or current == path:
                continue
            seen.add(current)
            queue.extend(self.dependencies.get(current, ()))
        return seen

    def is_folder(self, path: str) -> bool:
        folder = path.rstrip("/")
        if folder in self.folders:
            return True
        prefix = folder + "/"
        return any(candidate.startswith(prefix) for candidate in self.files)

    def list_files_under(self, folder: str) -> Set[str]:
        prefix = folder.rstrip("/") + "/"
        return {candidate for candidate in self.files if candidate.startswith(prefix)}

    def get_asset_type(self, path: str) -> Optional[str]:
        return self.types.get(path)


REGISTRY.register(InMemoryGraphProvider)
