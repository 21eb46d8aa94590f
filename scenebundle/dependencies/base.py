"""Mini README: Abstract interface for dependency-graph providers.

Structure:
    * DependencyGraphProvider - what the resolver, filter and coordinator
      need to know about a project: dependency closures, which paths are
      folders, what files sit under a folder, and optional type names.

Concrete providers live in ``dependencies.providers`` and register
themselves with ``dependencies.registry.REGISTRY`` on import.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Set

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class DependencyGraphProvider(ABC):
    """Base interface for asset dependency graphs.

    All paths are project-relative POSIX strings such as ``Assets/Foo.mat``.
    """

    provider_name: str = "generic"

    @abstractmethod
    def get_recursive_dependencies(self, path: str) -> Set[str]:
        """Return every path ``path`` transitively depends on."""

    @abstractmethod
    def is_folder(self, path: str) -> bool:
        """Return ``True`` when ``path`` names a folder."""

    @abstractmethod
    def list_files_under(self, folder: str) -> Set[str]:
        """Return every file below ``folder``, recursively."""

    def get_asset_type(self, path: str) -> Optional[str]:
        """Return the engine type name of ``path`` when known."""

        return None

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for drivers."""

        return {"provider": self.provider_name}
