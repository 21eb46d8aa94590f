"""Mini README: Dependency closure computation.

Structure:
    * DependencyResolver - unions the root's recursive dependencies with the
      user's extra includes.

Extra folders are taken verbatim (every file under them, no further
expansion); extra files pull in their own closure exactly like the root.
The result is an unordered, unfiltered set; ordering and pruning belong to
``filtering.AssetFilter``.
"""

from __future__ import annotations

from typing import Iterable, Set

from .base import DependencyGraphProvider
from ..errors import CollaboratorIOError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class DependencyResolver:
    """Compute the raw closure of a root artifact plus extra includes."""

    def __init__(self, provider: DependencyGraphProvider) -> None:
        self.provider = provider

    def _closure_of(self, path: str) -> Set[str]:
        try:
            dependencies = set(self.provider.get_recursive_dependencies(path))
        except OSError as error:
            raise CollaboratorIOError("resolve dependencies", path) from error
        dependencies.add(path)
        return dependencies

    def resolve(self, root: str, extra_includes: Iterable[str] = ()) -> Set[str]:
        """Return ``root`` with its closure and the expanded extra includes."""

        closure = self._closure_of(root)
        LOGGER.debug("Root %s contributes %s paths", root, len(closure))

        for extra in extra_includes:
            if not extra:
                continue
            try:
                is_folder = self.provider.is_folder(extra)
                contents = self.provider.list_files_under(extra) if is_folder else None
            except OSError as error:
                raise CollaboratorIOError("expand extra include", extra) from error
            if contents is not None:
                LOGGER.debug("Extra folder %s adds %s files", extra, len(contents))
                closure.update(contents)
            else:
                closure.update(self._closure_of(extra))
        return closure
