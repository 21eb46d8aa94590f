"""Mini README: Registry of dependency-graph provider implementations.

Structure:
    * GraphProviderRegistry - maps identifiers to ``DependencyGraphProvider``
      classes and instantiates them with driver-supplied options.

Built-in providers register on import of ``dependencies.providers``. Extra
providers shipped by other distributions are discovered through the
``scenebundle.graph_providers`` entry-point group.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Type

from .base import DependencyGraphProvider
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)

PLUGIN_GROUP = "scenebundle.graph_providers"


class GraphProviderRegistry:
    """Simple registry for mapping provider identifiers to classes."""

    def __init__(self) -> None:
        self._providers: Dict[str, Type[DependencyGraphProvider]] = {}
        self._plugins_loaded = False

    def register(self, provider: Type[DependencyGraphProvider]) -> None:
        """Register a provider class under its ``provider_name``."""

        identifier = provider.provider_name.lower()
        LOGGER.debug("Registering graph provider '%s'", identifier)
        self._providers[identifier] = provider

    def load_plugins(self, group: str = PLUGIN_GROUP) -> None:
        """Register provider classes advertised through entry points."""

        if self._plugins_loaded:
            return
        self._plugins_loaded = True
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, DependencyGraphProvider):
                self.register(plugin)
            else:
                LOGGER.warning("Ignoring plugin %r: not a DependencyGraphProvider subclass", plugin)

    def available_providers(self) -> Iterable[str]:
        """Return provider identifiers for display."""

        return sorted(self._providers.keys())

    def create(self, identifier: str, **options: Any) -> DependencyGraphProvider:
        """Instantiate the provider registered as ``identifier``."""

        provider_cls = self._providers.get(identifier.lower())
        if provider_cls is None:
            self.load_plugins()
            provider_cls = self._providers.get(identifier.lower())
        if not provider_cls:
            raise KeyError(f"Unknown graph provider '{identifier}'")
        LOGGER.info("Creating graph provider '%s'", identifier)
        return provider_cls(**options)


REGISTRY = GraphProviderRegistry()
