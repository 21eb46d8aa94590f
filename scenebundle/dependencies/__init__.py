"""Mini README: Dependency graph subsystem.

``base`` holds the provider interface, ``registry`` the plugin registry,
``providers`` the built-in graphs and ``resolver`` the closure computation.
"""

from .base import DependencyGraphProvider
from .registry import REGISTRY, GraphProviderRegistry
from .resolver import DependencyResolver
from . import providers  # noqa: F401  # ensure built-in providers register on import
from .providers import InMemoryGraphProvider, ManifestGraphProvider

__all__ = [
    "DependencyGraphProvider",
    "DependencyResolver",
    "GraphProviderRegistry",
    "InMemoryGraphProvider",
    "ManifestGraphProvider",
    "REGISTRY",
]
