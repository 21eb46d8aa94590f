"""Mini README: Built-in dependency-graph providers.

Importing this package registers every built-in provider with
``dependencies.registry.REGISTRY``.
"""

from .manifest_provider import ManifestGraphProvider
from .memory_provider import InMemoryGraphProvider

__all__ = ["InMemoryGraphProvider", "ManifestGraphProvider"]
