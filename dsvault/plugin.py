"""Startup/shutdown hooks that expose the vault resolver to a registry.

Call ``register()`` once during application startup and ``unregister()`` on
shutdown. Importing dsvault registers nothing.
"""

from __future__ import annotations

import logging

from dsvault.registry import ResolverRegistry, get_registry
from dsvault.resource import VaultResourceResolver

logger = logging.getLogger(__name__)


def register(registry: ResolverRegistry | None = None) -> VaultResourceResolver:
    """Create the vault resolver and add it to the registry."""
    registry = registry or get_registry()
    resolver = VaultResourceResolver()
    logger.info("Registering %s...", type(resolver).__name__)
    registry.register(resolver)
    return resolver


def unregister(registry: ResolverRegistry | None = None) -> bool:
    """Remove the vault resolver. Returns True if it was registered."""
    registry = registry or get_registry()
    return registry.unregister(VaultResourceResolver.name)
