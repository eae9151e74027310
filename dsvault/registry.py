"""
Resolver Registry — the host-side lookup that maps resources to clients.

A resolver is any object with a ``name`` plus ``is_for(resource)`` and
``new_client(resource)``. The registry keeps at most one resolver per name
and asks them in registration order.

Usage:
    from dsvault.registry import get_registry

    registry = get_registry()
    registry.register(VaultResourceResolver())
    client = registry.new_client(resource)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Protocol

from dsvault.errors import ConfigurationError
from dsvault.models import ResourceDescriptor

logger = logging.getLogger(__name__)


class ResourceResolver(Protocol):
    name: str

    def is_for(self, resource: Any) -> bool: ...

    def new_client(self, resource: Any) -> Any | None: ...


def is_resource_suitable(resource: Any) -> bool:
    """Generic check applied before any format-specific test.

    True when the resource carries non-empty ``url`` and ``format`` strings.
    """
    if isinstance(resource, ResourceDescriptor):
        url, fmt = resource.url, resource.format
    elif isinstance(resource, Mapping):
        url, fmt = resource.get("url"), resource.get("format")
    else:
        return False
    return isinstance(url, str) and bool(url) and isinstance(fmt, str) and bool(fmt)


class ResolverRegistry:
    """Thread-safe, ordered collection of resource resolvers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._resolvers: list[ResourceResolver] = []

    def register(self, resolver: ResourceResolver) -> None:
        """Add a resolver, replacing any registered under the same name."""
        with self._lock:
            self._resolvers = [r for r in self._resolvers if r.name != resolver.name]
            self._resolvers.append(resolver)
        logger.debug("Registered resolver %s", resolver.name)

    def unregister(self, name: str) -> bool:
        """Remove a resolver by name. Returns True if one was removed."""
        with self._lock:
            before = len(self._resolvers)
            self._resolvers = [r for r in self._resolvers if r.name != name]
            removed = len(self._resolvers) < before
        if removed:
            logger.debug("Unregistered resolver %s", name)
        return removed

    def resolvers(self) -> list[ResourceResolver]:
        with self._lock:
            return list(self._resolvers)

    def find(self, resource: Any) -> ResourceResolver | None:
        """Return the first resolver that claims the resource, or None."""
        for resolver in self.resolvers():
            if resolver.is_for(resource):
                return resolver
        return None

    def new_client(self, resource: Any) -> Any:
        """Build a client for the resource using the first matching resolver."""
        resolver = self.find(resource)
        if resolver is None:
            raise ConfigurationError("No resource resolver registered for this resource")
        return resolver.new_client(resource)

    def clear(self) -> None:
        with self._lock:
            self._resolvers = []


# Singleton
_registry: ResolverRegistry | None = None


def get_registry() -> ResolverRegistry:
    """Get or create the process-wide resolver registry."""
    global _registry
    if _registry is not None:
        return _registry
    _registry = ResolverRegistry()
    return _registry


def reset_registry() -> None:
    """Reset the process-wide registry (for testing)."""
    global _registry
    _registry = None
