"""
dsvault — DataSHIELD Vault connector.

Public API:
    VaultCollectionClient(endpoint, collection, api_key)  → HTTP client for one collection
    VaultResourceClient(resource)                         → resource adapter (lazy client)
    VaultResourceResolver()                               → claims "dsvault.collection" resources
    plugin.register() / plugin.unregister()               → expose the resolver to a registry
"""

from __future__ import annotations

from dsvault import plugin
from dsvault.collection import VaultCollectionClient
from dsvault.errors import ConfigurationError, DSVaultError, InvalidNameError, RemoteError
from dsvault.models import COLLECTION_FORMAT, ObjectHashRecord, ResourceDescriptor
from dsvault.registry import ResolverRegistry, get_registry
from dsvault.resource import VaultResourceClient, VaultResourceResolver

__version__ = "0.1.0"

__all__ = [
    "COLLECTION_FORMAT",
    "ConfigurationError",
    "DSVaultError",
    "InvalidNameError",
    "ObjectHashRecord",
    "RemoteError",
    "ResolverRegistry",
    "ResourceDescriptor",
    "VaultCollectionClient",
    "VaultResourceClient",
    "VaultResourceResolver",
    "get_registry",
    "plugin",
]
