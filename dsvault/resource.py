"""
Vault collection resource — adapter and resolver for the host framework.

Resources of format ``dsvault.collection`` look like:

    {
        "url": "http://localhost:8000/collection/my-collection",
        "format": "dsvault.collection",
        "identity": "my-collection",   # collection name
        "secret": "my-api-key",
    }

The endpoint is everything in ``url`` before ``/collection/``; the collection
name comes from ``identity`` so names containing slashes survive intact.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from dsvault.collection import VaultCollectionClient
from dsvault.errors import ConfigurationError
from dsvault.models import COLLECTION_FORMAT, ObjectHashRecord, ResourceDescriptor
from dsvault.registry import is_resource_suitable

logger = logging.getLogger(__name__)

EXPECTED_FORMATS = (COLLECTION_FORMAT,)

_COLLECTION_SUFFIX = re.compile(r"/collection/.*$")


def endpoint_from_url(url: str) -> str:
    """Strip the ``/collection/...`` suffix from a resource URL."""
    return _COLLECTION_SUFFIX.sub("", url).rstrip("/")


def _as_descriptor(resource: ResourceDescriptor | Mapping[str, Any]) -> ResourceDescriptor:
    if isinstance(resource, ResourceDescriptor):
        return resource
    return ResourceDescriptor.from_mapping(resource)


class VaultResourceClient:
    """Resource client wrapping a lazily created VaultCollectionClient."""

    def __init__(
        self,
        resource: ResourceDescriptor | Mapping[str, Any],
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        descriptor = _as_descriptor(resource)
        if not descriptor.has_format(*EXPECTED_FORMATS):
            raise ConfigurationError(
                f"Invalid resource format: '{descriptor.format}'. "
                f"Expected one of: {', '.join(EXPECTED_FORMATS)}"
            )
        if not _COLLECTION_SUFFIX.search(descriptor.url):
            raise ConfigurationError(
                f"Invalid resource url: '{descriptor.url}'. Expected {{endpoint}}/collection/{{name}}"
            )
        if not descriptor.identity:
            raise ConfigurationError("Invalid resource: 'identity' (collection name) is required")
        self._resource = descriptor
        self._transport = transport
        self._collection: VaultCollectionClient | None = None
        self._lock = threading.Lock()

    def get_resource(self) -> ResourceDescriptor:
        return self._resource

    def get_connection(self) -> VaultCollectionClient:
        """Return the collection client, creating it on first use."""
        if self._collection is None:
            with self._lock:
                if self._collection is None:
                    self._collection = self._create_collection()
        return self._collection

    def get_value(self) -> VaultCollectionClient:
        """Resource value as materialised by the host (the collection client)."""
        return self.get_connection()

    def close(self) -> None:
        """Nothing to release: the collection client keeps no open connection."""

    def list_objects(self) -> list[str]:
        return self.get_connection().list_objects()

    def list_hashes(self) -> list[ObjectHashRecord]:
        return self.get_connection().list_hashes()

    def get_hash(self, name: str) -> str:
        return self.get_connection().get_hash(name)

    def download(self, name: str) -> bytes:
        return self.get_connection().download(name)

    def _create_collection(self) -> VaultCollectionClient:
        resource = self._resource
        endpoint = endpoint_from_url(resource.url)
        logger.info("Connecting to vault collection %s at %s", resource.identity, endpoint)
        return VaultCollectionClient(
            endpoint=endpoint,
            collection=resource.identity,
            api_key=resource.secret,
            transport=self._transport,
        )


class VaultResourceResolver:
    """Claims ``dsvault.collection`` resources and builds VaultResourceClients."""

    name = "VaultResourceResolver"

    def __init__(
        self,
        suitability: Callable[[Any], bool] = is_resource_suitable,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._suitability = suitability
        self._transport = transport

    def is_for(self, resource: Any) -> bool:
        if not self._suitability(resource):
            return False
        if isinstance(resource, ResourceDescriptor):
            fmt = resource.format
        elif isinstance(resource, Mapping):
            fmt = resource.get("format")
        else:
            return False
        return isinstance(fmt, str) and fmt.lower() in EXPECTED_FORMATS

    def new_client(self, resource: Any) -> VaultResourceClient | None:
        if not self.is_for(resource):
            return None
        return VaultResourceClient(resource, transport=self._transport)
