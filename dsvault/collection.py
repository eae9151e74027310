"""
HTTP client for a single DataSHIELD Vault collection.

Every request goes to ``{endpoint}/api/v1/collections/{collection}`` and is
authenticated with the ``X-Collection-Key`` header.

Usage:
    from dsvault.collection import VaultCollectionClient

    vault = VaultCollectionClient("http://localhost:8000", "my-collection", "my-api-key")
    vault.list_objects()              # ["file.csv", ...]
    vault.list_hashes()               # [ObjectHashRecord(name="file.csv", hash_sha256="..."), ...]
    vault.get_hash("file.csv")        # "e3b0c442..."
    content = vault.download("file.csv")  # raw bytes, in memory
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from dsvault.errors import InvalidNameError, RemoteError
from dsvault.models import (
    HashListResponse,
    ObjectHashRecord,
    ObjectListResponse,
    SingleHashResponse,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1/collections"
KEY_HEADER = "X-Collection-Key"

_M = TypeVar("_M", bound=BaseModel)


def object_path(name: str) -> str:
    """Percent-encode an object name for use as a URL path suffix.

    ``/`` is kept so nested names map onto nested paths; ``?``, ``#``, ``%``
    and spaces are escaped.
    """
    if not name:
        raise InvalidNameError("Object name must be a non-empty string")
    return quote(name, safe="/")


class VaultCollectionClient:
    """Synchronous client for one vault collection."""

    def __init__(
        self,
        endpoint: str,
        collection: str,
        api_key: str,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.collection = collection
        self._api_key = api_key
        self._transport = transport
        self.base_url = f"{self.endpoint}{API_PREFIX}/{quote(collection, safe='/')}"

    def __repr__(self) -> str:
        return f"VaultCollectionClient(collection={self.collection!r}, endpoint={self.endpoint!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VaultCollectionClient):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> tuple[str, str, str]:
        return (self.endpoint, self.collection, self._api_key)

    # ─── Operations ──────────────────────────────────────────────────

    def list_objects(self) -> list[str]:
        """GET /objects — names of all objects in the collection."""
        return self._get_model("/objects", ObjectListResponse).objects

    def list_hashes(self) -> list[ObjectHashRecord]:
        """GET /hashes — SHA-256 hash of every object. Empty collection gives []."""
        return self._get_model("/hashes", HashListResponse).items

    def get_hash(self, name: str) -> str:
        """GET /hashes/{name} — SHA-256 hash of a single object."""
        return self._get_model(f"/hashes/{object_path(name)}", SingleHashResponse).hash_sha256

    def download(self, name: str) -> bytes:
        """GET /objects/{name} — full object content, loaded into memory."""
        return self._get(f"/objects/{object_path(name)}").content

    # ─── HTTP plumbing ───────────────────────────────────────────────

    def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            with httpx.Client(transport=self._transport) as client:
                resp = client.get(url, headers={KEY_HEADER: self._api_key})
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Vault request failed: GET %s -> HTTP %d", url, status)
            raise RemoteError(
                f"HTTP {status} from vault for GET {url}", status_code=status, url=url
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Vault request failed: GET %s -> %s", url, e)
            raise RemoteError(f"Request to vault failed for GET {url}: {e}", url=url) from e
        return resp

    def _get_model(self, path: str, model: type[_M]) -> _M:
        resp = self._get(path)
        try:
            payload: Any = resp.json()
        except ValueError as e:
            raise RemoteError(
                f"Vault returned a non-JSON body for GET {resp.request.url}",
                status_code=resp.status_code,
                url=str(resp.request.url),
            ) from e
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise RemoteError(
                f"Unexpected response shape from vault for GET {resp.request.url}: {e}",
                status_code=resp.status_code,
                url=str(resp.request.url),
            ) from e
