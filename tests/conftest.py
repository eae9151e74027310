"""Fixtures for dsvault tests — an in-memory fake of the vault HTTP API."""

from __future__ import annotations

import json

import httpx
import pytest

API_KEY = "test-key"
COLLECTION = "c1"
ENDPOINT = "http://h:8000"


class FakeVault:
    """Serves one collection over httpx.MockTransport and records requests."""

    def __init__(self, collection: str = COLLECTION, api_key: str = API_KEY) -> None:
        self.collection = collection
        self.api_key = api_key
        self.objects: dict[str, bytes] = {}
        self.hashes: dict[str, str] = {}
        self.requests: list[httpx.Request] = []
        self.fail_status: int | None = None
        self.raw_body: bytes | None = None

    def add(self, name: str, content: bytes, digest: str) -> None:
        self.objects[name] = content
        self.hashes[name] = digest

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"detail": "boom"})
        if self.raw_body is not None:
            return httpx.Response(200, content=self.raw_body)
        if request.headers.get("X-Collection-Key") != self.api_key:
            return httpx.Response(401, json={"detail": "Invalid collection key"})

        prefix = f"/api/v1/collections/{self.collection}"
        path = request.url.path
        if not path.startswith(prefix):
            return httpx.Response(404, json={"detail": "Collection not found"})
        rest = path[len(prefix):]

        if rest == "/objects":
            return _json({"collection": self.collection, "objects": sorted(self.objects)})
        if rest == "/hashes":
            items = [{"name": n, "hash_sha256": h} for n, h in sorted(self.hashes.items())]
            return _json({"collection": self.collection, "items": items})
        if rest.startswith("/hashes/"):
            name = rest[len("/hashes/"):]
            if name not in self.hashes:
                return httpx.Response(404, json={"detail": "Object not found"})
            return _json({"collection": self.collection, "name": name, "hash_sha256": self.hashes[name]})
        if rest.startswith("/objects/"):
            name = rest[len("/objects/"):]
            if name not in self.objects:
                return httpx.Response(404, json={"detail": "Object not found"})
            return httpx.Response(200, content=self.objects[name])
        return httpx.Response(404, json={"detail": "Not found"})


def _json(payload: dict) -> httpx.Response:
    return httpx.Response(
        200,
        content=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def vault():
    return FakeVault()


@pytest.fixture
def resource():
    return {
        "url": f"{ENDPOINT}/collection/{COLLECTION}",
        "format": "dsvault.collection",
        "identity": COLLECTION,
        "secret": API_KEY,
    }


@pytest.fixture
def endpoint():
    return ENDPOINT
