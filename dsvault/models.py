"""Vault data models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dsvault.errors import ConfigurationError

# Resource format tag claimed by this connector (compared case-insensitively).
COLLECTION_FORMAT = "dsvault.collection"


class ResourceDescriptor(BaseModel):
    """Generic resource record handed over by the host framework."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    format: str
    identity: str = ""
    secret: str = Field(default="", repr=False)
    name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ResourceDescriptor:
        """Parse an untyped key/value resource.

        Raises ConfigurationError when the input is not a mapping, has no format
        or carries a value of the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Invalid resource: must be a mapping with a 'format' field")
        if data.get("format") is None:
            raise ConfigurationError("Invalid resource: must have a 'format' field")
        try:
            return cls(
                url=str(data.get("url") or ""),
                format=str(data["format"]),
                identity=str(data.get("identity") or ""),
                secret=str(data.get("secret") or ""),
                name=data.get("name"),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid resource: {e}") from e

    def has_format(self, *formats: str) -> bool:
        return self.format.lower() in {f.lower() for f in formats}


class ObjectHashRecord(BaseModel):
    """SHA-256 hash of one stored object."""

    model_config = ConfigDict(frozen=True)

    name: str
    hash_sha256: str


# ─── Wire envelopes ──────────────────────────────────────────────────


class ObjectListResponse(BaseModel):
    objects: list[str]


class HashListResponse(BaseModel):
    items: list[ObjectHashRecord]


class SingleHashResponse(BaseModel):
    hash_sha256: str
