"""
Centralized configuration for dsvault.

All configuration is loaded from environment variables with sensible defaults.

Usage:
    from dsvault.config import get_config
    cfg = get_config()
    print(cfg.endpoint)      # "http://localhost:8000" or $DSVAULT_ENDPOINT
    print(cfg.collection)    # $DSVAULT_COLLECTION
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dsvault.models import COLLECTION_FORMAT, ResourceDescriptor

DEFAULT_ENDPOINT = "http://localhost:8000"


@dataclass(frozen=True)
class VaultConfig:
    """Connection parameters for a single vault collection."""

    endpoint: str = DEFAULT_ENDPOINT
    collection: str = ""
    api_key: str = field(default="", repr=False)
    log_level: str = "WARNING"

    @property
    def resource_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/collection/{self.collection}"

    def as_resource(self) -> ResourceDescriptor:
        """Describe this collection the way a host framework would."""
        return ResourceDescriptor(
            url=self.resource_url,
            format=COLLECTION_FORMAT,
            identity=self.collection,
            secret=self.api_key,
        )


# Singleton
_config: VaultConfig | None = None


def get_config() -> VaultConfig:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_from_env() -> VaultConfig:
    """Load configuration from environment variables."""
    return VaultConfig(
        endpoint=os.environ.get("DSVAULT_ENDPOINT", DEFAULT_ENDPOINT),
        collection=os.environ.get("DSVAULT_COLLECTION", ""),
        api_key=os.environ.get("DSVAULT_API_KEY", ""),
        log_level=os.environ.get("DSVAULT_LOG_LEVEL", "WARNING").upper(),
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
