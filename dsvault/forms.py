"""
Operator form descriptor for the ``dsvault-collection`` resource type.

SETTINGS is static metadata a host configuration UI renders as a form;
``as_resource()`` turns the submitted values into a ResourceDescriptor.

Canonical parameters are ``host``, optional ``port`` and ``collection``;
the resource URL is assembled as ``http://{host}:{port}/collection/{collection}``
(``:{port}`` dropped when no port is given, and ``host`` used verbatim when it
already carries a scheme).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from dsvault.models import COLLECTION_FORMAT, ResourceDescriptor

RESOURCE_TYPE = "dsvault-collection"

SETTINGS: dict[str, Any] = {
    "title": "DataSHIELD Vault Resources",
    "description": "Provides access to DataSHIELD Vault collections for secure medical data storage.",
    "web": "https://github.com/isglobal-brge/dsVault",
    "categories": [
        {
            "name": RESOURCE_TYPE,
            "title": "dsVault Collection",
            "description": (
                'The resource connects to a <a href="https://github.com/isglobal-brge/dsVault" '
                'target="_blank">DataSHIELD Vault</a> collection.'
            ),
        },
    ],
    "types": [
        {
            "name": RESOURCE_TYPE,
            "title": "DataSHIELD Vault Collection",
            "description": "Connection to a DataSHIELD Vault collection containing medical images or other data.",
            "tags": [RESOURCE_TYPE],
            "parameters": {
                "$schema": "http://json-schema.org/schema#",
                "type": "array",
                "items": [
                    {
                        "key": "host",
                        "type": "string",
                        "title": "Host",
                        "description": "The hostname or IP address of the Vault API",
                    },
                    {
                        "key": "port",
                        "type": "integer",
                        "title": "Port",
                        "description": "The port number of the Vault API",
                    },
                    {
                        "key": "collection",
                        "type": "string",
                        "title": "Collection Name",
                        "description": "The name of the collection in the vault",
                    },
                ],
                "required": ["host", "collection"],
            },
            "credentials": {
                "$schema": "http://json-schema.org/schema#",
                "type": "array",
                "items": [
                    {
                        "key": "apikey",
                        "type": "string",
                        "title": "Vault Key",
                        "format": "password",
                        "description": "The API key for accessing the collection",
                    },
                ],
                "required": ["apikey"],
            },
        },
    ],
}


def build_url(host: str, port: int | str | None, collection: str) -> str:
    base = host if "://" in host else f"http://{host}"
    base = base.rstrip("/")
    if port not in (None, ""):
        base = f"{base}:{port}"
    return f"{base}/collection/{collection}"


def _to_vault_resource(
    name: str, params: Mapping[str, Any], credentials: Mapping[str, Any]
) -> ResourceDescriptor:
    collection = str(params["collection"])
    return ResourceDescriptor(
        name=name,
        url=build_url(str(params["host"]), params.get("port"), collection),
        format=COLLECTION_FORMAT,
        identity=collection,
        secret=str(credentials.get("apikey") or ""),
    )


_RESOURCE_FACTORIES = {
    RESOURCE_TYPE: _to_vault_resource,
}


def as_resource(
    type: str,
    name: str,
    params: Mapping[str, Any],
    credentials: Mapping[str, Any],
) -> ResourceDescriptor | None:
    """Map submitted form values to a resource. Unknown types give None."""
    factory = _RESOURCE_FACTORIES.get(type)
    if factory is None:
        return None
    return factory(name, params, credentials)


def settings_json(indent: int | None = 2) -> str:
    return json.dumps(SETTINGS, indent=indent)
