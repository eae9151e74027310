"""
dsvault CLI — inspect a vault collection from the shell.

Usage:
    dsvault objects              # List object names
    dsvault hashes               # List name + SHA-256 for every object
    dsvault hash NAME            # SHA-256 of one object
    dsvault download NAME -o F   # Save an object to a file (stdout if no -o)
    dsvault form                 # Print the resource form descriptor (JSON)
    dsvault version              # Show version

The collection is taken from DSVAULT_ENDPOINT, DSVAULT_COLLECTION and
DSVAULT_API_KEY; --endpoint and --collection override the first two.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dsvault.errors import DSVaultError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dsvault",
        description="dsvault — read objects and hashes from a DataSHIELD Vault collection.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--endpoint", help="Vault base URL (default: $DSVAULT_ENDPOINT)")
    parser.add_argument("--collection", help="Collection name (default: $DSVAULT_COLLECTION)")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("objects", help="List objects in the collection")
    subparsers.add_parser("hashes", help="List SHA-256 hashes of all objects")

    hash_parser = subparsers.add_parser("hash", help="Show the SHA-256 hash of one object")
    hash_parser.add_argument("name", help="Object name")

    dl_parser = subparsers.add_parser("download", help="Download an object")
    dl_parser.add_argument("name", help="Object name")
    dl_parser.add_argument("--output", "-o", type=Path, help="Destination file (default: stdout)")

    subparsers.add_parser("form", help="Print the resource form descriptor as JSON")
    subparsers.add_parser("version", help="Show version")

    args = parser.parse_args(argv)

    if args.version or args.command == "version":
        from dsvault import __version__

        print(f"dsvault {__version__}")
        return 0

    _configure_logging()

    if args.command == "form":
        from dsvault.forms import settings_json

        print(settings_json())
        return 0

    if args.command not in ("objects", "hashes", "hash", "download"):
        parser.print_help()
        return 0

    return _cmd_collection(args)


def _configure_logging() -> None:
    from dsvault.config import get_config

    logging.basicConfig(
        level=getattr(logging, get_config().log_level, logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _cmd_collection(args: argparse.Namespace) -> int:
    from dsvault.config import get_config
    from dsvault.resource import VaultResourceClient

    cfg = get_config()
    if args.endpoint:
        cfg = replace(cfg, endpoint=args.endpoint)
    if args.collection:
        cfg = replace(cfg, collection=args.collection)

    if not cfg.collection:
        print("Error: no collection configured (set DSVAULT_COLLECTION or pass --collection).", file=sys.stderr)
        return 2
    if not cfg.api_key:
        print("Error: DSVAULT_API_KEY is not set.", file=sys.stderr)
        return 2

    client = VaultResourceClient(cfg.as_resource())
    try:
        if args.command == "objects":
            for name in client.list_objects():
                print(name)
        elif args.command == "hashes":
            for record in client.list_hashes():
                print(f"{record.hash_sha256}  {record.name}")
        elif args.command == "hash":
            print(client.get_hash(args.name))
        elif args.command == "download":
            content = client.download(args.name)
            if args.output:
                args.output.write_bytes(content)
                print(f"Saved {len(content)} bytes to {args.output}")
            else:
                sys.stdout.buffer.write(content)
                sys.stdout.flush()
    except DSVaultError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
