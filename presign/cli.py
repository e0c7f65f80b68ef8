"""presign CLI: list buckets and print pre-signed URLs from the command line.

Usage examples::

    presign list-buckets
    presign --bucket demo-bucket presign-get gym_memory.png
    presign --bucket demo-bucket --content-type image/png presign-put gym_memory.png
    presign --env-file .env demo
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from presign.base.config import load_config, load_env_file
from presign.base.exceptions import ConfigurationError, PresignError
from presign.base.logger import presign_logger
from presign.factory import create_service
from presign.service import DEFAULT_CONTENT_TYPE, DEFAULT_EXPIRES_IN, PresignService

DEMO_KEY = "gym_memory.png"

_OPERATIONS = ("list-buckets", "presign-get", "presign-put", "demo")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``presign`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="presign",
        description="List S3 buckets and generate pre-signed object URLs",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="KEY=value file loaded before reading the environment (default: .env)",
    )
    parser.add_argument("--region", "-r", help="AWS region, overrides AWS_REGION")
    parser.add_argument("--bucket", "-b", help="Bucket name, overrides AWS_BUCKET_NAME")
    parser.add_argument(
        "--expires-in", "-e",
        type=int,
        default=DEFAULT_EXPIRES_IN,
        help="URL lifetime in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "--content-type", "-t",
        default=DEFAULT_CONTENT_TYPE,
        help="Content-Type an upload URL is bound to (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Emit debug logs",
    )
    parser.add_argument(
        "operation",
        choices=_OPERATIONS,
        help="Operation to perform",
    )
    parser.add_argument(
        "args",
        nargs="*",
        help="Object key for presign-get / presign-put (optional for demo)",
    )
    return parser


def _run(svc: PresignService, ns: argparse.Namespace, parser: argparse.ArgumentParser) -> Any:
    if ns.operation == "list-buckets":
        return svc.list_buckets()
    if ns.operation == "demo":
        key = ns.args[0] if ns.args else DEMO_KEY
        return {
            "buckets": svc.list_buckets(),
            "get_url": svc.presign_get(key, ns.expires_in),
            "put_url": svc.presign_put(key, ns.content_type, ns.expires_in),
        }
    if len(ns.args) != 1:
        parser.error(f"{ns.operation} requires exactly one object KEY")
    if ns.operation == "presign-get":
        return svc.presign_get(ns.args[0], ns.expires_in)
    return svc.presign_put(ns.args[0], ns.content_type, ns.expires_in)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Loads the env file, builds the service from the environment plus any
    ``--region`` / ``--bucket`` overrides, and runs the operation. Lists
    and dicts are printed as JSON, URLs as plain text. Configuration and
    request failures exit with status 1.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    if ns.verbose:
        presign_logger.set_level(logging.DEBUG)

    load_env_file(ns.env_file)
    overrides = {
        field: value
        for field, value in (("region_name", ns.region), ("bucket_name", ns.bucket))
        if value
    }

    try:
        svc = create_service(load_config(**overrides))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = _run(svc, ns, parser)
    except (PresignError, ValueError) as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)

    if isinstance(result, (dict, list)):
        print(json.dumps(result, indent=2))
    else:
        print(result)


if __name__ == "__main__":
    main()
