"""Service factory.

Provides :func:`create_service`, the single entry-point for building a
:class:`~presign.service.PresignService`. Configuration comes from the
caller or, when omitted, from the process environment; storage defaults
to the AWS S3 backend.
"""

from __future__ import annotations

from presign.aws.factory import create_client
from presign.aws.storage import Storage
from presign.base import StorageBlueprint
from presign.base.config import StorageConfig, load_config
from presign.service import PresignService


def create_service(
    config: StorageConfig | None = None,
    storage: StorageBlueprint | None = None,
) -> PresignService:
    """Build a presign service.

    Args:
        config: Validated configuration. Read from the environment with
            :func:`~presign.base.config.load_config` when omitted.
        storage: Storage capability. An S3-backed
            :class:`~presign.aws.storage.Storage` is created when omitted.

    Returns:
        A ready-to-use :class:`PresignService`.

    Raises:
        ConfigurationError: If configuration is missing or the S3 client
            cannot be constructed. Nothing is sent over the network.
    """
    if config is None:
        config = load_config()
    if storage is None:
        storage = Storage(config)
    return PresignService(config, storage)


__all__ = ["create_client", "create_service"]
