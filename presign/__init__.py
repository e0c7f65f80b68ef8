"""presign: list S3 buckets and hand out time-limited object URLs.

Build a service from the environment and sign URLs with a single call::

    from presign import create_service

    service = create_service()
    url = service.presign_get("gym_memory.png")
"""

from .base import StorageBlueprint
from .base.config import StorageConfig, load_config, load_env_file
from .base.exceptions import (
    PresignError,
    ConfigurationError,
    StorageRequestError,
    AccessDeniedError,
    BucketNotFoundError,
)
from .service import PresignService
from .factory import create_client, create_service

__all__ = [
    "StorageBlueprint",
    "StorageConfig",
    "load_config",
    "load_env_file",
    "PresignError",
    "ConfigurationError",
    "StorageRequestError",
    "AccessDeniedError",
    "BucketNotFoundError",
    "PresignService",
    "create_client",
    "create_service",
]
