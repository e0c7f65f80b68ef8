"""Presign service.

:class:`PresignService` pairs a :class:`~presign.base.config.StorageConfig`
with a storage capability and exposes the three operations callers use:
list buckets, presign a download, presign an upload. Input checks run
here, before the storage capability is touched.
"""

from __future__ import annotations

from presign.base import AsyncMixin, StorageBlueprint
from presign.base.config import StorageConfig
from presign.base.exceptions import StorageRequestError
from presign.base.logger import presign_logger

DEFAULT_EXPIRES_IN = 3600
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _check_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError("Object key must be a non-empty string.")


def _check_expires_in(expires_in: int) -> None:
    # bool is an int subclass; True must not pass as one second.
    if isinstance(expires_in, bool) or not isinstance(expires_in, int):
        raise ValueError(f"expires_in must be an integer number of seconds, got {expires_in!r}.")
    if expires_in <= 0:
        raise ValueError(f"expires_in must be positive, got {expires_in}.")


class PresignService(AsyncMixin):
    """List buckets and generate pre-signed object URLs.

    Each call is independent; the service holds no mutable state, so one
    instance can serve any number of concurrent callers. ``alist_buckets``,
    ``apresign_get`` and ``apresign_put`` are awaitable twins of the
    synchronous methods.

    Attributes:
        config: The configuration the service was built with.
        storage: Storage capability used for every operation.
    """

    async_methods = ("list_buckets", "presign_get", "presign_put")

    def __init__(self, config: StorageConfig, storage: StorageBlueprint) -> None:
        self.config = config
        self.storage = storage

    def list_buckets(self) -> list[str]:
        """Return the bucket names visible to the configured credentials.

        Raises:
            StorageRequestError: If S3 rejects the request or is unreachable.
        """
        try:
            names = self.storage.list_buckets()
        except StorageRequestError as e:
            presign_logger.error(
                "Listing buckets failed", operation="list_buckets", code=e.code
            )
            raise
        presign_logger.info(f"Listed {len(names)} bucket(s)", operation="list_buckets")
        return list(names)

    def presign_get(
        self,
        key: str,
        expires_in: int = DEFAULT_EXPIRES_IN,
        *,
        response_content_type: str | None = None,
        response_content_disposition: str | None = None,
    ) -> str:
        """Return a pre-signed download URL for *key* in the configured bucket.

        Args:
            key: Object key.
            expires_in: URL lifetime in seconds.
            response_content_type: Optional Content-Type override for the response.
            response_content_disposition: Optional Content-Disposition
                override for the response.

        Raises:
            ConfigurationError: If no bucket is configured.
            ValueError: If *key* is empty or *expires_in* is not positive.
            StorageRequestError: If the URL cannot be signed.
        """
        bucket = self.config.require_bucket()
        _check_key(key)
        _check_expires_in(expires_in)
        url = self.storage.presign_get(
            bucket,
            key,
            expires_in,
            response_content_type=response_content_type,
            response_content_disposition=response_content_disposition,
        )
        presign_logger.debug(
            f"Signed GET URL valid for {expires_in}s",
            operation="presign_get",
            bucket=bucket,
            key=key,
        )
        return url

    def presign_put(
        self,
        key: str,
        content_type: str = DEFAULT_CONTENT_TYPE,
        expires_in: int = DEFAULT_EXPIRES_IN,
    ) -> str:
        """Return a pre-signed upload URL for *key* bound to *content_type*.

        Raises:
            ConfigurationError: If no bucket is configured.
            ValueError: If *key* or *content_type* is empty, or
                *expires_in* is not positive.
            StorageRequestError: If the URL cannot be signed.
        """
        bucket = self.config.require_bucket()
        _check_key(key)
        if not isinstance(content_type, str) or not content_type.strip():
            raise ValueError("content_type must be a non-empty string.")
        _check_expires_in(expires_in)
        url = self.storage.presign_put(bucket, key, content_type, expires_in)
        presign_logger.debug(
            f"Signed PUT URL for {content_type} valid for {expires_in}s",
            operation="presign_put",
            bucket=bucket,
            key=key,
        )
        return url
