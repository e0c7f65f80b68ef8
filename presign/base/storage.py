"""Storage capability blueprint."""

from abc import ABC, abstractmethod


class StorageBlueprint(ABC):
    """The narrow storage interface the presign service depends on.

    Exactly three capabilities: list buckets, sign a download URL and
    sign an upload URL. The AWS S3 implementation lives in
    :mod:`presign.aws.storage`; tests substitute mocks.
    """

    @abstractmethod
    def list_buckets(self) -> list[str]:
        """List the bucket names visible to the configured credentials.

        Returns:
            Bucket names in the order the provider reports them. Empty
            when there are none.
        """
        pass

    @abstractmethod
    def presign_get(
        self,
        bucket_name: str,
        key: str,
        expires_in: int,
        *,
        response_content_type: str | None = None,
        response_content_disposition: str | None = None,
    ) -> str:
        """Sign a time-limited download URL for one object.

        Args:
            bucket_name: Bucket containing the object.
            key: Object key.
            expires_in: URL lifetime in seconds.
            response_content_type: Content-Type S3 should answer with.
            response_content_disposition: Content-Disposition S3 should
                answer with (e.g. ``attachment; filename="a.png"``).

        Returns:
            An absolute URL string.
        """
        pass

    @abstractmethod
    def presign_put(
        self,
        bucket_name: str,
        key: str,
        content_type: str,
        expires_in: int,
    ) -> str:
        """Sign a time-limited upload URL bound to a content type.

        The content type is part of the signature, so uploads that send a
        different ``Content-Type`` header are rejected by S3.

        Args:
            bucket_name: Target bucket.
            key: Object key to write.
            content_type: Content-Type the uploader must send.
            expires_in: URL lifetime in seconds.

        Returns:
            An absolute URL string.
        """
        pass
