"""AWS S3 implementation of the Storage blueprint."""

from typing import NoReturn

from botocore.exceptions import BotoCoreError, ClientError

from presign.aws.factory import create_client
from presign.base import StorageBlueprint
from presign.base.config import StorageConfig
from presign.base.exceptions import (
    AccessDeniedError,
    BucketNotFoundError,
    StorageRequestError,
)

_ERROR_MAP = {
    "AccessDenied": AccessDeniedError,
    "InvalidAccessKeyId": AccessDeniedError,
    "SignatureDoesNotMatch": AccessDeniedError,
    "NoSuchBucket": BucketNotFoundError,
}


def _handle_client_error(e: ClientError, message: str) -> NoReturn:
    """Raise a mapped exception or a generic StorageRequestError."""
    error = e.response.get("Error", {})
    code = error.get("Code")
    provider_message = error.get("Message")
    if provider_message:
        message = f"{message} {provider_message}"
    exc_class = _ERROR_MAP.get(code, StorageRequestError)
    raise exc_class(
        message,
        code=code,
        status_code=e.response.get("ResponseMetadata", {}).get("HTTPStatusCode"),
    ) from e


def _handle_botocore_error(e: BotoCoreError, message: str) -> NoReturn:
    """Raise a StorageRequestError for failures that never got an S3 response."""
    raise StorageRequestError(f"{message} {e}", code=type(e).__name__) from e


class Storage(StorageBlueprint):
    """AWS S3 implementation of the storage capability.

    Attributes:
        client: boto3 S3 client, shared across all calls.
        region: AWS region name.
    """

    _METHOD_TO_CLIENT_METHOD = {
        "GET": "get_object",
        "PUT": "put_object",
    }

    def __init__(self, config: StorageConfig) -> None:
        """Create the S3 client for *config*.

        Args:
            config: Validated storage configuration.

        Raises:
            ConfigurationError: If botocore rejects the configuration.
        """
        self.client = create_client(config)
        self.region = config.region_name

    def list_buckets(self) -> list[str]:
        """List all S3 buckets owned by the authenticated account.

        Sends a single ``ListBuckets`` request. There is no retry.

        Returns:
            Bucket names in response order, ``[]`` if there are none.

        Raises:
            AccessDeniedError: If the credentials are rejected.
            StorageRequestError: If the request fails for any other reason.
        """
        try:
            response = self.client.list_buckets()
        except ClientError as e:
            _handle_client_error(e, "Failed to list buckets.")
        except BotoCoreError as e:
            _handle_botocore_error(e, "Failed to list buckets.")
        return [bucket["Name"] for bucket in response.get("Buckets") or []]

    def presign_get(
        self,
        bucket_name: str,
        key: str,
        expires_in: int,
        *,
        response_content_type: str | None = None,
        response_content_disposition: str | None = None,
    ) -> str:
        """Sign a ``GetObject`` URL.

        Raises:
            StorageRequestError: If botocore cannot sign the request.
        """
        params: dict = {"Bucket": bucket_name, "Key": key}
        if response_content_type:
            params["ResponseContentType"] = response_content_type
        if response_content_disposition:
            params["ResponseContentDisposition"] = response_content_disposition
        return self._presign("GET", params, expires_in)

    def presign_put(
        self,
        bucket_name: str,
        key: str,
        content_type: str,
        expires_in: int,
    ) -> str:
        """Sign a ``PutObject`` URL with ``ContentType`` in the signed headers.

        Raises:
            StorageRequestError: If botocore cannot sign the request.
        """
        params = {"Bucket": bucket_name, "Key": key, "ContentType": content_type}
        return self._presign("PUT", params, expires_in)

    def _presign(self, method: str, params: dict, expires_in: int) -> str:
        try:
            return self.client.generate_presigned_url(  # type: ignore[no-any-return]
                self._METHOD_TO_CLIENT_METHOD[method],
                Params=params,
                ExpiresIn=expires_in,
                HttpMethod=method,
            )
        except ClientError as e:
            _handle_client_error(e, f"Failed to sign {method} URL for '{params['Key']}'.")
        except BotoCoreError as e:
            _handle_botocore_error(e, f"Failed to sign {method} URL for '{params['Key']}'.")
