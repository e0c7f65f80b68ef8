"""AWS client factory.

Builds the boto3 S3 client that backs :class:`presign.aws.storage.Storage`.
Construction is local; no request is sent to AWS here.
"""

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from presign.base.config import StorageConfig
from presign.base.exceptions import ConfigurationError

# SigV4 query signing puts X-Amz-Expires and X-Amz-SignedHeaders in the URL;
# virtual-hosted addressing yields https://<bucket>.s3.<region>.amazonaws.com/<key>.
_CLIENT_CONFIG = Config(
    signature_version="s3v4",
    s3={"addressing_style": "virtual"},
)


def create_client(config: StorageConfig):
    """Create an S3 client bound to one region and credential pair.

    Args:
        config: Validated storage configuration.

    Returns:
        A botocore S3 client. It holds no per-request state and may be
        shared freely.

    Raises:
        ConfigurationError: If botocore rejects the region or credentials
            (e.g. a malformed region name).
    """
    try:
        return boto3.client(
            "s3",
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            region_name=config.region_name,
            config=_CLIENT_CONFIG,
        )
    except (BotoCoreError, ValueError) as e:
        raise ConfigurationError(
            f"Cannot create S3 client for region '{config.region_name}': {e}"
        ) from e
