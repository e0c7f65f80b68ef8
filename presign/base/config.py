"""
Pydantic configuration model for the S3 presign service.

The model itself never touches the process environment. Environment
values are only consulted when a mapping is handed in through the
validation context, which is what :func:`load_config` does.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from presign.base.exceptions import ConfigurationError

# Field -> environment variables, first non-empty one wins.
ENV_VARS: dict[str, tuple[str, ...]] = {
    "region_name": ("AWS_REGION", "AWS_DEFAULT_REGION"),
    "aws_access_key_id": ("AWS_ACCESS_KEY_ID",),
    "aws_secret_access_key": ("AWS_SECRET_ACCESS_KEY",),
    "bucket_name": ("AWS_BUCKET_NAME",),
}


class StorageConfig(BaseModel):
    """Settings for one S3 client handle and its default bucket.

    Region and credentials are mandatory. ``bucket_name`` may be left
    unset; the presign operations check it through :meth:`require_bucket`.
    Constructing the model with missing, blank or unknown fields raises
    :class:`ConfigurationError`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    region_name: str = Field(description="AWS region (e.g. 'ap-south-1')")
    aws_access_key_id: str = Field(repr=False, description="AWS access key ID")
    aws_secret_access_key: str = Field(repr=False, description="AWS secret access key")
    bucket_name: str | None = Field(default=None, description="Bucket that presigned URLs point into")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from e

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: Any, info: ValidationInfo) -> Any:
        """Fill missing fields from the ``environ`` mapping in the validation context."""
        environ = (info.context or {}).get("environ")
        if environ is None or not isinstance(values, dict):
            return values
        values = dict(values)
        for field, env_vars in ENV_VARS.items():
            if not values.get(field):
                values[field] = next(
                    (environ[name] for name in env_vars if environ.get(name)), None
                )
        return values

    @field_validator("region_name", "aws_access_key_id", "aws_secret_access_key")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("bucket_name")
    @classmethod
    def blank_bucket_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    def require_bucket(self) -> str:
        """Return the configured bucket name.

        Raises:
            ConfigurationError: If no bucket name is configured.
        """
        if self.bucket_name is None:
            raise ConfigurationError(
                "Bucket name is not configured. Set it explicitly or via "
                "the AWS_BUCKET_NAME environment variable."
            )
        return self.bucket_name


def _describe(error: ValidationError) -> str:
    names = []
    for err in error.errors():
        if not err["loc"]:
            continue
        field = str(err["loc"][0])
        if field in ENV_VARS:
            names.append(f"{field} ({' or '.join(ENV_VARS[field])})")
        else:
            names.append(f"{field} ({err['msg'].lower()})")
    return "Missing or invalid configuration: " + ", ".join(dict.fromkeys(names))


def load_config(environ: Mapping[str, str] | None = None, **overrides: Any) -> StorageConfig:
    """Build a :class:`StorageConfig` from overrides and the environment.

    Explicit keyword overrides win; anything left empty is looked up in
    *environ* (``os.environ`` by default) using :data:`ENV_VARS`.

    Args:
        environ: Mapping to read variables from.
        **overrides: Field values, e.g. ``bucket_name="demo-bucket"``.

    Returns:
        A validated, immutable configuration.

    Raises:
        ConfigurationError: If region or credentials are missing, or an
            unknown field is passed.
    """
    env = os.environ if environ is None else environ
    try:
        return StorageConfig.model_validate(overrides, context={"environ": env})
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e


def load_env_file(path: str | os.PathLike[str] = ".env") -> bool:
    """Load ``KEY=value`` pairs from a local env file into ``os.environ``.

    Variables that are already set are left untouched.

    Returns:
        ``True`` if the file existed and was read.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return False
    load_dotenv(env_path, override=False)
    return True


__all__ = [
    "ENV_VARS",
    "StorageConfig",
    "load_config",
    "load_env_file",
]
