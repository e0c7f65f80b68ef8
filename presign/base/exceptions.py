"""
Presign exception hierarchy.

Two kinds of failure reach callers: :class:`ConfigurationError` when the
settings needed to talk to S3 are missing or malformed, and
:class:`StorageRequestError` when S3 (or the transport in front of it)
rejects a request. Both inherit from :class:`PresignError`.
"""

from __future__ import annotations


# ── Base ──────────────────────────────────────────────────────────────
class PresignError(Exception):
    """Root exception for all presign errors."""


# ── Configuration ─────────────────────────────────────────────────────
class ConfigurationError(PresignError):
    """Required configuration is missing or invalid.

    Raised before any network activity takes place.
    """


# ── Storage requests ──────────────────────────────────────────────────
class StorageRequestError(PresignError):
    """S3 rejected a request or the call never reached it.

    Attributes:
        message: Human-readable description.
        code: Provider error code (e.g. ``AccessDenied``) or the botocore
            exception name for transport failures.
        status_code: HTTP status reported by S3, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        details = [str(part) for part in (self.code, self.status_code) if part is not None]
        if not details:
            return self.message
        return f"{self.message} [{' '.join(details)}]"


class AccessDeniedError(StorageRequestError):
    """Credentials were rejected or lack permission."""


class BucketNotFoundError(StorageRequestError):
    """Bucket does not exist."""
