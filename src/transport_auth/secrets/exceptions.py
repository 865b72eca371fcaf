"""Custom exceptions used by the credential materialization layer."""

from __future__ import annotations

from collections.abc import Sequence


class CredentialsError(Exception):
    """Base error raised for any credential related issue."""


class InvalidCredentialFieldsError(CredentialsError, ValueError):
    """Raised when a secret holds only half of a paired credential."""

    def __init__(self, message: str, *, secret_name: str, fields: Sequence[str]) -> None:
        super().__init__(message)
        self.secret_name = secret_name
        self.fields: tuple[str, ...] = tuple(fields)


class ResourceAllocationError(CredentialsError, OSError):
    """Raised when temporary credential files cannot be created or written."""

    @classmethod
    def from_os_error(cls, exc: OSError) -> ResourceAllocationError:
        """Wrap ``exc`` keeping its errno, message and filename."""

        if exc.errno is None:
            return cls(str(exc))
        return cls(exc.errno, exc.strerror, exc.filename)


class SecretManifestError(CredentialsError, ValueError):
    """Raised when a Kubernetes Secret manifest cannot be converted."""


__all__ = [
    "CredentialsError",
    "InvalidCredentialFieldsError",
    "ResourceAllocationError",
    "SecretManifestError",
]
