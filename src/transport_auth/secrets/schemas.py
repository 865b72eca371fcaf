"""Pydantic schemas for secrets and the auth options built from them."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import SecretManifestError


class Secret(BaseModel):
    """Decrypted secret record: a display name plus raw field payloads."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str | None = None
    data: Mapping[str, bytes] = Field(default_factory=dict, validate_default=True)

    @field_validator("data")
    @classmethod
    def _read_only(cls, value: Mapping[str, bytes]) -> Mapping[str, bytes]:
        return MappingProxyType(dict(value))

    def get(self, field: str) -> bytes:
        """Return the payload for ``field`` or ``b""`` when it is missing."""

        return self.data.get(field, b"")

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> Secret:
        """Build a secret from a Kubernetes ``Secret`` manifest.

        ``data`` values are base64 encoded; ``stringData`` values are plain
        text and take precedence over ``data`` entries with the same key, as
        the API server does on write.
        """

        metadata = manifest.get("metadata") or {}
        name = metadata.get("name")
        if not name:
            raise SecretManifestError("Secret manifest is missing 'metadata.name'")

        data: dict[str, bytes] = {}
        for key, value in (manifest.get("data") or {}).items():
            try:
                data[key] = base64.b64decode(value or "", validate=True)
            except (binascii.Error, ValueError) as exc:
                raise SecretManifestError(
                    f"invalid '{name}' secret data: field '{key}' is not valid base64"
                ) from exc
        for key, value in (manifest.get("stringData") or {}).items():
            data[key] = str(value).encode("utf-8")

        return cls(name=name, namespace=metadata.get("namespace"), data=data)


class BasicAuthOption(BaseModel):
    """HTTP Basic credentials for the downstream client."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["basic_auth"] = "basic_auth"
    username: str
    password: str = Field(repr=False)


class TLSClientConfigOption(BaseModel):
    """Paths of TLS material; empty strings mark files that were not written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tls_client_config"] = "tls_client_config"
    cert_file: str = ""
    key_file: str = ""
    ca_file: str = ""


AuthOption: TypeAlias = BasicAuthOption | TLSClientConfigOption


__all__ = [
    "AuthOption",
    "BasicAuthOption",
    "Secret",
    "TLSClientConfigOption",
]
