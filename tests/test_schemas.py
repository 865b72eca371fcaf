from __future__ import annotations

import base64

import pytest
from pydantic import ValidationError

from transport_auth.secrets import Secret, SecretManifestError


def _b64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def test_secret_is_frozen() -> None:
    secret = Secret(name="creds", data={"username": b"alice"})

    with pytest.raises(ValidationError):
        secret.name = "other"
    with pytest.raises(TypeError):
        secret.data["username"] = b"mallory"
    with pytest.raises(TypeError):
        Secret(name="empty").data["password"] = b"x"
    assert secret.get("username") == b"alice"


def test_secret_copies_input_mapping() -> None:
    source = {"username": b"alice", "password": b"s3cret"}
    secret = Secret(name="creds", data=source)

    source["password"] = b""

    assert secret.get("password") == b"s3cret"


def test_missing_field_reads_empty() -> None:
    assert Secret(name="creds").get("password") == b""


def test_from_manifest_decodes_data() -> None:
    manifest = {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": {"name": "helm-repo", "namespace": "flux-system"},
        "type": "Opaque",
        "data": {"username": _b64(b"alice"), "caFile": _b64(b"\x00CA\xff")},
    }

    secret = Secret.from_manifest(manifest)

    assert secret.name == "helm-repo"
    assert secret.namespace == "flux-system"
    assert secret.get("username") == b"alice"
    assert secret.get("caFile") == b"\x00CA\xff"


def test_string_data_overrides_data() -> None:
    manifest = {
        "metadata": {"name": "helm-repo"},
        "data": {"password": _b64(b"old")},
        "stringData": {"password": "new", "username": "alice"},
    }

    secret = Secret.from_manifest(manifest)

    assert secret.get("password") == b"new"
    assert secret.get("username") == b"alice"
    assert secret.namespace is None


def test_from_manifest_requires_name() -> None:
    with pytest.raises(SecretManifestError, match="metadata.name"):
        Secret.from_manifest({"data": {}})


def test_from_manifest_rejects_bad_base64() -> None:
    manifest = {"metadata": {"name": "helm-repo"}, "data": {"certFile": "not base64!"}}

    with pytest.raises(SecretManifestError, match="'certFile' is not valid base64"):
        Secret.from_manifest(manifest)
