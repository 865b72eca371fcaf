"""Transport authentication options built from Kubernetes-style secrets."""

from .client import build_ssl_context, httpx_client_kwargs, open_client
from .secrets import (
    AuthOption,
    BasicAuthOption,
    CredentialsError,
    InvalidCredentialFieldsError,
    MaterializerConfig,
    ResourceAllocationError,
    Secret,
    SecretManifestError,
    TLSClientConfigOption,
    basic_auth_from_secret,
    client_options,
    client_options_from_secret,
    tls_client_config_from_secret,
)

__all__ = [
    "AuthOption",
    "BasicAuthOption",
    "CredentialsError",
    "InvalidCredentialFieldsError",
    "MaterializerConfig",
    "ResourceAllocationError",
    "Secret",
    "SecretManifestError",
    "TLSClientConfigOption",
    "basic_auth_from_secret",
    "build_ssl_context",
    "client_options",
    "client_options_from_secret",
    "httpx_client_kwargs",
    "open_client",
    "tls_client_config_from_secret",
]
