"""Turn secret records into client auth options and temporary TLS files."""

from .config import MaterializerConfig
from .exceptions import (
    CredentialsError,
    InvalidCredentialFieldsError,
    ResourceAllocationError,
    SecretManifestError,
)
from .fields import (
    BASIC_AUTH_PAIR,
    CLIENT_CERT_PAIR,
    FieldPair,
    PairStatus,
    any_present,
    check_pair,
)
from .options import (
    basic_auth_from_secret,
    client_options,
    client_options_from_secret,
    tls_client_config_from_secret,
)
from .schemas import AuthOption, BasicAuthOption, Secret, TLSClientConfigOption
from .tempdir import ReleaseCallback, TemporaryCredentialDirectory, noop_release

__all__ = [
    "AuthOption",
    "BASIC_AUTH_PAIR",
    "BasicAuthOption",
    "CLIENT_CERT_PAIR",
    "CredentialsError",
    "FieldPair",
    "InvalidCredentialFieldsError",
    "MaterializerConfig",
    "PairStatus",
    "ReleaseCallback",
    "ResourceAllocationError",
    "Secret",
    "SecretManifestError",
    "TLSClientConfigOption",
    "TemporaryCredentialDirectory",
    "any_present",
    "basic_auth_from_secret",
    "check_pair",
    "client_options",
    "client_options_from_secret",
    "noop_release",
    "tls_client_config_from_secret",
]
