"""Build client auth options from secret records."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from .config import MaterializerConfig
from .exceptions import InvalidCredentialFieldsError
from .fields import (
    BASIC_AUTH_PAIR,
    CA_FILE_FIELD,
    CA_FILENAME,
    CERT_FILE_FIELD,
    CERT_FILENAME,
    CLIENT_CERT_PAIR,
    KEY_FILE_FIELD,
    KEY_FILENAME,
    PairStatus,
    any_present,
    check_pair,
)
from .schemas import AuthOption, BasicAuthOption, Secret, TLSClientConfigOption
from .tempdir import ReleaseCallback, TemporaryCredentialDirectory, noop_release

_logger = logging.getLogger(__name__)


def client_options_from_secret(
    secret: Secret, config: MaterializerConfig | None = None
) -> tuple[list[AuthOption], ReleaseCallback]:
    """Return the auth options for ``secret`` and a callback removing temporary files.

    Basic auth comes before TLS in the returned list. Errors from either
    builder propagate unchanged; nothing is left on disk when they do.
    """

    options: list[AuthOption] = []
    basic_auth = basic_auth_from_secret(secret)
    if basic_auth is not None:
        options.append(basic_auth)

    tls_config, release = tls_client_config_from_secret(secret, config)
    if tls_config is not None:
        options.append(tls_config)
    return options, release


@contextmanager
def client_options(
    secret: Secret, config: MaterializerConfig | None = None
) -> Iterator[list[AuthOption]]:
    """Yield the auth options for ``secret`` and release their files on exit."""

    options, release = client_options_from_secret(secret, config)
    try:
        yield options
    finally:
        release()


def basic_auth_from_secret(secret: Secret) -> BasicAuthOption | None:
    """Return basic auth credentials held by ``secret``.

    Secrets with neither ``username`` nor ``password`` are ignored; defining
    only one of them is an error.
    """

    status = check_pair(secret, BASIC_AUTH_PAIR)
    if status is PairStatus.ABSENT:
        return None
    if status is PairStatus.MISSING_PAIR:
        raise InvalidCredentialFieldsError(
            f"invalid '{secret.name}' secret data: required fields "
            f"'{BASIC_AUTH_PAIR.first}' and '{BASIC_AUTH_PAIR.second}'",
            secret_name=secret.name,
            fields=BASIC_AUTH_PAIR.as_tuple(),
        )

    username, password = (
        _decode_field(secret, field) for field in BASIC_AUTH_PAIR.as_tuple()
    )
    return BasicAuthOption(username=username, password=password)


def tls_client_config_from_secret(
    secret: Secret, config: MaterializerConfig | None = None
) -> tuple[TLSClientConfigOption | None, ReleaseCallback]:
    """Write the TLS material of ``secret`` to a temporary directory.

    Secrets with no ``certFile``, ``keyFile`` and ``caFile`` are ignored and
    get a no-op callback. ``certFile`` and ``keyFile`` must be defined
    together. The returned callback removes the directory.
    """

    if not any_present(secret, CERT_FILE_FIELD, KEY_FILE_FIELD, CA_FILE_FIELD):
        return None, noop_release
    client_cert = check_pair(secret, CLIENT_CERT_PAIR)
    if client_cert is PairStatus.MISSING_PAIR:
        raise InvalidCredentialFieldsError(
            f"invalid '{secret.name}' secret data: fields '{CLIENT_CERT_PAIR.first}' "
            f"and '{CLIENT_CERT_PAIR.second}' require each other's presence",
            secret_name=secret.name,
            fields=CLIENT_CERT_PAIR.as_tuple(),
        )

    config = config or MaterializerConfig()
    directory = TemporaryCredentialDirectory.create(secret.name, config)

    cert_file = key_file = ca_file = ""
    try:
        if client_cert is PairStatus.COMPLETE:
            cert_file = directory.write(CERT_FILENAME, secret.get(CERT_FILE_FIELD))
            key_file = directory.write(KEY_FILENAME, secret.get(KEY_FILE_FIELD))
        ca_bytes = secret.get(CA_FILE_FIELD)
        if ca_bytes:
            ca_file = directory.write(CA_FILENAME, ca_bytes)
        option = TLSClientConfigOption(cert_file=cert_file, key_file=key_file, ca_file=ca_file)
    except BaseException:
        _rollback(directory, secret)
        raise

    _logger.debug("Materialized TLS files", extra=_log_context(secret))
    return option, directory.release


def _rollback(directory: TemporaryCredentialDirectory, secret: Secret) -> None:
    # Called from an active exception handler; the caller re-raises the original error.
    _logger.warning("Rolling back partially written TLS files", extra=_log_context(secret))
    try:
        directory.release()
    except OSError:
        _logger.exception(
            "Failed to remove credential directory %s",
            directory.path,
            extra=_log_context(secret),
        )


def _decode_field(secret: Secret, field: str) -> str:
    try:
        return secret.get(field).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidCredentialFieldsError(
            f"invalid '{secret.name}' secret data: field '{field}' is not valid UTF-8",
            secret_name=secret.name,
            fields=(field,),
        ) from exc


def _log_context(secret: Secret) -> dict[str, dict[str, str | None]]:
    return {
        "secret_context": {
            "name": secret.name,
            "namespace": secret.namespace,
        }
    }


__all__ = [
    "basic_auth_from_secret",
    "client_options",
    "client_options_from_secret",
    "tls_client_config_from_secret",
]
