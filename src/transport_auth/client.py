"""httpx integration for auth options built from secrets."""

from __future__ import annotations

import logging
import ssl
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from .secrets import (
    AuthOption,
    BasicAuthOption,
    MaterializerConfig,
    Secret,
    TLSClientConfigOption,
    client_options,
)

_logger = logging.getLogger(__name__)


def build_ssl_context(option: TLSClientConfigOption) -> ssl.SSLContext:
    """Return an SSL context trusting ``ca_file`` and presenting the client cert."""

    context = ssl.create_default_context(cafile=option.ca_file or None)
    if option.cert_file and option.key_file:
        context.load_cert_chain(option.cert_file, option.key_file)
    return context


def httpx_client_kwargs(options: Iterable[AuthOption]) -> dict[str, Any]:
    """Translate auth options into ``httpx.Client`` keyword arguments.

    Options are applied in order, so a later option of the same kind wins.
    """

    kwargs: dict[str, Any] = {}
    for option in options:
        if isinstance(option, BasicAuthOption):
            kwargs["auth"] = httpx.BasicAuth(option.username, option.password)
        elif isinstance(option, TLSClientConfigOption):
            kwargs["verify"] = build_ssl_context(option)
        else:  # pragma: no cover - exhaustive over AuthOption
            raise TypeError(f"Unsupported auth option: {type(option).__name__}")
    return kwargs


@contextmanager
def open_client(
    secret: Secret,
    *,
    config: MaterializerConfig | None = None,
    **client_kwargs: Any,
) -> Iterator[httpx.Client]:
    """Yield an ``httpx.Client`` authenticated with ``secret``.

    Temporary TLS files live until the block exits.
    """

    with client_options(secret, config) as options:
        kwargs = {**client_kwargs, **httpx_client_kwargs(options)}
        _logger.debug(
            "Opening HTTP client",
            extra={"secret_context": {"name": secret.name, "options": len(options)}},
        )
        with httpx.Client(**kwargs) as client:
            yield client


__all__ = [
    "build_ssl_context",
    "httpx_client_kwargs",
    "open_client",
]
