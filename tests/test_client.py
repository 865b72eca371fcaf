from __future__ import annotations

import base64
from pathlib import Path

import httpx
import pytest

from transport_auth import client as client_module
from transport_auth.client import build_ssl_context, httpx_client_kwargs, open_client
from transport_auth.secrets import BasicAuthOption, TLSClientConfigOption


class _FakeContext:
    def __init__(self, cafile: str | None) -> None:
        self.cafile = cafile
        self.cert_chain: tuple[str, str] | None = None

    def load_cert_chain(self, certfile: str, keyfile: str) -> None:
        self.cert_chain = (certfile, keyfile)


@pytest.fixture
def fake_ssl(monkeypatch):
    created: list[_FakeContext] = []

    def create_default_context(*, cafile: str | None = None) -> _FakeContext:
        context = _FakeContext(cafile)
        created.append(context)
        return context

    monkeypatch.setattr(client_module.ssl, "create_default_context", create_default_context)
    return created


def test_build_ssl_context_with_client_cert(fake_ssl) -> None:
    option = TLSClientConfigOption(cert_file="/t/cert.crt", key_file="/t/key.crt", ca_file="/t/ca.pem")

    context = build_ssl_context(option)

    assert context.cafile == "/t/ca.pem"
    assert context.cert_chain == ("/t/cert.crt", "/t/key.crt")


def test_build_ssl_context_ca_only(fake_ssl) -> None:
    context = build_ssl_context(TLSClientConfigOption(ca_file="/t/ca.pem"))

    assert context.cafile == "/t/ca.pem"
    assert context.cert_chain is None


def test_kwargs_for_no_options() -> None:
    assert httpx_client_kwargs([]) == {}


def test_kwargs_map_each_option(fake_ssl) -> None:
    kwargs = httpx_client_kwargs(
        [
            BasicAuthOption(username="alice", password="s3cret"),
            TLSClientConfigOption(cert_file="/t/cert.crt", key_file="/t/key.crt"),
        ]
    )

    assert isinstance(kwargs["auth"], httpx.BasicAuth)
    assert kwargs["verify"] is fake_ssl[0]
    assert fake_ssl[0].cafile is None


def test_later_option_wins() -> None:
    kwargs = httpx_client_kwargs(
        [
            BasicAuthOption(username="alice", password="one"),
            BasicAuthOption(username="bob", password="two"),
        ]
    )

    request = next(kwargs["auth"].auth_flow(httpx.Request("GET", "https://charts.example.com")))
    expected = base64.b64encode(b"bob:two").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_open_client_sends_basic_auth(make_secret, config) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["Authorization"])
        return httpx.Response(200, text="apiVersion: v1")

    secret = make_secret(username=b"alice", password=b"s3cret")
    transport = httpx.MockTransport(handler)
    with open_client(secret, config=config, transport=transport, trust_env=False) as http:
        response = http.get("https://charts.example.com/index.yaml")

    assert response.status_code == 200
    assert seen == ["Basic " + base64.b64encode(b"alice:s3cret").decode("ascii")]


def test_open_client_releases_tls_files(make_secret, config, temp_root: Path, fake_ssl) -> None:
    secret = make_secret(certFile=b"CERTDATA", keyFile=b"KEYDATA", caFile=b"CADATA")
    transport = httpx.MockTransport(lambda request: httpx.Response(204))

    with open_client(secret, config=config, transport=transport, trust_env=False) as http:
        (context,) = fake_ssl
        assert Path(context.cafile).read_bytes() == b"CADATA"
        assert Path(context.cert_chain[0]).read_bytes() == b"CERTDATA"
        assert http.get("https://charts.example.com/index.yaml").status_code == 204

    assert list(temp_root.iterdir()) == []
