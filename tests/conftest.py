"""Shared fixtures for the transport auth test-suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from transport_auth.secrets import MaterializerConfig, Secret


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    root = tmp_path / "credentials"
    root.mkdir()
    return root


@pytest.fixture
def config(temp_root: Path) -> MaterializerConfig:
    """Materializer settings writing into an isolated directory."""

    return MaterializerConfig(temp_root=str(temp_root))


@pytest.fixture
def make_secret() -> Callable[..., Secret]:
    def _make(name: str = "repo-auth", **fields: bytes) -> Secret:
        return Secret(name=name, namespace="flux-system", data=fields)

    return _make
