"""Scoped temporary directories holding credential files."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from types import TracebackType
from typing import Callable, TypeAlias

from .config import MaterializerConfig
from .exceptions import ResourceAllocationError

ReleaseCallback: TypeAlias = Callable[[], None]

_logger = logging.getLogger(__name__)


def noop_release() -> None:
    """Release callback for calls that allocated nothing."""


def _sanitize(name: str) -> str:
    for char in (os.sep, os.altsep, "\0"):
        if char:
            name = name.replace(char, "-")
    return name


def _write_file(path: str, payload: bytes, mode: int) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(payload)


class TemporaryCredentialDirectory:
    """Owns one freshly created directory and everything written into it.

    The directory is removed recursively by :meth:`release`, which may be
    called any number of times. Instances also work as context managers.
    """

    def __init__(self, path: str, *, file_mode: int = 0o600) -> None:
        self.path = path
        self._file_mode = file_mode
        self._released = False

    @classmethod
    def create(cls, name: str, config: MaterializerConfig) -> TemporaryCredentialDirectory:
        """Create a uniquely named directory for the secret called ``name``."""

        prefix = f"{config.dir_prefix}{_sanitize(name)}-"
        try:
            path = tempfile.mkdtemp(prefix=prefix, dir=config.temp_root)
        except ValueError as exc:
            raise ResourceAllocationError(f"Cannot create credential directory: {exc}") from exc
        except OSError as exc:
            raise ResourceAllocationError.from_os_error(exc) from exc
        _logger.debug("Created credential directory", extra={"credential_dir": path})
        return cls(path, file_mode=config.file_mode)

    @property
    def released(self) -> bool:
        return self._released

    def write(self, filename: str, payload: bytes) -> str:
        """Write ``payload`` verbatim to ``filename`` and return its path."""

        if self._released:
            raise ResourceAllocationError(f"Credential directory {self.path} was already released")
        path = os.path.join(self.path, filename)
        try:
            _write_file(path, payload, self._file_mode)
        except OSError as exc:
            raise ResourceAllocationError.from_os_error(exc) from exc
        return path

    def release(self) -> None:
        """Remove the directory and its contents; later calls are no-ops."""

        if self._released:
            return
        try:
            shutil.rmtree(self.path)
        except FileNotFoundError:
            pass
        self._released = True
        _logger.debug("Released credential directory", extra={"credential_dir": self.path})

    def __enter__(self) -> TemporaryCredentialDirectory:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


__all__ = [
    "ReleaseCallback",
    "TemporaryCredentialDirectory",
    "noop_release",
]
