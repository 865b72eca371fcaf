"""Configuration for materializing credential files."""

from __future__ import annotations

import stat
from importlib import import_module
from typing import Any, Callable, TypeAlias, cast


class _BaseSettingsProtocol:
    model_config: dict[str, Any]


FieldCallable: TypeAlias = Callable[..., Any]
SettingsConfigDict: TypeAlias = dict[str, Any]


try:
    _pydantic = import_module("pydantic")
except ModuleNotFoundError as exc:  # pragma: no cover - defensive
    raise RuntimeError("pydantic must be installed to use MaterializerConfig") from exc

Field = cast(FieldCallable, getattr(_pydantic, "Field"))
field_validator = cast(Callable[..., Any], getattr(_pydantic, "field_validator"))

try:
    _settings_module = import_module("pydantic_settings")
except ModuleNotFoundError as exc:  # pragma: no cover - defensive
    raise RuntimeError("pydantic-settings must be installed to use MaterializerConfig") from exc

BaseSettings = cast(type[_BaseSettingsProtocol], getattr(_settings_module, "BaseSettings"))

_GROUP_OTHER_BITS = stat.S_IRWXG | stat.S_IRWXO


class MaterializerConfig(BaseSettings):
    """Settings used when writing TLS material to temporary directories."""

    temp_root: str | None = Field(
        default=None,
        description="Parent directory for credential directories (process temp area when unset)",
    )
    dir_prefix: str = Field(
        default="helm-tls-",
        description="Prefix of each temporary credential directory name",
    )
    file_mode: int = Field(
        default=0o600,
        ge=0,
        le=0o777,
        description="Permission bits applied to written credential files (strings are octal)",
    )

    model_config: SettingsConfigDict = {
        "env_prefix": "TRANSPORT_AUTH_",
        "env_file": ".env",
        "extra": "ignore",
    }

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return int(value.strip(), 8)
            except ValueError as exc:
                raise ValueError(f"file_mode must be an octal string, got {value!r}") from exc
        return value

    @field_validator("file_mode")
    @classmethod
    def _owner_only(cls, value: int) -> int:
        if value & _GROUP_OTHER_BITS:
            raise ValueError("file_mode must not grant group or other access")
        if not value & stat.S_IRUSR:
            raise ValueError("file_mode must let the owner read the file")
        return value


__all__ = ["MaterializerConfig"]
