"""Secret field names and paired-field predicates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .schemas import Secret

USERNAME_FIELD: Final[str] = "username"
PASSWORD_FIELD: Final[str] = "password"
CERT_FILE_FIELD: Final[str] = "certFile"
KEY_FILE_FIELD: Final[str] = "keyFile"
CA_FILE_FIELD: Final[str] = "caFile"

CERT_FILENAME: Final[str] = "cert.crt"
KEY_FILENAME: Final[str] = "key.crt"
CA_FILENAME: Final[str] = "ca.pem"


class PairStatus(StrEnum):
    """Outcome of checking two fields that must appear together."""

    ABSENT = "absent"
    COMPLETE = "complete"
    MISSING_PAIR = "missing_pair"


@dataclass(frozen=True, slots=True)
class FieldPair:
    """Two secret fields that are only meaningful together."""

    first: str
    second: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.first, self.second)


BASIC_AUTH_PAIR: Final[FieldPair] = FieldPair(USERNAME_FIELD, PASSWORD_FIELD)
CLIENT_CERT_PAIR: Final[FieldPair] = FieldPair(CERT_FILE_FIELD, KEY_FILE_FIELD)


def check_pair(secret: Secret, pair: FieldPair) -> PairStatus:
    """Return whether ``pair`` is absent, complete or half-filled in ``secret``."""

    has_first = bool(secret.get(pair.first))
    has_second = bool(secret.get(pair.second))
    if has_first and has_second:
        return PairStatus.COMPLETE
    if has_first or has_second:
        return PairStatus.MISSING_PAIR
    return PairStatus.ABSENT


def any_present(secret: Secret, *fields: str) -> bool:
    return any(secret.get(field) for field in fields)


__all__ = [
    "BASIC_AUTH_PAIR",
    "CA_FILENAME",
    "CA_FILE_FIELD",
    "CERT_FILENAME",
    "CERT_FILE_FIELD",
    "CLIENT_CERT_PAIR",
    "FieldPair",
    "KEY_FILENAME",
    "KEY_FILE_FIELD",
    "PASSWORD_FIELD",
    "PairStatus",
    "USERNAME_FIELD",
    "any_present",
    "check_pair",
]
