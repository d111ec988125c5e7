"""In-memory user store with prefixed password encodings.

Stored passwords carry the encoder in braces:

- ``{noop}secret`` keeps the plain text.
- ``{pbkdf2}<iterations>$<salt-hex>$<hash-hex>`` stores a PBKDF2-HMAC-SHA256
  digest.

Any other prefix never authenticates.
"""

from __future__ import annotations

import hashlib
import hmac
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from src.cruddemo.runtime.config.config_data import SecurityConfig

PBKDF2_ITERATIONS = 100_000


@dataclass(frozen=True)
class Principal:
    """An authenticated caller and the roles granted to it."""

    username: str
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        return role in self.roles


class CredentialStore(Protocol):
    def authenticate(self, username: str, password: str) -> Principal | None: ...


def _split_encoding(encoded: str) -> tuple[str, str]:
    if encoded.startswith("{") and "}" in encoded:
        encoder, _, payload = encoded[1:].partition("}")
        return encoder, payload
    return "", encoded


def _pbkdf2(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def encode_password(
    password: str, encoder: str = "pbkdf2", iterations: int = PBKDF2_ITERATIONS
) -> str:
    """Encode ``password`` for storage in the ``security.users`` config section."""
    if encoder == "noop":
        return f"{{noop}}{password}"
    if encoder == "pbkdf2":
        salt = os.urandom(16)
        digest = _pbkdf2(password, salt, iterations)
        return f"{{pbkdf2}}{iterations}${salt.hex()}${digest.hex()}"
    raise ValueError(f"Unsupported password encoder: {encoder}")


def verify_password(password: str, encoded: str) -> bool:
    """Check ``password`` against a stored encoding in constant time."""
    encoder, payload = _split_encoding(encoded)
    if encoder == "noop":
        return hmac.compare_digest(password.encode("utf-8"), payload.encode("utf-8"))
    if encoder == "pbkdf2":
        try:
            iterations, salt_hex, hash_hex = payload.split("$")
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(hash_hex)
            rounds = int(iterations)
        except ValueError:
            logger.warning("Malformed pbkdf2 password encoding")
            return False
        return hmac.compare_digest(_pbkdf2(password, salt, rounds), expected)
    logger.warning("Unknown password encoder '{}'", encoder)
    return False


@dataclass(frozen=True)
class _StoredUser:
    password: str
    roles: frozenset[str]


class InMemoryCredentialStore:
    """Username lookup over a fixed set of users."""

    def __init__(self, users: Iterable[tuple[str, str, Iterable[str]]] = ()):
        self._users: dict[str, _StoredUser] = {}
        for username, password, roles in users:
            self.add_user(username, password, roles)

    @classmethod
    def from_config(cls, security: SecurityConfig) -> InMemoryCredentialStore:
        return cls((user.username, user.password, user.roles) for user in security.users)

    def add_user(self, username: str, password: str, roles: Iterable[str]) -> None:
        self._users[username] = _StoredUser(password=password, roles=frozenset(roles))

    def authenticate(self, username: str, password: str) -> Principal | None:
        user = self._users.get(username)
        if user is None or not verify_password(password, user.password):
            logger.debug("Authentication failed for user '{}'", username)
            return None
        return Principal(username=username, roles=user.roles)

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)
