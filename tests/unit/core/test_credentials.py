"""Unit tests for the in-memory credential store and password encodings."""

import pytest

from src.cruddemo.core.security import (
    InMemoryCredentialStore,
    Principal,
    encode_password,
    verify_password,
)
from src.cruddemo.runtime.config.config_data import SecurityConfig


class TestPasswordEncoding:
    def test_noop(self):
        assert verify_password("test123", "{noop}test123")
        assert not verify_password("test124", "{noop}test123")

    def test_pbkdf2_round_trip(self):
        encoded = encode_password("s3cret", iterations=1_000)

        assert encoded.startswith("{pbkdf2}1000$")
        assert verify_password("s3cret", encoded)
        assert not verify_password("wrong", encoded)

    def test_pbkdf2_uses_random_salt(self):
        assert encode_password("same", iterations=1_000) != encode_password(
            "same", iterations=1_000
        )

    @pytest.mark.parametrize(
        "encoded",
        ["test123", "{bcrypt}$2a$10$abc", "{pbkdf2}not-valid", "{pbkdf2}10$zz$zz"],
    )
    def test_unknown_or_malformed_encodings_fail(self, encoded: str):
        assert not verify_password("test123", encoded)

    def test_unsupported_encoder_raises(self):
        with pytest.raises(ValueError):
            encode_password("x", encoder="md5")


class TestInMemoryCredentialStore:
    @pytest.fixture
    def store(self) -> InMemoryCredentialStore:
        return InMemoryCredentialStore.from_config(SecurityConfig())

    def test_default_users(self, store: InMemoryCredentialStore):
        assert len(store) == 3
        assert "john" in store and "mary" in store and "susan" in store

    @pytest.mark.parametrize(
        ("username", "password", "roles"),
        [
            ("john", "test123", {"EMPLOYEE"}),
            ("mary", "test123", {"EMPLOYEE", "MANAGER"}),
            ("susan", "test123M", {"EMPLOYEE", "MANAGER", "ADMIN"}),
        ],
    )
    def test_authenticate_default_users(self, store, username, password, roles):
        principal = store.authenticate(username, password)

        assert principal == Principal(username=username, roles=frozenset(roles))

    def test_wrong_password(self, store: InMemoryCredentialStore):
        assert store.authenticate("susan", "test123") is None

    def test_unknown_user(self, store: InMemoryCredentialStore):
        assert store.authenticate("mallory", "test123") is None

    def test_pbkdf2_user(self):
        store = InMemoryCredentialStore(
            [("ops", encode_password("hunter2", iterations=1_000), ["ADMIN"])]
        )

        principal = store.authenticate("ops", "hunter2")

        assert principal is not None
        assert principal.has_role("ADMIN")
        assert not principal.has_role("EMPLOYEE")
