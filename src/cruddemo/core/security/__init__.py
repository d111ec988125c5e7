from .access_policy import AccessPolicy, AccessRule
from .credentials import (
    CredentialStore,
    InMemoryCredentialStore,
    Principal,
    encode_password,
    verify_password,
)

__all__ = [
    "AccessPolicy",
    "AccessRule",
    "CredentialStore",
    "InMemoryCredentialStore",
    "Principal",
    "encode_password",
    "verify_password",
]
