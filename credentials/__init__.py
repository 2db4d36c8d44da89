"""API key storage"""

from .store import (
    API_KEY_PROPERTY,
    CredentialAccessor,
    FilePropertyStore,
    InMemoryPropertyStore,
    get_credential_accessor,
)

__all__ = [
    "API_KEY_PROPERTY",
    "CredentialAccessor",
    "FilePropertyStore",
    "InMemoryPropertyStore",
    "get_credential_accessor",
]
