"""Persistent storage for the OpenAI API key"""

import json
from pathlib import Path
from typing import Dict, Optional

from core.exceptions import CredentialMissingError, ValidationError
from core.interfaces import PropertyStore
from config import settings
from utils.log import create_logger

logger = create_logger(__name__)

API_KEY_PROPERTY = "OPENAI_API_KEY"

SET_KEY_HINT = 'python main.py key set "YOUR_OPENAI_API_KEY"'

MISSING_KEY_MESSAGE = (
    "OpenAI API key is not set.\n\n"
    "Please follow these steps to register the API key:\n"
    "1. Open a terminal in the project directory.\n"
    "2. Run the following command:\n\n"
    f"   {SET_KEY_HINT}\n\n"
    'Note: Replace "YOUR_OPENAI_API_KEY" with the actual API key.'
)

KEY_SET_MESSAGE = "OpenAI API key has been successfully set."
KEY_PRESENT_STATUS = "SUCCESS: OpenAI API key is set."
KEY_MISSING_STATUS = (
    f"ERROR: OpenAI API key is not set. Please register the token by running {SET_KEY_HINT}."
)


class InMemoryPropertyStore(PropertyStore):
    """Process-local store"""

    def __init__(self, properties: Optional[Dict[str, str]] = None):
        self.properties = dict(properties or {})

    def get_property(self, key: str) -> Optional[str]:
        return self.properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value


class FilePropertyStore(PropertyStore):
    """JSON file holding string properties, shared across invocations"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def get_property(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_property(self, key: str, value: str) -> None:
        properties = self._load()
        properties[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(properties, f, indent=2)
        # Owner read/write only
        self.path.chmod(0o600)


class CredentialAccessor:
    """Read, write and check the stored API key"""

    def __init__(self, store: PropertyStore, fallback: Optional[str] = None):
        self.store = store
        self.fallback = fallback

    def _lookup(self) -> Optional[str]:
        return self.store.get_property(API_KEY_PROPERTY) or self.fallback

    def get(self) -> str:
        """
        Return the API key

        Raises:
            CredentialMissingError: If no key is stored
        """
        token = self._lookup()
        if not token:
            logger.error("OpenAI API key is not set. Please register the token first.")
            raise CredentialMissingError(MISSING_KEY_MESSAGE)
        return token

    def set(self, token: Optional[str]) -> str:
        """Store a new API key"""
        if not token or not token.strip():
            raise ValidationError("API key cannot be empty. Please provide a valid API key.")
        self.store.set_property(API_KEY_PROPERTY, token.strip())
        logger.info(KEY_SET_MESSAGE)
        return KEY_SET_MESSAGE

    def check(self) -> str:
        """Status string telling whether a key is available"""
        if self._lookup():
            logger.info(KEY_PRESENT_STATUS)
            return KEY_PRESENT_STATUS
        logger.error(KEY_MISSING_STATUS)
        return KEY_MISSING_STATUS


def get_credential_accessor() -> CredentialAccessor:
    """Accessor over the configured property file, with the environment key as fallback"""
    return CredentialAccessor(
        FilePropertyStore(settings.get_property_store_path()),
        fallback=settings.OPENAI_API_KEY
    )
