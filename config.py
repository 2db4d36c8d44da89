"""Configuration and environment settings"""

from pydantic_settings import BaseSettings
from typing import Optional
from pathlib import Path


class Settings(BaseSettings):
    """Application configuration"""

    # LLM Configuration
    OPENAI_API_KEY: Optional[str] = None  # Fallback when the property store is empty
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"

    # LLM Settings
    LLM_MAX_TOKENS: int = 1000
    LLM_TIMEOUT: float = 30.0  # seconds

    # Constrained decoding (response_format=json_schema) available
    STRUCTURED_OUTPUTS: bool = True

    # Schema table
    REQUIRE_SCHEMA_TYPES: bool = True

    # Row processing: strict aborts the call, lenient emits an empty row
    ROW_FAILURE_POLICY: str = "strict"

    # Output
    ROW_SEPARATOR: str = "|"
    COLUMN_SEPARATOR: str = ","

    # Credential store
    CREDENTIAL_SCOPE: str = "user"  # user or project
    PROPERTY_STORE_DIR: Optional[str] = None  # Overrides the scope directory

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def get_property_store_path(self) -> Path:
        """Get the property file path for the configured credential scope"""
        if self.PROPERTY_STORE_DIR:
            base = Path(self.PROPERTY_STORE_DIR)
        elif self.CREDENTIAL_SCOPE == "project":
            base = Path.cwd() / ".structify"
        else:
            base = Path.home() / ".structify"
        return base / "properties.json"


settings = Settings()
