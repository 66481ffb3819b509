# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))

        # Shared secret checked by the API key dependency
        self.api_key: Final[Optional[str]] = os.getenv(
            "API_KEY",
            "your-super-secret-api-key-here"
        )

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/Bogota")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Storage Configuration: "memory" (process lifetime) or "mongo"
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "memory").lower()

        # Database Configuration (only used by the mongo backend)
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "company_ledger")

        # Collection Names
        self.companies_collection: Final[str] = os.getenv("COMPANIES_COLLECTION", "companies")
        self.transactions_collection: Final[str] = os.getenv(
            "TRANSACTIONS_COLLECTION",
            "transactions"
        )

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
