# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"

# Level names understood by both logging and uvicorn
LOG_LEVELS: Final = ("critical", "error", "warning", "info", "debug")
LOG_LEVEL_ALIASES: Final = {"warn": "warning", "fatal": "critical"}


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def _parse_log_level(raw: str) -> str:
    level = raw.strip().lower()
    level = LOG_LEVEL_ALIASES.get(level, level)
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults,
    except DATABASE_URL which is required.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Database Configuration
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise RuntimeError("DATABASE_URL not set. Please configure it in your .env file.")
        self.database_url: Final[str] = database_url
        self.database_name: Final[str] = os.getenv("DATABASE_NAME", "primary")
        
        # Collection Names
        self.collection_name: Final[str] = os.getenv("COLLECTION_NAME", "teachers")
        self.users_collection_name: Final[str] = os.getenv("USERS_COLLECTION_NAME", "users")
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "127.0.0.1")
        self.port: Final[int] = _parse_port(os.getenv("PORT", str(DEFAULT_PORT)))
        self.log_level: Final[str] = _parse_log_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))


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
