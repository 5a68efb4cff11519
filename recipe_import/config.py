"""
Configuration for the recipe import service.
Loads settings from environment variables.
"""
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # API Configuration
    API_TITLE: str = "Recipe Import API"
    API_VERSION: str = "0.1.0"

    # CORS Configuration
    # Comma-separated list of allowed origins
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "./logs"

    # Web import
    FETCH_TIMEOUT_SECONDS: float = 15.0
    FETCH_USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    # Stripped page text shorter than this is treated as "no recipe"
    MIN_TEXT_LENGTH: int = 50
    MAX_HTML_BYTES: int = 2 * 1024 * 1024

    class Config:
        # Load from .env file if it exists
        env_file = ".env"
        case_sensitive = True

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated origins into a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Load settings (will use environment variables or .env file)
settings = Settings()
