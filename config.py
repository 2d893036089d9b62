"""
Configuration settings for the Levelboard API
Loads environment variables and provides application settings
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Configuration
    api_key: str = Field(default="test-key")
    environment: str = Field(default="production")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")

    # Legacy game-server proxy
    upstream_base_url: str = Field(default="http://localhost:3001")
    upstream_auth_path: str = Field(default="/auth")
    upstream_hof_path: str = Field(default="/hof")
    upstream_levels_path: str = Field(default="/levels/list")

    # Timeout Configuration (seconds)
    upstream_timeout: float = Field(default=25)
    upstream_connect_timeout: float = Field(default=8)
    upstream_write_timeout: float = Field(default=8)

    # Hall of fame pages are cached in-process; 0 disables the cache
    hof_cache_ttl: int = Field(default=60)

    # CORS Configuration
    allowed_origins: list = Field(default=["*"])

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings"""
    return Settings()


# Global settings instance
settings = get_settings()
