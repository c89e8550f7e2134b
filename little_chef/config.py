"""Application configuration using pydantic-settings."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys (empty disables generation)
    gemini_api_key: str = ""

    # Server
    port: int = 8080
    host: str = "0.0.0.0"

    # Logging
    log_level: str = "INFO"

    # Rate Limiting
    rate_limit_per_hour: int = 300
    generate_rate_limit: str = "20/hour"

    # CORS
    cors_origins: str = "*"  # Comma-separated origins or "*" for all

    # Gemini Settings
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_image_model: str = "gemini-2.5-flash-image"
    gemini_temperature: float = 0.7
    gemini_max_retries: int = 1
    image_aspect_ratio: str = "4:3"

    # Favorites storage
    storage_dir: str = ".little_chef"
    favorites_key: str = "little-chef-favorites-v1"

    # Shown by clients whenever a recipe image fails to load
    fallback_image_url: str = (
        "https://images.unsplash.com/photo-1495195129352-aec325a55b65"
        "?auto=format&fit=crop&q=80&w=800"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get list of CORS origins."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def generation_enabled(self) -> bool:
        """Whether a Gemini key is configured."""
        return bool(self.gemini_api_key.strip())


# Global settings instance
settings = Settings()
