"""Application configuration"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Settings from environment. Secrets have no defaults."""

    # Service account JSON (must carry client_email and private_key)
    GOOGLE_SERVICE_ACCOUNT: Optional[str] = None
    LOVABLE_API_KEY: Optional[str] = None

    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1"
    AI_MODEL: str = "google/gemini-2.5-flash"

    # Used when a request does not name a folder
    DEFAULT_FOLDER_ID: Optional[str] = None

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Alpha Insights Sales Bot"
    VERSION: str = "1.0.0"

    @property
    def has_required_secrets(self) -> bool:
        return bool(self.GOOGLE_SERVICE_ACCOUNT) and bool(self.LOVABLE_API_KEY)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    """Dependency hook so routes can be given other settings"""
    return settings
