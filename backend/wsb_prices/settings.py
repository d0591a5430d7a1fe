from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field
from typing import List, Optional
from pathlib import Path


class Settings(BaseSettings):
    SERVICE_NAME: str = "Wall Street Beater Price Fetcher"

    # Upstream quote provider
    YAHOO_CHART_BASE: str = "https://query1.finance.yahoo.com"
    UPSTREAM_TIMEOUT_SECONDS: float = 5.0
    UPSTREAM_USER_AGENT: str = "WSB-Price-Fetcher/1.0"

    # Quote sources
    DEFAULT_SOURCE: str = "yahoo"
    MOCK_SEED: Optional[int] = None

    # Server
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "APP_PORT"),
    )
    LOG_LEVEL: str = "INFO"

    # Frontend
    STATIC_DIR: str = str(Path(__file__).resolve().parents[1] / "public")

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        # Load .env from backend/ by default so it's unambiguous
        env_file = str(Path(__file__).resolve().parents[1] / ".env")
        case_sensitive = True
        extra = "ignore"


settings = Settings()
