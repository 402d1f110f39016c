from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root and .env so it loads even if you start uvicorn from a subfolder
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    # Loads from OS environment first; .env is used for local dev
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # REST Countries v3.1, no API key required
    RESTCOUNTRIES_BASE_URL: str = "https://restcountries.com/v3.1"
    # None disables the timeout entirely
    HTTP_TIMEOUT: Optional[float] = None

    MAP_EMBED_URL: str = "https://maps.google.com/maps?q={lat},{lng}&z={zoom}&output=embed"
    MAP_ZOOM: int = 5

    THEME_STORE_PATH: Path = PROJECT_ROOT / "app" / "data" / "preferences.json"
    # Used when the client sends no Sec-CH-Prefers-Color-Scheme hint
    DEFAULT_COLOR_SCHEME: Optional[str] = None

    LOG_LEVEL: str = "INFO"


settings = Settings()
