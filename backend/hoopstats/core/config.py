from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./database.sqlite"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # frontend dev servers run on another origin
    CORS_ORIGINS: list[str] = ["*"]

    # reject game stats whose player_id / team_id point at nothing
    ENFORCE_GAMESTAT_REFERENCES: bool = False

    # serve the static single page at /ui
    SERVE_UI: bool = True

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
