from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "English Teach"
    environment: str = "dev"

    # Base URL of the word-list API (used by the HTTP backend)
    api_base_url: str = "http://localhost:3001/api"
    backend_timeout_sec: float = 3.0

    # Server-side JSON files (lists.json / scores.json)
    data_dir: Path = Path("data")

    # Local-only storage used when the API is unreachable
    local_data_dir: Path = Path.home() / ".english_teach"

    translation_api_url: str = "https://api.mymemory.translated.net/get"
    translation_timeout_sec: float = 10.0

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
