from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Job Flow"
    env: str = "dev"
    api_prefix: str = ""

    api_token: str = ""
    cors_allow_origins: list[str] = ["*"]

    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_max_tokens: int = 8192

    storage_dir: str = "data"
    resume_key: str = "resume.json"

    reader_base_url: str = "https://r.jina.ai/"
    reader_min_chars: int = 100
    max_input_chars: int = 50_000
    http_timeout_seconds: float = 30.0

    log_level: str = "INFO"


settings = Settings()
