from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    api_key: str = "dev-api-key-change-me"
    app_name: str = "Freight Negotiation API"
    database_path: Path = Path("data/loads.db")
    seed_on_startup: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    frontend_dist: Optional[Path] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
