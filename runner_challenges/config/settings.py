# runner_challenges/config/settings.py
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_CATALOG_PATH = Path(__file__).with_name("challenges.json")


class Settings(BaseSettings):
    # extra="ignore": unrelated env keys are fine
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = "sqlite:///./runner_challenges.db"

    # MySQL connection parts, used instead of database_url when db_host is set
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    db_host: Optional[str] = None
    db_port: Optional[int] = None
    db_name: Optional[str] = None

    catalog_path: Optional[Path] = None

    log_level: str = "INFO"

    @property
    def resolved_catalog_path(self) -> Path:
        return self.catalog_path or BUNDLED_CATALOG_PATH


settings = Settings()
