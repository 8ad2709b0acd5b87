# donation_api/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "donations"
    use_mongo: bool = True

    # unset -> every login attempt is refused
    admin_password: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: str = "*"
    static_dir: str = "public"

    environment: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def load_settings() -> Settings:
    return Settings()
