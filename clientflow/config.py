# clientflow/config.py

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from fastapi import Request

DEFAULT_DB_URL = "sqlite:///clientflow.db"  # file in project root
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DB_URL
    env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    timezone: str = "UTC"
    static_dir: str = "dist"

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def get_settings() -> Settings:
    """
    Build settings from the environment, reading a local .env first if present.
    """
    load_dotenv()

    return Settings(
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DB_URL,
        env=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT") or 3000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        timezone=os.getenv("APP_TIMEZONE", "UTC"),
        static_dir=os.getenv("STATIC_DIR", "dist"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_app_settings(request: Request) -> Settings:
    """
    FastAPI dependency: the settings the running app was built with.
    """
    return request.app.state.settings
