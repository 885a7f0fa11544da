"""Runtime configuration loaded from the environment."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Locale table configuration."""

    model_config = {"env_prefix": "LOCALE_TABLE_"}

    debug: bool = False
    default_locale: str = "en"
    locales_dir: str | None = None
    bundle_module: str | None = None


def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("locale_table").setLevel(level)
