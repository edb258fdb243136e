from functools import lru_cache
from typing import Tuple, Type

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Origin Server"
    SERVER_NAME: str = "origin-server"

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Static content root served ahead of the API routes
    CONTENT_DIR: str = "/app/content"

    # Zone used for the human-readable timestamp on /sample.json
    DISPLAY_TIMEZONE: str = "Asia/Kolkata"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(frozen=True, case_sensitive=False)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Port and content root are fixed at build time; only explicit
        # constructor arguments may override the defaults.
        return (init_settings,)


@lru_cache()
def get_settings():
    return Settings()

