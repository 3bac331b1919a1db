from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Purchase Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Set to True for call-level debug logs

    # Logging
    LOG_TRUNCATE_LENGTH: int = 500  # Max chars of args/return logged by @Logger.io

    @field_validator('LOG_TRUNCATE_LENGTH')
    @classmethod
    def check_truncate_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('LOG_TRUNCATE_LENGTH must be greater than zero')
        return v


settings = Settings()  # type: ignore
