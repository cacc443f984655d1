from logging import config as logging_config
from pathlib import Path
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movies_api.core.logger import LOGGING

logging_config.dictConfig(LOGGING)

DEFAULT_ALLOWED_ORIGINS = [
    'http://localhost:3001',
    'http://localhost:3000',
    'https://movies.com',
    'https://midu.dev',
    'http://127.0.0.1:3001',
]


class Settings(BaseSettings):
    """
    Настройки приложения с валидацией.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )
    BASE_DIR: ClassVar[Path] = Path(__file__).parent.parent

    project_name: str = Field('movies', alias='PROJECT_NAME')

    host: str = Field('0.0.0.0', alias='HOST')
    port: int = Field(3000, alias='PORT')
    log_level: str = Field('INFO', alias='LOG_LEVEL')

    # В окружении задаётся JSON-списком, например ALLOWED_ORIGINS='["https://movies.com"]'
    allowed_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS),
        alias='ALLOWED_ORIGINS'
    )

    seed_path: Path = Field(BASE_DIR / 'data' / 'movies.json', alias='SEED_PATH')

    @property
    def base_url(self) -> str:
        """Адрес, на котором слушает сервер"""
        return f"http://{self.host}:{self.port}"


settings = Settings()
