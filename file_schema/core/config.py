import logging
import os
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def find_env_local() -> Optional[str]:
    """
    Search for .env.local in current directory or the project root.
    """
    current = os.getcwd()
    possible_paths = [
        os.path.join(current, ".env.local"),
        os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ".env.local")
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path
    return None


# Settings가 직접 읽는다. os.environ에는 반영하지 않는다.
ENV_LOCAL_PATH = find_env_local()


class Settings(BaseSettings):
    """
    File schema settings.
    """
    # [Logging Configuration]
    LOG_LEVEL: str = "INFO"

    # [Deprecation Configuration]
    # 지원 종료 예정 mutator 호출 시 DeprecationWarning 발생 여부 (로그는 항상 남긴다)
    DEPRECATION_WARNINGS: bool = True

    model_config = SettingsConfigDict(
        env_prefix="FILE_SCHEMA_",
        env_file=ENV_LOCAL_PATH,
        env_file_encoding="utf-8",
        extra="ignore"
    )


def init_settings() -> Settings:
    """Initializes settings and applies the package log level."""
    config = Settings()
    logging.getLogger("file_schema").setLevel(config.LOG_LEVEL.upper())
    logger.debug(f"Loaded Config - env_file: {ENV_LOCAL_PATH}, LOG_LEVEL: {config.LOG_LEVEL}")
    return config


# Global settings instance
settings = init_settings()
