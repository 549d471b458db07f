from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentOption(Enum):
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


class _EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(_EnvSettings):
    APP_NAME: str = "DeepTalk Community API"
    APP_DESCRIPTION: str | None = "Community posts for DeepTalk"
    APP_VERSION: str = "0.1.0"


class DatabaseSettings(_EnvSettings):
    # MySQL is the primary store; the utf8mb4 collation on text columns only applies there.
    DATABASE_USER: str = "deeptalk"
    DATABASE_PASSWORD: str = "deeptalk"
    DATABASE_SERVER: str = "localhost"
    DATABASE_PORT: int = 3306
    DATABASE_DB: str = "deeptalk"
    DATABASE_ASYNC_PREFIX: str = "mysql+aiomysql://"
    DATABASE_URI_OVERRIDE: str | None = None
    DATABASE_ECHO: bool = False

    @property
    def DATABASE_URI(self) -> str:
        if self.DATABASE_URI_OVERRIDE:
            return self.DATABASE_URI_OVERRIDE
        return (
            f"{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_SERVER}:{self.DATABASE_PORT}/{self.DATABASE_DB}?charset=utf8mb4"
        )


class EnvironmentSettings(_EnvSettings):
    ENVIRONMENT: EnvironmentOption = EnvironmentOption.LOCAL


class LoggingSettings(_EnvSettings):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class CORSSettings(_EnvSettings):
    CORS_ORIGINS: list[str] = ["*"]


class Settings(
    AppSettings,
    DatabaseSettings,
    EnvironmentSettings,
    LoggingSettings,
    CORSSettings,
):
    pass


settings = Settings()
