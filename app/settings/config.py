from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvBaseSettings(BaseSettings):
    """Базовый класс для прокидывания настроек из .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class AppSettings(EnvBaseSettings):
    """Настройки приложения FastAPI."""

    mode: str = "dev"
    host: str = "0.0.0.0"
    port: int = 8000
    workers_num: int = 1
    prefix: str = ""

    logs_path: str | None = None
    logs_access_path: str | None = None
    log_level: str = "INFO"

    concurrent_probes: bool = False

    model_config = SettingsConfigDict(env_prefix="app_")


class Settings(EnvBaseSettings):
    """Настройки проекта."""

    app: AppSettings = AppSettings()


settings = Settings()
