from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Pagekit Demo API"
    app_version: str = "0.1.0"
    database_url: str = "sqlite:///./local.db"
    log_level: str = "INFO"
    log_json: bool = False
    default_limit: int = 20
    max_limit: int = 100

    model_config = SettingsConfigDict(
        env_prefix="PAGEKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
