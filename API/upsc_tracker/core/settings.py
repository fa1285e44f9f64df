from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    progress_store_backend: str = "file"
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "upsc_tracker"
    runtime_data_dir: str = "data/system"

    gateway_auth_enabled: bool = False
    gateway_api_key: str = ""

    event_history_size: int = 200
    notification_buffer_size: int = 500

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
