"""Configuration settings for the credential sync store."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CREDSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Receiver status polling
    status_poll_interval: float = 10.0  # seconds, matches the receiver's check cadence
    status_poll_error_interval: float = 30.0  # seconds, wait longer on error
    poll_status_on_startup: bool = True

    # Credential expiry (calendar months after the last login)
    expiry_months: int = 1

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty disables file logging


settings = Settings()
