"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Adyen Configuration
    adyen_hmac_key: str = ""  # Hex string from Adyen Customer Area
    adyen_merchant_account: str = ""
    adyen_notification_username: str = ""
    adyen_notification_password: str = ""
    adyen_test_mode: bool = True  # Merchant environment, True for the Adyen test platform

    # Application
    log_level: str = "INFO"


settings = Settings()
