"""Application configuration loaded from environment variables."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    api_port: int = 8000
    api_host: str = "127.0.0.1"  # Bind to localhost by default
    api_auth_token: str = ""
    log_level: str = "INFO"

    # Text stamped into every generated configuration preamble
    generator_name: str = "Dot1Xer Supreme"
    generator_url: str = ""

    # Access ports used by the interface sections of each dialect
    ios_xe_interface: str = "GigabitEthernet1/0/1"
    nx_os_interface: str = "Ethernet1/1"
    aos_cx_interface: str = "1/1/1"
    generic_interface: str = "<interface>"

    # Cloud NAC service used to provision hosted RADIUS servers
    cloud_nac_api_url: str = ""
    cloud_nac_api_key: str = ""
    cloud_nac_username: str = ""
    cloud_nac_password: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings instance.

    The cached instance is rebuilt when the values that tests and the
    add-on wrapper change at runtime no longer match the environment.
    """
    global _settings

    api_token = os.getenv("API_AUTH_TOKEN", "")
    cloud_url = os.getenv("CLOUD_NAC_API_URL", "")

    if _settings is not None:
        if (_settings.api_auth_token == api_token and
                _settings.cloud_nac_api_url == cloud_url):
            return _settings

    _settings = Settings()

    logger.info(
        "⚙️  Generator settings loaded: log_level=%s, api_token=%s, cloud_nac=%s",
        _settings.log_level,
        "SET" if _settings.api_auth_token else "NOT SET",
        "SET" if _settings.cloud_nac_api_url else "NOT SET",
    )

    return _settings
