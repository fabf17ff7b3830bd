"""Configuration management for ns-tools."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "ns-tools"

    model_config = {
        "env_prefix": "NS_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
