"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (REDIS_URL, CURRENCY_SYMBOL,
etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        validation_alias="REDIS_URL",
    )
    redis_max_connections: int = Field(default=10, validation_alias="REDIS_MAX_CONNECTIONS")
    redis_socket_timeout: float = Field(default=5.0, validation_alias="REDIS_SOCKET_TIMEOUT")
    redis_health_check_interval: int = Field(
        default=240,
        validation_alias="REDIS_HEALTH_CHECK_INTERVAL",
    )

    # Presentation
    currency_symbol: str = Field(default="£", validation_alias="CURRENCY_SYMBOL")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
