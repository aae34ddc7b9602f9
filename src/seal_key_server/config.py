"""Configuration management for the key server using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KeyServerConfig(BaseSettings):
    """Key server configuration loaded from environment variables.

    The network values are kept as plain strings; validating them is the job
    of the network resolver, so that every failure carries a specific error.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Network
    network: str = Field(default="mainnet", alias="NETWORK")
    seal_package: str | None = Field(default=None, alias="SEAL_PACKAGE")
    node_url: str | None = Field(default=None, alias="NODE_URL")
    use_default_mainnet_for_mvr: bool | None = Field(
        default=None, alias="USE_DEFAULT_MAINNET_FOR_MVR"
    )

    # Observability
    metrics_port: int = Field(default=9184, alias="KEY_SERVER_METRICS_PORT", ge=1, le=65535)
    log_level: str = Field(default="INFO", alias="KEY_SERVER_LOG_LEVEL")
    log_format: str = Field(default="json", alias="KEY_SERVER_LOG_FORMAT")
