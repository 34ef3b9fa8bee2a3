from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    chain_provider: str = "crust"
    chain_address: str = "https://rpc.crust.network"
    chain_timeout_seconds: int = 30

    query_max_attempts: int = 3
    query_retry_base_delay_seconds: float = 1.0
    query_retry_max_delay_seconds: float = 30.0

    min_replicas_count: int = 3
