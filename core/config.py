"""Core configuration for the Cultural Arbitrage API."""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from .env
    )

    # Service
    service_name: str = "cultural-arbitrage-api"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_colorize: bool = True
    debug: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    api_root_path: str = ""
    api_prefix: str = "/api"
    api_cors_origins: List[str] = ["http://localhost:3000"]

    # Upstream HTTP
    request_timeout_seconds: float = 30.0
    request_max_retries: int = 1
    user_agent: str = "Cultural-Arbitrage-Signal-Engine/1.0.0"

    # LLM (Azure OpenAI preferred, plain OpenAI accepted)
    azure_openai_api_key: Optional[str] = None
    azure_openai_endpoint: Optional[str] = None
    azure_openai_deployment: str = "o4-mini"
    azure_openai_api_version: str = "2025-01-01-preview"
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    llm_model: str = "o4-mini"
    llm_max_tokens: int = 4000
    llm_temperature: float = 1.0

    # Taste correlation (Qloo)
    qloo_api_key: Optional[str] = None
    qloo_api_url: str = "https://api.qloo.com"

    # Market data (CoinGecko)
    coingecko_api_key: Optional[str] = None
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"

    # NFT marketplace (OpenSea)
    opensea_api_key: Optional[str] = None
    opensea_base_url: str = "https://api.opensea.io/api/v2"

    # Social
    twitter_bearer_token: Optional[str] = None
    twitter_base_url: str = "https://api.twitter.com/2"
    farcaster_api_key: Optional[str] = None
    farcaster_base_url: str = "https://api.neynar.com/v2"
    sentiment_lexicon_path: str = "config/sentiment_lexicon.yaml"

    # Cache
    cache_ttl_short: int = 300
    cache_ttl_medium: int = 1800
    cache_ttl_long: int = 3600
    cache_max_size: int = 1000
    cache_sweep_interval: int = 300

    # Pipeline
    pipeline_result_ttl: int = 1800
    pipeline_failure_ttl: int = 300

    # Synthetic fallback values
    fill_defaults_enabled: bool = True
    defaults_seed: Optional[int] = None

    # Simulation
    simulation_seed: Optional[int] = None


settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance."""
    return settings
