"""Application configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import Annotated
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Get the directory where settings.py is located
BASE_DIR = Path(__file__).resolve().parent

class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = "Ecom Order Service"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern="^(development|staging|production)$")

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8030
    api_prefix: str = "/api"
    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=list)

    # MongoDB
    mongodb_url: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("ECOM_ORDER_SERVICE_MONGODB_URL", "ECOM_ORDER_SERVICE_DB_URI"),
    )
    mongodb_database: str = Field(
        default="ecom_order_service",
        validation_alias=AliasChoices("ECOM_ORDER_SERVICE_MONGODB_DATABASE", "ECOM_ORDER_SERVICE_DB_NAME"),
    )
    mongodb_orders_collection: str = "orders"
    mongodb_max_pool_size: int = 10
    mongodb_min_pool_size: int = 1
    mongodb_server_selection_timeout_ms: int = 5000

    # Peer services
    frontend_url: str = "http://localhost:3000"
    account_service_url: str = "http://localhost:8010"
    product_service_url: str = "http://localhost:8020"
    authorization_timeout: float = Field(default=5.0, gt=0, description="Seconds to wait for the account service")

    # Order number allocation
    order_number_max_attempts: int = Field(default=10, ge=1)
    order_number_backoff_base: float = Field(default=0.01, ge=0)

    # Logging
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR.parent / ".env",
        env_file_encoding="utf-8",
        env_prefix="ECOM_ORDER_SERVICE_",
        populate_by_name=True,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("account_service_url", "product_service_url", "frontend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_cors_origins(self) -> "Settings":
        """Allow the peer services when no explicit origins are configured."""
        if not self.cors_origins:
            self.cors_origins = [
                self.frontend_url,
                self.account_service_url,
                self.product_service_url,
            ]
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
