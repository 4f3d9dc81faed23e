"""
Application configuration
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator


def _split_csv(v) -> List[str]:
    if isinstance(v, str):
        items = [item.strip() for item in v.split(",")]
        return [item for item in items if item]
    return v


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "WhisperDesk"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Security
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    PASSWORD_MIN_LENGTH: int = 10
    PASSWORD_MAX_LENGTH: int = 128

    # Database
    DATABASE_URL: str = "sqlite:///./whisperdesk.db"
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 0

    # Tenancy
    RESERVED_SUBDOMAINS: Union[List[str], str] = ["www", "admin", "api", "billing"]
    # Number of labels making up the top-level part of a host (lvh.me -> 1)
    TLD_LENGTH: int = 1

    # Billing
    BILLING_PRODUCT_NAME: str = "WhisperDesk Subscription"
    BILLING_PLAN_NAME: str = "Standard"

    # CORS Origins
    CORS_ORIGINS: Union[List[str], str] = [
        "http://localhost:3000",
        "http://lvh.me:3000",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list"""
        if isinstance(v, (list, str)):
            return _split_csv(v)
        return ["http://localhost:3000"]

    @field_validator("RESERVED_SUBDOMAINS", mode="before")
    @classmethod
    def parse_reserved_subdomains(cls, v):
        """Reserved names are compared against normalized subdomains"""
        return [name.strip().lower() for name in _split_csv(v) if name.strip()]

    @field_validator("TLD_LENGTH")
    @classmethod
    def validate_tld_length(cls, v):
        if v < 1:
            raise ValueError("TLD_LENGTH must be at least 1")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Create settings instance
settings = Settings()
