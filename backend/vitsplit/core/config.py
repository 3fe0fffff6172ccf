"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "VitSplit"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./vitsplit.db"
    DB_ECHO: bool = False

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8081"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Money
    DEFAULT_CURRENCY: str = "INR"
    CURRENCY_SYMBOL: str = "₹"  # Used in settlement descriptions
    SETTLEMENT_TOLERANCE: float = 0.01  # Balances within this of zero count as settled

    @field_validator("SETTLEMENT_TOLERANCE")
    @classmethod
    def check_tolerance(cls, v):
        """Reject tolerances below half a cent."""
        if v < 0.005:
            raise ValueError("SETTLEMENT_TOLERANCE must be at least 0.005")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
