"""
Configuration settings for the service.
Loads environment variables and provides application settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Database
    DATABASE_URL: str = "sqlite:///./banking.db"
    DATABASE_ECHO: bool = False

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Banking Records Service"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Customer, account and staff records for a small retail bank"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Load the sample customers, accounts and employees into an empty store
    SEED_SAMPLE_DATA: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
