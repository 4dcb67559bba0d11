"""
Application configuration settings
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SALES_ANALYTICS_* environment variables or .env"""

    model_config = SettingsConfigDict(env_prefix="SALES_ANALYTICS_", env_file=".env", extra="ignore")

    # Report shape
    top_products_limit: int = 10

    # Logging
    log_level: str = "INFO"

    # Demo data
    seed_on_startup: bool = True


settings = Settings()
