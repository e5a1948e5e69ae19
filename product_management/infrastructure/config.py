"""Service settings.

Every field can be overridden by the upper-cased environment variable
or a `.env` file in the working directory.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Product management API settings."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = (
        "postgresql+asyncpg://productmanagement:productmanagement_dev_password"
        "@db:5432/productmanagement"
    )

    # Authentication
    api_key: str = "dev-api-key-change-in-production"

    # Attribute suggestions
    suggestion_default_limit: int = 10
    suggestion_max_limit: int = 100

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
