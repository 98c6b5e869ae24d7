from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "SQL Sandbox API"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]
    # Front-end bundle served under /static when the directory exists
    STATIC_DIR: Optional[str] = None

    # Sample data
    SEED: Optional[int] = None
    USER_COUNT: int = 50
    PRODUCT_COUNT: int = 100
    EMPLOYEE_COUNT: int = 50
    ORDER_COUNT: int = 200
    MAX_ITEMS_PER_ORDER: int = 5

    # Rows returned when a query matches no known shape
    DEFAULT_ROW_LIMIT: int = 10

    # This tells Pydantic to read from the .env file
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Create a single instance of the settings to use everywhere
settings = Settings()
