from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    app_name: str = "Inventory Catalog"
    debug: bool = False
    database_url: str = "sqlite:///./inventory.db"
    storage_backend: Literal["database", "file"] = "database"
    storage_file: str = "storage/inventory_products.json"
    store_record_name: str = "inventory_products"
    seed_demo_data: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Ensure settings are constructed once per process."""

    return Settings()
