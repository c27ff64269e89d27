"""Application configuration."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Restaurant
    restaurant_name: str = "Restaurant"
    restaurant_hours: str = "11:00 AM - 11:00 PM daily"
    restaurant_location: str = "123 Gourmet Street, Foodie City"
    restaurant_phone: str = "+1 234-567-8900"

    # Ordering
    tax_rate: float = 0.10
    min_estimated_time: int = 15  # minutes
    default_prep_time: int = 20  # minutes, for items without prep_time

    # Data files (bundled YAML is used when unset)
    menu_file: Optional[str] = None
    stock_file: Optional[str] = None

    # Sessions
    session_ttl_hours: int = 24

    # Chatbot typing delay hint
    chat_min_delay_ms: int = 800
    chat_max_delay_ms: int = 1500

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
