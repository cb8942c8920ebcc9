"""Application configuration."""
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Reference data
    data_dir: Path = DATA_DIR
    orders_file: Path = DATA_DIR / "orders.json"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Order fixture generator
    generator_start_date: date = date(2023, 9, 1)
    generator_duration_days: int = 5 * 30
    generator_valid_orders_per_day: int = 50
    generator_output: Path = Path("orders.json")
    generator_seed: Optional[int] = None

    model_config = SettingsConfigDict(
        env_prefix="ILP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
