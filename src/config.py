"""Centralised application settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Fare policies
    standard_rate_per_mile: float = Field(1.50, gt=0)  # USD / mile
    premium_rate_per_mile: float = Field(3.00, gt=0)  # USD / mile

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore", "validate_assignment": True}


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler and set the package log level."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=level_name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("src").setLevel(level_name)
