"""Configuration management for the demo application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class AppConfig:
    """Application configuration parameters."""

    range_start: int = 1
    range_total: int = 20
    filter_letter: str = "a"
    fake_name_count: int = 8
    fake_name_seed: int = 42
    pause_between_sections: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.range_total < 0:
            raise ValueError("range_total must be non-negative")
        if self.fake_name_count < 0:
            raise ValueError("fake_name_count must be non-negative")
        if not self.filter_letter:
            raise ValueError("filter_letter must not be empty")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables."""
        return cls(
            range_start=int(os.getenv("RANGE_START", "1")),
            range_total=int(os.getenv("RANGE_TOTAL", "20")),
            filter_letter=os.getenv("FILTER_LETTER", "a"),
            fake_name_count=int(os.getenv("FAKE_NAME_COUNT", "8")),
            fake_name_seed=int(os.getenv("FAKE_NAME_SEED", "42")),
            pause_between_sections=os.getenv("PAUSE_BETWEEN_SECTIONS", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
