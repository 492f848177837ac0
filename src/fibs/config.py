"""Configuration management for the application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

MODES = ("term", "sequence", "bench")


@dataclass
class AppConfig:
    """Application configuration parameters."""

    mode: str = "term"
    numeric_type: str = "u64"
    index: int = 10
    count: int = 20
    bench_iterations: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables."""
        return cls(
            mode=os.getenv("FIBS_MODE", "term").lower(),  # term, sequence, bench
            numeric_type=os.getenv("FIBS_NUMERIC_TYPE", "u64"),
            index=int(os.getenv("FIBS_INDEX", "10")),
            count=int(os.getenv("FIBS_COUNT", "20")),
            bench_iterations=int(os.getenv("FIBS_BENCH_ITERATIONS", "100")),
            log_level=os.getenv("FIBS_LOG_LEVEL", "INFO").upper(),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.mode not in MODES:
            raise ValueError(
                f"Unknown mode: {self.mode}. Valid options: {', '.join(MODES)}"
            )
        if self.index < 0:
            raise ValueError("index must be non-negative")
        if self.count < 0:
            raise ValueError("count must be non-negative")
        if self.bench_iterations <= 0:
            raise ValueError("bench_iterations must be positive")


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
