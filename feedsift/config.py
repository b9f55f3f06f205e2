"""Configuration management for the feedsift fetcher."""

import os
from dataclasses import dataclass

DEFAULT_USER_AGENT = "feedsift/1.0 (RSS extractor)"


@dataclass
class FetchConfig:
    """Configuration for downloading feed documents."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.timeout = os.getenv("FEEDSIFT_TIMEOUT", "30")
        self.user_agent = os.getenv("FEEDSIFT_USER_AGENT", DEFAULT_USER_AGENT)

    def get_fetch_config(self) -> FetchConfig:
        """Get fetcher configuration.

        Raises:
            ValueError: If FEEDSIFT_TIMEOUT is not a positive number
        """
        try:
            timeout = float(self.timeout)
        except ValueError:
            raise ValueError(f"Invalid FEEDSIFT_TIMEOUT: {self.timeout!r}")

        if timeout <= 0:
            raise ValueError(f"FEEDSIFT_TIMEOUT must be positive: {self.timeout!r}")

        return FetchConfig(timeout=timeout, user_agent=self.user_agent)
