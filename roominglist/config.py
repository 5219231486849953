"""
Harness configuration.

Values are loaded from environment variables with defaults that match a
local deployment of the Rooming List UI. All waits are upper bounds in
milliseconds; none of them is ever slept through unconditionally.
"""

import os


class HarnessConfig:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("ROOMING_BASE_URL", "http://localhost:3000")
    API_URL: str = os.environ.get("ROOMING_API_URL", "http://localhost:4003")
    API_TIMEOUT_S: float = float(os.environ.get("ROOMING_API_TIMEOUT_S", "5"))

    # Bounded waits
    ACTION_TIMEOUT_MS: int = int(os.environ.get("ROOMING_ACTION_TIMEOUT_MS", "5000"))
    TRANSITION_TIMEOUT_MS: int = int(os.environ.get("ROOMING_TRANSITION_TIMEOUT_MS", "5000"))
    SETTLE_TIMEOUT_MS: int = int(os.environ.get("ROOMING_SETTLE_TIMEOUT_MS", "3000"))
    SETTLE_QUIET_MS: int = int(os.environ.get("ROOMING_SETTLE_QUIET_MS", "250"))
    POLL_INTERVAL_MS: int = int(os.environ.get("ROOMING_POLL_INTERVAL_MS", "50"))

    # Optional YAML file overriding the role mapping table
    ROLE_MAP_FILE: str | None = os.environ.get("ROOMING_ROLE_MAP")


class TestingConfig(HarnessConfig):
    """Configuration for the harness's own test suite against the demo app."""

    ACTION_TIMEOUT_MS: int = int(os.environ.get("ROOMING_ACTION_TIMEOUT_MS", "3000"))
    TRANSITION_TIMEOUT_MS: int = int(os.environ.get("ROOMING_TRANSITION_TIMEOUT_MS", "3000"))
    SETTLE_QUIET_MS: int = int(os.environ.get("ROOMING_SETTLE_QUIET_MS", "150"))


config = {
    "default": HarnessConfig,
    "testing": TestingConfig,
}


def get_config(env: str | None = None) -> type[HarnessConfig]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (default, testing).
             If None, uses ROOMING_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("ROOMING_ENV", "default")
    return config.get(env, config["default"])
