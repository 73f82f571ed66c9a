"""
Settings for cliexec.

Loads settings from environment variables and validates them with fail-fast
behavior.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

__all__ = ["Settings", "create_settings_from_env"]

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for command execution.

    Attributes:
        debug: Print debug detail (tracebacks) for failed commands
        traceback_limit: Maximum traceback frames in debug output, None for all
    """
    debug: bool = False
    traceback_limit: Optional[int] = None

    def __post_init__(self):
        """Validate settings on construction."""
        if not isinstance(self.debug, bool):
            raise ValueError(f"debug must be a bool, got {self.debug!r}")
        if self.traceback_limit is not None and self.traceback_limit < 0:
            raise ValueError(f"traceback_limit must be non-negative, got {self.traceback_limit}")


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - CLIEXEC_DEBUG (default: false)
        - CLIEXEC_TRACEBACK_LIMIT (default: unlimited)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If a variable holds an invalid value

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    def str_to_bool(key: str, value: str) -> bool:
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{key} must be a boolean, got {value!r}")

    def get_int(key: str) -> Optional[int]:
        value = os.getenv(key)
        if not value:
            return None
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"{key} must be an integer, got {value!r}") from e

    return Settings(
        debug=str_to_bool("CLIEXEC_DEBUG", os.getenv("CLIEXEC_DEBUG", "false")),
        traceback_limit=get_int("CLIEXEC_TRACEBACK_LIMIT"),
    )
