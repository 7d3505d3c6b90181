"""
Runtime Settings

Environment-driven configuration for the simulation engine. Tax rates and
canton tables are NOT configuration: they live as constants next to the
calculators that use them.

Environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default INFO)
- LOG_FILE: optional path for a file log handler
- SIMULATION_SLOW_THRESHOLD_MS: runs slower than this log a SLOW warning (default 250)

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
from typing import Optional


class Settings:
    """Snapshot of the environment at construction time."""

    def __init__(self):
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.log_file: Optional[str] = os.getenv('LOG_FILE') or None
        self.slow_threshold_ms: float = float(os.getenv('SIMULATION_SLOW_THRESHOLD_MS', '250'))

    def __repr__(self) -> str:
        return (
            f"Settings(log_level={self.log_level!r}, log_file={self.log_file!r}, "
            f"slow_threshold_ms={self.slow_threshold_ms})"
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
