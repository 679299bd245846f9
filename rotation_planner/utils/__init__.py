"""
Utilities package for the Basketball Rotation Planner.

This package contains utility functions and constants used throughout the application.
"""
from .time_utils import format_time, now_ts
from .log_utils import configure_logging
from .settings import AppSettings, parse_half_length, parse_sub_interval
from .constants import (
    APP_TITLE, POSITIONS, POS_SHORT_TO_FULL, MAX_ROSTER_SIZE, HALVES,
    DEFAULT_HALF_LENGTH_MIN, MIN_HALF_LENGTH_MIN, MAX_HALF_LENGTH_MIN,
    DEFAULT_SUB_INTERVAL_SEC, MIN_SUB_INTERVAL_MIN, MAX_SUB_INTERVAL_MIN,
    SUB_INTERVAL_STEP_MIN,
)

__all__ = [
    "format_time", "now_ts", "configure_logging",
    "AppSettings", "parse_half_length", "parse_sub_interval",
    "APP_TITLE", "POSITIONS", "POS_SHORT_TO_FULL", "MAX_ROSTER_SIZE", "HALVES",
    "DEFAULT_HALF_LENGTH_MIN", "MIN_HALF_LENGTH_MIN", "MAX_HALF_LENGTH_MIN",
    "DEFAULT_SUB_INTERVAL_SEC", "MIN_SUB_INTERVAL_MIN", "MAX_SUB_INTERVAL_MIN",
    "SUB_INTERVAL_STEP_MIN",
]
