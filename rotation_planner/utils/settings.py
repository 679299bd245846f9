"""
Runtime settings for the Basketball Rotation Planner application.

Timing input from the setup screen and server settings from the environment
both go through here. Nothing in this module raises on bad input; every
parser falls back to its default.
"""
import logging
import math
import re
from typing import Any, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_HALF_LENGTH_MIN,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_SUB_INTERVAL_SEC,
)

logger = logging.getLogger(__name__)

RawNumber = Union[str, int, float, None]

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_half_length(raw: RawNumber) -> int:
    """
    Parse a half length in whole minutes.

    Only the leading integer counts, so "12.5" and "12 min" both give 12.

    Args:
        raw: User input (string or number)

    Returns:
        Minutes, or DEFAULT_HALF_LENGTH_MIN if the input does not start with
        a positive whole number
    """
    match = _LEADING_INT.match("" if raw is None else str(raw))
    if match is None:
        logger.debug("Unparsable half length %r, using default", raw)
        return DEFAULT_HALF_LENGTH_MIN
    minutes = int(match.group(1))
    if minutes <= 0:
        return DEFAULT_HALF_LENGTH_MIN
    return minutes


def parse_sub_interval(raw: RawNumber) -> int:
    """
    Parse a substitution interval given in (possibly fractional) minutes.

    Args:
        raw: User input in minutes, e.g. "2.5"

    Returns:
        Interval length in whole seconds, or DEFAULT_SUB_INTERVAL_SEC if the
        input is not a positive finite number
    """
    try:
        seconds = float(str(raw).strip()) * 60
    except (TypeError, ValueError):
        logger.debug("Unparsable substitution interval %r, using default", raw)
        return DEFAULT_SUB_INTERVAL_SEC
    if not math.isfinite(seconds):
        logger.debug("Non-finite substitution interval %r, using default", raw)
        return DEFAULT_SUB_INTERVAL_SEC
    seconds = int(round(seconds))
    if seconds <= 0:
        return DEFAULT_SUB_INTERVAL_SEC
    return seconds


class AppSettings(BaseSettings):
    """Server and logging settings for the entry points.

    Read from ROTATION_HOST, ROTATION_PORT and ROTATION_LOG_LEVEL, directly
    or via a .env file. Invalid values are logged and replaced by defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROTATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    host: str = Field(default=DEFAULT_HOST, description="Interface the web server binds to")
    port: int = Field(default=DEFAULT_PORT, description="Port the web server listens on")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Root logging level")

    @field_validator("host", mode="before")
    @classmethod
    def validate_host(cls, v: Any) -> str:
        """Treat an empty host as unset."""
        return str(v).strip() or DEFAULT_HOST

    @field_validator("port", mode="before")
    @classmethod
    def validate_port(cls, v: Any) -> int:
        """Fall back to the default port on anything that is not a valid port."""
        try:
            port = int(v)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid ROTATION_PORT=%r", v)
            return DEFAULT_PORT
        if not 0 < port < 65536:
            logger.warning("Ignoring out-of-range ROTATION_PORT=%r", v)
            return DEFAULT_PORT
        return port

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Normalize the level name and fall back to the default if unknown."""
        v_upper = str(v).strip().upper()
        if v_upper not in VALID_LOG_LEVELS:
            logger.warning("Ignoring invalid ROTATION_LOG_LEVEL=%r", v)
            return DEFAULT_LOG_LEVEL
        return v_upper
