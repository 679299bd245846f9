"""
Constants for the Basketball Rotation Planner application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Basketball Rotation Manager"

# Web server defaults (overridable through the environment, see settings.py)
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
DEFAULT_LOG_LEVEL = "INFO"

# On-court positions, in lineup order
POSITIONS = ("PG", "SG", "SF", "PF", "C")
POS_SHORT_TO_FULL = {
    "PG": "Point Guard",
    "SG": "Shooting Guard",
    "SF": "Small Forward",
    "PF": "Power Forward",
    "C": "Center",
}

# Roster limits
MAX_ROSTER_SIZE = 15

# Game timing defaults
HALVES = (1, 2)
DEFAULT_HALF_LENGTH_MIN = 18
MIN_HALF_LENGTH_MIN = 5
MAX_HALF_LENGTH_MIN = 30

DEFAULT_SUB_INTERVAL_SEC = 150
MIN_SUB_INTERVAL_MIN = 1
MAX_SUB_INTERVAL_MIN = 10
SUB_INTERVAL_STEP_MIN = 0.5
