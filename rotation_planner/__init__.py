"""
Basketball Rotation Planner

A single-session tool for planning and running player rotations: enter a
roster, tag roles, pick a starting five, plan substitutions per interval of
each half, then let the live clock rotate players and track play time.

This package provides the domain services plus Flask (web) and Tkinter
(desktop) front ends under ``rotation_planner.ui``.
"""
from .models import Player, SessionState, SetupStep
from .services import RotationSession
from .utils import format_time, now_ts, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "Player", "SessionState", "SetupStep", "RotationSession",
    "format_time", "now_ts", "APP_TITLE",
]
