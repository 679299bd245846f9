"""
Models package for the Basketball Rotation Planner.

This package contains the core data models used throughout the application.
"""
from .player import Player
from .game_plan import GamePlan, IntervalPlan, SubstitutionEntry, build_game_plan
from .session_state import SessionState, SetupStep, SETUP_STEPS
from .player_summary import PlayerTimeSummary

__all__ = [
    "Player", "GamePlan", "IntervalPlan", "SubstitutionEntry", "build_game_plan",
    "SessionState", "SetupStep", "SETUP_STEPS", "PlayerTimeSummary",
]
