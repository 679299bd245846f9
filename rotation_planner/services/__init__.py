"""
Services package for the Basketball Rotation Planner.

This package contains service classes that handle business logic, plus the
RotationSession controller that ties them to one session state.
"""
from .roster_service import RosterService, sequential_ids
from .setup_wizard import SetupWizard
from .game_plan_service import GamePlanService
from .clock_service import ClockService
from .stats_service import StatsService
from .ticker import SecondTicker
from .rotation_session import RotationSession

__all__ = [
    "RosterService", "sequential_ids", "SetupWizard", "GamePlanService",
    "ClockService", "StatsService", "SecondTicker", "RotationSession",
]
