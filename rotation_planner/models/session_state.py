"""
SessionState model for the Basketball Rotation Planner application.

This module contains the SessionState dataclass which represents the complete
state of one planning session: roster, setup progress, the game plan and the
live clock.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from .game_plan import GamePlan, build_game_plan
from .player import Player
from ..utils import DEFAULT_HALF_LENGTH_MIN, DEFAULT_SUB_INTERVAL_SEC


class SetupStep(Enum):
    """Steps of the setup wizard, in order."""
    PLAYERS = "players"
    ROLES = "roles"
    STARTING = "starting"
    GAME_PLAN = "game plan"


SETUP_STEPS: List[SetupStep] = list(SetupStep)


@dataclass
class SessionState:
    """
    Represents the complete state of a rotation session.

    Attributes:
        roster: Players keyed by id, in the order they were added
        roles: Role labels the organizer has defined
        starting_lineup: Player ids in selection order (maps onto POSITIONS)
        setup_step: Active wizard step
        half_length_minutes: Configured half length
        substitution_interval_seconds: Length of one substitution interval
        game_plan: Planned substitutions per half and interval
        live: Whether setup is complete and the live view is active
        running: Whether the clock is ticking
        current_half: Active half (1 or 2)
        current_interval_index: 0-based index of the active interval
        time_until_next_sub: Seconds left in the active interval
        active_positions: Position to player id for the players on court
        play_time: Cumulative on-court seconds keyed by player id
    """
    roster: Dict[str, Player] = field(default_factory=dict)
    roles: List[str] = field(default_factory=list)
    starting_lineup: List[str] = field(default_factory=list)
    setup_step: SetupStep = SetupStep.PLAYERS
    # timing configuration
    half_length_minutes: int = DEFAULT_HALF_LENGTH_MIN
    substitution_interval_seconds: int = DEFAULT_SUB_INTERVAL_SEC
    game_plan: GamePlan = field(default_factory=dict)
    # live clock
    live: bool = False
    running: bool = False
    current_half: int = 1
    current_interval_index: int = 0
    time_until_next_sub: int = DEFAULT_SUB_INTERVAL_SEC
    active_positions: Dict[str, str] = field(default_factory=dict)
    play_time: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.game_plan:
            self.reset_game_plan()

    @property
    def interval_count(self) -> int:
        """Number of whole substitution intervals that fit in one half."""
        if self.substitution_interval_seconds <= 0:
            return 0
        return (self.half_length_minutes * 60) // self.substitution_interval_seconds

    def reset_game_plan(self) -> None:
        """Discard all planned substitutions and rebuild empty intervals."""
        self.game_plan = build_game_plan(self.interval_count)

    def to_json(self) -> dict:
        """
        Convert SessionState to JSON-serializable dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "players": [p.to_dict() for p in self.roster.values()],
            "roles": list(self.roles),
            "starting_lineup": list(self.starting_lineup),
            "setup_step": self.setup_step.value,
            "half_length_minutes": self.half_length_minutes,
            "substitution_interval_seconds": self.substitution_interval_seconds,
            "interval_count": self.interval_count,
            "game_plan": {
                str(half): [plan.to_dict() for plan in plans]
                for half, plans in self.game_plan.items()
            },
            "live": self.live,
            "running": self.running,
            "current_half": self.current_half,
            "current_interval_index": self.current_interval_index,
            "time_until_next_sub": self.time_until_next_sub,
            "active_positions": dict(self.active_positions),
            "play_time": dict(self.play_time),
        }
