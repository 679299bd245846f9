"""
Rotation session controller.

This module wires the services around one SessionState and keeps the tick
source in step with the clock's run flag. Both user interfaces talk to a
RotationSession rather than to the individual services.
"""
from typing import Optional

from ..models import SessionState
from ..utils import now_ts
from .clock_service import ClockService
from .game_plan_service import GamePlanService
from .roster_service import IdFactory, RosterService
from .setup_wizard import SetupWizard
from .stats_service import StatsService
from .ticker import SecondTicker


class RotationSession:
    """
    Owns the state of a single planning session.

    Clock controls that change the run flag are exposed here so the ticker
    is started and stopped together with it.
    """

    def __init__(
        self,
        state: Optional[SessionState] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        self.state = state or SessionState()
        self.roster = RosterService(self.state, id_factory=id_factory)
        self.wizard = SetupWizard(self.state)
        self.plan = GamePlanService(self.state)
        self.clock = ClockService(self.state)
        self.stats = StatsService(self.state)
        self.ticker = SecondTicker()

    # ---------- Clock control ---------- #

    def start_game(self) -> bool:
        """Finish setup and put the starting lineup on court."""
        self.ticker.stop()
        return self.clock.start_game()

    def start_clock(self, now: Optional[float] = None) -> None:
        self.clock.start_clock()
        self.ticker.start(now_ts() if now is None else now)

    def pause_clock(self, now: Optional[float] = None) -> None:
        self.poll(now)
        self.clock.pause_clock()
        self.ticker.stop()

    def toggle_clock(self, now: Optional[float] = None) -> bool:
        """Start or pause depending on the current run flag."""
        if self.state.running:
            self.pause_clock(now)
        else:
            self.start_clock(now)
        return self.state.running

    def next_half(self, now: Optional[float] = None) -> None:
        self.poll(now)
        self.clock.next_half()
        self.ticker.stop()

    def reset_game(self) -> None:
        self.clock.reset_game()
        self.ticker.stop()

    def poll(self, now: Optional[float] = None) -> int:
        """
        Deliver every whole second that has elapsed since the last poll.

        Args:
            now: Monotonic reading; defaults to the current clock

        Returns:
            Number of ticks applied
        """
        if not self.state.running:
            self.ticker.stop()
            return 0

        now = now_ts() if now is None else now
        if not self.ticker.active:
            self.ticker.start(now)
            return 0

        due = self.ticker.due(now)
        for _ in range(due):
            self.clock.tick()
        return due
