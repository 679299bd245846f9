"""Live clock service for the Basketball Rotation Planner application."""

import logging
from typing import Optional

from ..models import SessionState
from ..utils import POSITIONS, parse_half_length, parse_sub_interval

logger = logging.getLogger(__name__)


class ClockService:
    """Service for the live game clock, interval rotation and substitutions."""

    def __init__(self, state: SessionState):
        self.state = state

    # ------------------------------------------------------------------
    # Configuration helpers
    # ------------------------------------------------------------------
    def configure_timing(
        self,
        *,
        half_length: Optional[object] = None,
        substitution_interval_minutes: Optional[object] = None,
    ) -> bool:
        """Set half length (minutes) and substitution interval (minutes).

        Unparsable values fall back to the defaults. When the number of
        intervals per half changes, the game plan is rebuilt empty.

        Returns:
            True if the game plan was reset
        """

        previous_count = self.state.interval_count

        if half_length is not None:
            self.state.half_length_minutes = parse_half_length(half_length)
        if substitution_interval_minutes is not None:
            self.state.substitution_interval_seconds = parse_sub_interval(
                substitution_interval_minutes
            )

        if self.state.interval_count == previous_count:
            return False

        logger.info(
            "Interval count changed %d -> %d, discarding game plan",
            previous_count,
            self.state.interval_count,
        )
        self.state.reset_game_plan()
        return True

    # ------------------------------------------------------------------
    # Core clock controls
    # ------------------------------------------------------------------
    def start_game(self) -> bool:
        """Leave setup and put the starting lineup on court.

        Returns:
            False if the lineup does not fill every position
        """

        lineup = self.state.starting_lineup
        if len(lineup) != len(POSITIONS) or any(pid not in self.state.roster for pid in lineup):
            logger.debug("Starting lineup incomplete, game not started")
            return False

        self.state.active_positions = dict(zip(POSITIONS, lineup))
        self.state.play_time = {}
        self.state.time_until_next_sub = self.state.substitution_interval_seconds
        self.state.live = True
        logger.info(
            "Game started with %s",
            ", ".join(self.state.roster[pid].name for pid in lineup),
        )
        return True

    def start_clock(self) -> None:
        """Start or resume ticking."""
        self.state.running = True

    def pause_clock(self) -> None:
        """Stop ticking."""
        self.state.running = False

    def toggle_clock(self) -> bool:
        """Flip the run flag and return the new value."""
        self.state.running = not self.state.running
        return self.state.running

    def tick(self) -> None:
        """Advance the clock by one second.

        On-court players are credited before any automatic substitution, so
        players leaving at a boundary keep the boundary second.
        """

        if not self.state.running:
            return

        # A player planned into two positions still plays one second per tick
        for player_id in set(self.state.active_positions.values()):
            self.state.play_time[player_id] = self.state.play_time.get(player_id, 0) + 1

        if self.state.time_until_next_sub <= 1:
            self._apply_automatic_substitution()
            self.state.time_until_next_sub = self.state.substitution_interval_seconds
        else:
            self.state.time_until_next_sub -= 1

    def next_half(self) -> None:
        """Move to the second half and pause. Play time and lineup carry over."""

        self.state.current_half = 2
        self.state.current_interval_index = 0
        self.state.time_until_next_sub = self.state.substitution_interval_seconds
        self.state.running = False
        logger.info("Second half ready")

    def reset_game(self) -> None:
        """Wipe play-time history and return to setup.

        The court assignment and the game plan are left as they are.
        """

        self.state.live = False
        self.state.current_half = 1
        self.state.current_interval_index = 0
        self.state.running = False
        self.state.play_time = {}
        self.state.time_until_next_sub = self.state.substitution_interval_seconds
        logger.info("Game reset")

    def select_interval(self, index: int) -> int:
        """Point the clock at another 0-based interval of the current half.

        Returns:
            The index actually selected after clamping
        """

        last = max(0, self.state.interval_count - 1)
        self.state.current_interval_index = max(0, min(int(index), last))
        return self.state.current_interval_index

    # ------------------------------------------------------------------
    # Substitutions
    # ------------------------------------------------------------------
    def manual_substitution(self, out_name: str, in_name: str) -> bool:
        """Swap an on-court player for any roster player, by display name.

        The game plan is bypassed and left untouched.

        Returns:
            False if either name does not resolve
        """

        if not out_name or not in_name:
            return False

        roster = self.state.roster
        player_out = next(
            (
                roster[pid]
                for pid in self.state.active_positions.values()
                if pid in roster and roster[pid].name == out_name
            ),
            None,
        )
        player_in = next((p for p in roster.values() if p.name == in_name), None)
        if player_out is None or player_in is None:
            logger.debug("Manual substitution %r -> %r did not resolve", out_name, in_name)
            return False

        position = next(
            (pos for pos, pid in self.state.active_positions.items() if pid == player_out.id),
            None,
        )
        if position is None:
            return False

        self.state.active_positions[position] = player_in.id
        logger.info("Manual substitution at %s: %s -> %s", position, player_out.name, player_in.name)
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply_automatic_substitution(self) -> None:
        next_index = self.state.current_interval_index + 1
        if next_index >= self.state.interval_count:
            logger.debug("No interval after %d in half %d", next_index, self.state.current_half)
            return

        self.state.current_interval_index = next_index
        plans = self.state.game_plan.get(self.state.current_half, [])
        plan = next((p for p in plans if p.interval == next_index + 1), None)
        if plan is None:
            return

        for entry in plan.substitutions:
            if entry.position not in POSITIONS:
                logger.debug("Skipping entry for unknown position %s", entry.position)
                continue
            if not entry.is_complete:
                logger.debug("Skipping incomplete entry at %s", entry.position)
                continue
            player_in = self.state.roster.get(entry.player_in_id)
            if player_in is None:
                logger.debug("Skipping unknown incoming player %s", entry.player_in_id)
                continue
            self.state.active_positions[entry.position] = player_in.id
            logger.info(
                "Interval %d substitution at %s: %s in",
                next_index + 1,
                entry.position,
                player_in.name,
            )
