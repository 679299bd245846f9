"""Read-only views over the live session: bench, court and play time."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..models import Player, PlayerTimeSummary, SessionState
from ..utils import POSITIONS, format_time


class StatsService:
    """
    Derived views recomputed from the session state on every call.

    Nothing here is cached, so the views can never go stale.
    """

    def __init__(self, state: SessionState) -> None:
        self.state = state

    def on_court(self) -> List[Tuple[str, Optional[Player]]]:
        """Each position with its current player (None when unassigned)."""
        return [
            (pos, self.state.roster.get(self.state.active_positions.get(pos, "")))
            for pos in POSITIONS
        ]

    def bench_players(self) -> List[Player]:
        """Roster players not currently assigned to a position."""
        on_court_ids = set(self.state.active_positions.values())
        return [p for p in self.state.roster.values() if p.id not in on_court_ids]

    def player_stats(self) -> List[PlayerTimeSummary]:
        """Every roster player with accumulated time, most minutes first."""
        position_by_id = {pid: pos for pos, pid in self.state.active_positions.items()}

        summaries = []
        for player in self.state.roster.values():
            seconds = self.state.play_time.get(player.id, 0)
            position = position_by_id.get(player.id)
            summaries.append(
                PlayerTimeSummary(
                    player_id=player.id,
                    name=player.name,
                    roles=list(player.roles),
                    on_court=position is not None,
                    position=position,
                    seconds=seconds,
                    time_formatted=format_time(seconds),
                )
            )

        summaries.sort(key=lambda summary: summary.seconds, reverse=True)
        return summaries
