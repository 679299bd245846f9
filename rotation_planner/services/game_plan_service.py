"""Game plan editing for the Basketball Rotation Planner."""

from typing import List, Optional, Tuple

from ..models import IntervalPlan, Player, SessionState
from ..utils import POSITIONS, format_time


class GamePlanService:
    """
    Edits the per-half, per-interval substitution table.

    No cross-validation happens here: the same player may be planned in and
    out anywhere. Entries are only checked when the clock executes them.
    Only the five court positions can be edited.
    """

    def __init__(self, state: SessionState):
        self.state = state

    def _editable(self, half: int, interval: int, position: str) -> Optional[IntervalPlan]:
        if position not in POSITIONS:
            return None
        return self.get_interval(half, interval)

    def get_interval(self, half: int, interval: int) -> Optional[IntervalPlan]:
        """Get the plan for a 1-based interval number, or None if out of range."""
        for plan in self.state.game_plan.get(half, []):
            if plan.interval == interval:
                return plan
        return None

    def get_half(self, half: int) -> List[IntervalPlan]:
        """Get every interval plan of a half."""
        return list(self.state.game_plan.get(half, []))

    def set_player_out(self, half: int, interval: int, position: str, player_id: str) -> bool:
        """Set the outgoing player for a position, creating the entry if needed."""
        plan = self._editable(half, interval, position)
        if plan is None:
            return False
        plan.upsert_entry(position).player_out_id = player_id or ""
        return True

    def set_player_in(self, half: int, interval: int, position: str, player_id: str) -> bool:
        """Set the incoming player for a position, creating the entry if needed."""
        plan = self._editable(half, interval, position)
        if plan is None:
            return False
        plan.upsert_entry(position).player_in_id = player_id or ""
        return True

    def clear_substitution(self, half: int, interval: int, position: str) -> bool:
        """Remove the entry for a position regardless of how complete it is."""
        plan = self._editable(half, interval, position)
        if plan is None:
            return False
        return plan.remove_entry(position)

    def interval_window(self, interval: int) -> Tuple[str, str]:
        """
        Get the clock labels bounding a 1-based interval.

        Example:
            With a 150 second interval, interval 2 spans ("2:30", "5:00").
        """
        length = self.state.substitution_interval_seconds
        return (format_time((interval - 1) * length), format_time(interval * length))

    def planned_substitutions(
        self, half: int, interval_index: int
    ) -> List[Tuple[str, Player, Player]]:
        """
        Resolve the planned swaps for a 0-based runtime interval index.

        Entries whose players cannot both be resolved are left out.

        Returns:
            (position, player_out, player_in) triples in entry order
        """
        plan = self.get_interval(half, interval_index + 1)
        if plan is None:
            return []

        resolved = []
        for entry in plan.substitutions:
            player_out = self.state.roster.get(entry.player_out_id)
            player_in = self.state.roster.get(entry.player_in_id)
            if player_out is None or player_in is None:
                continue
            resolved.append((entry.position, player_out, player_in))
        return resolved
