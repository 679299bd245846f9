"""
Game plan model for the Basketball Rotation Planner application.

A game plan maps each half to an ordered list of interval plans. Interval
numbers are 1-based in storage; the live clock tracks a 0-based index, so
runtime index ``i`` reads interval number ``i + 1``.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import HALVES


@dataclass
class SubstitutionEntry:
    """
    A planned swap at one position.

    Either id may be empty while the plan is still being filled in.
    """
    position: str
    player_out_id: str = ""
    player_in_id: str = ""

    @property
    def is_complete(self) -> bool:
        """True when both players are set and the entry can be executed."""
        return bool(self.player_out_id and self.player_in_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "position": self.position,
            "player_out_id": self.player_out_id,
            "player_in_id": self.player_in_id,
        }


@dataclass
class IntervalPlan:
    """Substitutions planned for one interval of a half."""
    interval: int
    substitutions: List[SubstitutionEntry] = field(default_factory=list)

    def get_entry(self, position: str) -> Optional[SubstitutionEntry]:
        """Get the entry for a position, if one exists."""
        for entry in self.substitutions:
            if entry.position == position:
                return entry
        return None

    def upsert_entry(self, position: str) -> SubstitutionEntry:
        """Get the entry for a position, creating an empty one if absent."""
        entry = self.get_entry(position)
        if entry is None:
            entry = SubstitutionEntry(position=position)
            self.substitutions.append(entry)
        return entry

    def remove_entry(self, position: str) -> bool:
        """Remove the entry for a position. Returns True if one was removed."""
        before = len(self.substitutions)
        self.substitutions = [s for s in self.substitutions if s.position != position]
        return len(self.substitutions) != before

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "interval": self.interval,
            "substitutions": [s.to_dict() for s in self.substitutions],
        }


GamePlan = Dict[int, List[IntervalPlan]]


def build_game_plan(interval_count: int) -> GamePlan:
    """
    Create an empty plan for both halves.

    Args:
        interval_count: Number of intervals per half

    Returns:
        Mapping of half number to interval plans numbered 1..interval_count
    """
    count = max(0, interval_count)
    return {
        half: [IntervalPlan(interval=i + 1) for i in range(count)]
        for half in HALVES
    }
