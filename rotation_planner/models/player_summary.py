"""Dataclasses describing the derived play-time views."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PlayerTimeSummary:
    """Accumulated playing time for a single roster player."""

    player_id: str
    name: str
    roles: List[str] = field(default_factory=list)
    on_court: bool = False
    position: Optional[str] = None
    seconds: int = 0
    time_formatted: str = "0:00"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.player_id,
            "name": self.name,
            "roles": list(self.roles),
            "on_court": self.on_court,
            "position": self.position,
            "seconds": self.seconds,
            "time_formatted": self.time_formatted,
        }
