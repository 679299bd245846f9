"""
Player model for the Basketball Rotation Planner application.

This module contains the Player dataclass which represents a roster entry
and the descriptive roles the organizer has tagged it with.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Player:
    """
    Represents a basketball player on the session roster.

    Attributes:
        id: Session-unique identifier (display names may repeat)
        name: Display name
        roles: Assigned role labels, in the order they were assigned
    """
    id: str
    name: str
    roles: List[str] = field(default_factory=list)

    def has_role(self, role: str) -> bool:
        """Check whether the player carries the given role label."""
        return role in self.roles

    def toggle_role(self, role: str) -> bool:
        """
        Assign the role if missing, otherwise unassign it.

        Returns:
            True if the role is now assigned
        """
        if role in self.roles:
            self.roles.remove(role)
            return False
        self.roles.append(role)
        return True

    def remove_role(self, role: str) -> None:
        """Unassign a role if the player holds it."""
        self.roles = [r for r in self.roles if r != role]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "roles": list(self.roles),
        }
