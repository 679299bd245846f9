"""
Roster service for the Basketball Rotation Planner application.

This module handles the roster, the organizer-defined roles and the starting
lineup selection. Invalid input is ignored rather than raised: every
mutation reports whether it changed anything.
"""
import itertools
import logging
from typing import Callable, List, Optional

from ..models import Player, SessionState
from ..utils import MAX_ROSTER_SIZE, POSITIONS

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def sequential_ids(prefix: str = "p") -> IdFactory:
    """Return an id factory yielding prefix1, prefix2, ... for one session."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


class RosterService:
    """Service for managing players, roles and the starting lineup."""

    def __init__(self, state: SessionState, id_factory: Optional[IdFactory] = None):
        self.state = state
        self._next_id = id_factory or sequential_ids()

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------
    def add_player(self, name: str) -> Optional[Player]:
        """
        Add a player to the roster.

        Args:
            name: Display name; surrounding whitespace is stripped

        Returns:
            The new Player, or None if the name is blank or the roster is full
        """
        name = (name or "").strip()
        if not name:
            return None
        if len(self.state.roster) >= MAX_ROSTER_SIZE:
            logger.debug("Roster full, ignoring %r", name)
            return None

        player_id = self._next_id()
        while player_id in self.state.roster:
            player_id = self._next_id()

        player = Player(id=player_id, name=name)
        self.state.roster[player_id] = player
        logger.info("Added player %s (%s)", name, player_id)
        return player

    def remove_player(self, player_id: str) -> bool:
        """Remove a player and drop them from the starting lineup."""
        player = self.state.roster.pop(player_id, None)
        if player is None:
            return False
        self.state.starting_lineup = [
            pid for pid in self.state.starting_lineup if pid != player_id
        ]
        logger.info("Removed player %s (%s)", player.name, player_id)
        return True

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get a player by id."""
        return self.state.roster.get(player_id)

    def find_by_name(self, name: str) -> Optional[Player]:
        """Get the first roster player with the given display name."""
        for player in self.state.roster.values():
            if player.name == name:
                return player
        return None

    def list_players(self) -> List[Player]:
        """Get all players in roster order."""
        return list(self.state.roster.values())

    def has_minimum_players(self) -> bool:
        """True when there are enough players to fill every position."""
        return len(self.state.roster) >= len(POSITIONS)

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------
    def add_role(self, name: str) -> bool:
        """Define a new role label. Blank and duplicate labels are ignored."""
        name = (name or "").strip()
        if not name or name in self.state.roles:
            return False
        self.state.roles.append(name)
        return True

    def remove_role(self, name: str) -> bool:
        """Remove a role label and unassign it from every player."""
        if name not in self.state.roles:
            return False
        self.state.roles = [r for r in self.state.roles if r != name]
        for player in self.state.roster.values():
            player.remove_role(name)
        return True

    def toggle_player_role(self, player_id: str, role: str) -> bool:
        """
        Flip a role on a player.

        Returns:
            False if the player is unknown, True otherwise
        """
        player = self.get_player(player_id)
        if player is None:
            return False
        player.toggle_role(role)
        return True

    # ------------------------------------------------------------------
    # Starting lineup
    # ------------------------------------------------------------------
    def toggle_starting(self, player_id: str) -> bool:
        """
        Select or deselect a starter.

        Selection order decides the position each starter takes. Selecting
        a sixth player is ignored.

        Returns:
            True if the lineup changed
        """
        lineup = self.state.starting_lineup
        if player_id in lineup:
            self.state.starting_lineup = [pid for pid in lineup if pid != player_id]
            return True
        if player_id not in self.state.roster or len(lineup) >= len(POSITIONS):
            return False
        lineup.append(player_id)
        return True

    def is_lineup_complete(self) -> bool:
        """True when exactly one starter is selected per position."""
        return len(self.state.starting_lineup) == len(POSITIONS)
