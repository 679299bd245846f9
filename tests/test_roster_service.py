"""
Unit tests for RosterService.

Covers roster limits, role cascade on removal and starting lineup selection.
"""
import unittest

from rotation_planner.models import SessionState
from rotation_planner.services import RosterService, sequential_ids
from rotation_planner.utils import MAX_ROSTER_SIZE


class TestRosterService(unittest.TestCase):
    """Test cases for roster, role and lineup management."""

    def setUp(self) -> None:
        self.state = SessionState()
        self.service = RosterService(self.state)

    def _add(self, *names):
        return [self.service.add_player(name) for name in names]

    def test_add_player_strips_name_and_assigns_ids(self) -> None:
        first, second = self._add("  Ann  ", "Bea")
        self.assertEqual(first.name, "Ann")
        self.assertEqual(first.id, "p1")
        self.assertEqual(second.id, "p2")
        self.assertEqual(list(self.state.roster), ["p1", "p2"])

    def test_blank_names_are_ignored(self) -> None:
        self.assertIsNone(self.service.add_player(""))
        self.assertIsNone(self.service.add_player("   "))
        self.assertEqual(self.state.roster, {})

    def test_roster_cap(self) -> None:
        for i in range(MAX_ROSTER_SIZE):
            self.assertIsNotNone(self.service.add_player(f"Player {i}"))
        self.assertIsNone(self.service.add_player("One Too Many"))
        self.assertEqual(len(self.state.roster), MAX_ROSTER_SIZE)

    def test_id_factory_collisions_are_skipped(self) -> None:
        ids = iter(["x", "x", "y"])
        service = RosterService(self.state, id_factory=lambda: next(ids))
        self.assertEqual(service.add_player("Ann").id, "x")
        self.assertEqual(service.add_player("Bea").id, "y")

    def test_minimum_players(self) -> None:
        self._add("A", "B", "C", "D")
        self.assertFalse(self.service.has_minimum_players())
        self._add("E")
        self.assertTrue(self.service.has_minimum_players())

    def test_remove_player_drops_from_lineup(self) -> None:
        ann, bea = self._add("Ann", "Bea")
        self.service.toggle_starting(ann.id)
        self.service.toggle_starting(bea.id)

        self.assertTrue(self.service.remove_player(ann.id))
        self.assertNotIn(ann.id, self.state.roster)
        self.assertEqual(self.state.starting_lineup, [bea.id])
        self.assertFalse(self.service.remove_player(ann.id))

    def test_roles_unique_and_non_blank(self) -> None:
        self.assertTrue(self.service.add_role("Shooter"))
        self.assertFalse(self.service.add_role(" Shooter "))
        self.assertFalse(self.service.add_role("  "))
        self.assertEqual(self.state.roles, ["Shooter"])

    def test_remove_role_cascades_to_players(self) -> None:
        ann, bea = self._add("Ann", "Bea")
        self.service.add_role("Shooter")
        self.service.add_role("Rebounder")
        self.service.toggle_player_role(ann.id, "Shooter")
        self.service.toggle_player_role(ann.id, "Rebounder")
        self.service.toggle_player_role(bea.id, "Shooter")

        self.assertTrue(self.service.remove_role("Shooter"))

        self.assertEqual(self.state.roles, ["Rebounder"])
        self.assertEqual(ann.roles, ["Rebounder"])
        self.assertEqual(bea.roles, [])
        self.assertFalse(self.service.remove_role("Shooter"))

    def test_toggle_player_role(self) -> None:
        (ann,) = self._add("Ann")
        self.assertTrue(self.service.toggle_player_role(ann.id, "Playmaker"))
        self.assertEqual(ann.roles, ["Playmaker"])
        self.service.toggle_player_role(ann.id, "Playmaker")
        self.assertEqual(ann.roles, [])
        self.assertFalse(self.service.toggle_player_role("missing", "Playmaker"))

    def test_toggle_starting_caps_at_five(self) -> None:
        players = self._add("A", "B", "C", "D", "E", "F")
        for player in players[:5]:
            self.assertTrue(self.service.toggle_starting(player.id))
        self.assertTrue(self.service.is_lineup_complete())

        self.assertFalse(self.service.toggle_starting(players[5].id))
        self.assertNotIn(players[5].id, self.state.starting_lineup)

        # Deselecting frees a slot, which is filled at the end
        self.assertTrue(self.service.toggle_starting(players[1].id))
        self.assertTrue(self.service.toggle_starting(players[5].id))
        self.assertEqual(
            self.state.starting_lineup,
            [players[0].id, players[2].id, players[3].id, players[4].id, players[5].id],
        )

    def test_find_by_name_returns_first_match(self) -> None:
        first, _second = self._add("Sam", "Sam")
        self.assertIs(self.service.find_by_name("Sam"), first)
        self.assertIsNone(self.service.find_by_name("Nobody"))


def test_sequential_ids_are_independent_per_factory():
    a = sequential_ids()
    b = sequential_ids("q")
    assert [a(), a()] == ["p1", "p2"]
    assert b() == "q1"


if __name__ == "__main__":
    unittest.main()
