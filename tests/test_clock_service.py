import unittest

from rotation_planner.models import SessionState
from rotation_planner.services import ClockService, GamePlanService, RosterService
from rotation_planner.utils import POSITIONS


class ClockServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = SessionState()
        self.roster = RosterService(self.state)
        self.plan = GamePlanService(self.state)
        self.clock = ClockService(self.state)
        self.players = [self.roster.add_player(f"P{i + 1}") for i in range(7)]
        for player in self.players[:5]:
            self.roster.toggle_starting(player.id)

    def _ids(self, *indexes):
        return [self.players[i].id for i in indexes]

    def _run(self, seconds: int) -> None:
        for _ in range(seconds):
            self.clock.tick()

    def test_start_game_zips_lineup_with_positions(self) -> None:
        self.state.play_time = {"p1": 99}
        self.state.time_until_next_sub = 3

        self.assertTrue(self.clock.start_game())

        self.assertTrue(self.state.live)
        self.assertFalse(self.state.running)
        self.assertEqual(self.state.active_positions, dict(zip(POSITIONS, self._ids(0, 1, 2, 3, 4))))
        self.assertEqual(self.state.play_time, {})
        self.assertEqual(self.state.time_until_next_sub, 150)

    def test_start_game_requires_full_lineup(self) -> None:
        self.roster.toggle_starting(self.players[0].id)
        self.assertFalse(self.clock.start_game())
        self.assertFalse(self.state.live)
        self.assertEqual(self.state.active_positions, {})

    def test_tick_is_noop_while_paused(self) -> None:
        self.clock.start_game()
        self._run(5)
        self.assertEqual(self.state.play_time, {})
        self.assertEqual(self.state.time_until_next_sub, 150)

    def test_tick_accrues_and_counts_down(self) -> None:
        self.clock.start_game()
        self.clock.start_clock()
        self._run(10)
        for pid in self._ids(0, 1, 2, 3, 4):
            self.assertEqual(self.state.play_time[pid], 10)
        self.assertNotIn(self.players[5].id, self.state.play_time)
        self.assertEqual(self.state.time_until_next_sub, 140)

    def test_court_never_exceeds_five_positions(self) -> None:
        p1, p6 = self._ids(0, 5)
        self.plan.set_player_out(1, 2, "XX", p1)
        self.plan.set_player_in(1, 2, "XX", p6)
        # An entry injected past the editor is still ignored by the clock
        self.state.game_plan[1][1].upsert_entry("6TH").player_in_id = p6
        self.state.game_plan[1][1].upsert_entry("6TH").player_out_id = p1

        self.clock.start_game()
        self.clock.start_clock()
        self._run(151)

        self.assertEqual(set(self.state.active_positions), set(POSITIONS))
        self.assertNotIn(p6, self.state.play_time)

    def test_boundary_second_credits_outgoing_player(self) -> None:
        p1, p6 = self._ids(0, 5)
        self.plan.set_player_out(1, 2, "PG", p1)
        self.plan.set_player_in(1, 2, "PG", p6)
        self.clock.start_game()
        self.clock.start_clock()

        self._run(149)
        self.assertEqual(self.state.time_until_next_sub, 1)
        self.assertEqual(self.state.active_positions["PG"], p1)

        self.clock.tick()
        self.assertEqual(self.state.play_time[p1], 150)
        self.assertNotIn(p6, self.state.play_time)
        self.assertEqual(self.state.active_positions["PG"], p6)
        self.assertEqual(self.state.current_interval_index, 1)
        self.assertEqual(self.state.time_until_next_sub, 150)

        self.clock.tick()
        self.assertEqual(self.state.play_time[p1], 150)
        self.assertEqual(self.state.play_time[p6], 1)

    def test_incomplete_and_unknown_entries_are_skipped(self) -> None:
        p6, p7 = self._ids(5, 6)
        self.plan.set_player_in(1, 2, "PG", p6)  # no outgoing player
        self.plan.set_player_out(1, 2, "SG", self.players[1].id)
        self.plan.set_player_in(1, 2, "SG", "ghost")
        self.plan.set_player_out(1, 2, "C", self.players[4].id)
        self.plan.set_player_in(1, 2, "C", p7)
        self.clock.start_game()
        self.clock.start_clock()
        before = dict(self.state.active_positions)

        self._run(150)

        self.assertEqual(self.state.active_positions["PG"], before["PG"])
        self.assertEqual(self.state.active_positions["SG"], before["SG"])
        self.assertEqual(self.state.active_positions["C"], p7)

    def test_incoming_player_need_not_be_planned_outgoing(self) -> None:
        # The outgoing id only has to be non-empty; the position decides who leaves
        self.plan.set_player_out(1, 2, "SF", self.players[0].id)
        self.plan.set_player_in(1, 2, "SF", self.players[5].id)
        self.clock.start_game()
        self.clock.start_clock()
        self._run(150)
        self.assertEqual(self.state.active_positions["SF"], self.players[5].id)
        self.assertEqual(self.state.active_positions["PG"], self.players[0].id)

    def test_last_interval_leaves_state_unchanged(self) -> None:
        self.clock.start_game()
        self.clock.start_clock()
        self.state.current_interval_index = self.state.interval_count - 1
        self.state.time_until_next_sub = 1
        before = dict(self.state.active_positions)

        self.clock.tick()

        self.assertEqual(self.state.current_interval_index, self.state.interval_count - 1)
        self.assertEqual(self.state.active_positions, before)
        self.assertEqual(self.state.time_until_next_sub, 150)
        self.assertTrue(self.state.running)

    def test_next_half_keeps_ledger_and_assignment(self) -> None:
        self.plan.set_player_out(2, 2, "PG", self.players[0].id)
        self.plan.set_player_in(2, 2, "PG", self.players[6].id)
        self.clock.start_game()
        self.clock.start_clock()
        self._run(200)
        ledger = dict(self.state.play_time)
        court = dict(self.state.active_positions)

        self.clock.next_half()

        self.assertEqual(self.state.current_half, 2)
        self.assertEqual(self.state.current_interval_index, 0)
        self.assertEqual(self.state.time_until_next_sub, 150)
        self.assertFalse(self.state.running)
        self.assertEqual(self.state.play_time, ledger)
        self.assertEqual(self.state.active_positions, court)

        # Second-half plan applies from the first boundary
        self.clock.start_clock()
        self._run(150)
        self.assertEqual(self.state.active_positions["PG"], self.players[6].id)

    def test_reset_clears_history_only(self) -> None:
        self.clock.start_game()
        self.clock.start_clock()
        self._run(160)
        self.clock.next_half()
        court = dict(self.state.active_positions)
        self.plan.set_player_out(1, 1, "PG", "p1")

        self.clock.reset_game()

        self.assertFalse(self.state.live)
        self.assertFalse(self.state.running)
        self.assertEqual(self.state.current_half, 1)
        self.assertEqual(self.state.current_interval_index, 0)
        self.assertEqual(self.state.play_time, {})
        self.assertEqual(self.state.time_until_next_sub, 150)
        self.assertEqual(self.state.active_positions, court)
        self.assertEqual(len(self.plan.get_interval(1, 1).substitutions), 1)

    def test_manual_substitution_by_name(self) -> None:
        self.clock.start_game()
        self.assertTrue(self.clock.manual_substitution("P3", "P6"))
        self.assertEqual(self.state.active_positions["SF"], self.players[5].id)
        # Plan untouched
        self.assertTrue(all(not p.substitutions for p in self.state.game_plan[1]))

    def test_manual_substitution_unresolved_is_noop(self) -> None:
        self.clock.start_game()
        self.clock.start_clock()
        self._run(3)
        court = dict(self.state.active_positions)
        ledger = dict(self.state.play_time)

        self.assertFalse(self.clock.manual_substitution("Nobody", "P6"))
        self.assertFalse(self.clock.manual_substitution("P1", "Nobody"))
        self.assertFalse(self.clock.manual_substitution("P6", "P7"))  # P6 is on the bench
        self.assertFalse(self.clock.manual_substitution("", "P7"))

        self.assertEqual(self.state.active_positions, court)
        self.assertEqual(self.state.play_time, ledger)

    def test_toggle_clock(self) -> None:
        self.assertTrue(self.clock.toggle_clock())
        self.assertFalse(self.clock.toggle_clock())

    def test_select_interval_clamps(self) -> None:
        self.assertEqual(self.clock.select_interval(3), 3)
        self.assertEqual(self.clock.select_interval(99), 6)
        self.assertEqual(self.clock.select_interval(-2), 0)

    def test_selected_interval_drives_next_substitution(self) -> None:
        self.plan.set_player_out(1, 5, "PG", self.players[0].id)
        self.plan.set_player_in(1, 5, "PG", self.players[5].id)
        self.clock.start_game()
        self.clock.select_interval(3)
        self.clock.start_clock()
        self._run(150)
        self.assertEqual(self.state.current_interval_index, 4)
        self.assertEqual(self.state.active_positions["PG"], self.players[5].id)

    def test_configure_timing_falls_back_to_defaults(self) -> None:
        self.clock.configure_timing(half_length="abc", substitution_interval_minutes="")
        self.assertEqual(self.state.half_length_minutes, 18)
        self.assertEqual(self.state.substitution_interval_seconds, 150)

        self.clock.configure_timing(half_length=20, substitution_interval_minutes="2.5")
        self.assertEqual(self.state.interval_count, 8)


if __name__ == "__main__":
    unittest.main()
