"""
Web application module for the Basketball Rotation Planner.

This module contains the Flask server exposing one in-memory rotation
session as a JSON API. Every request first catches the clock up to the
current time, then applies its own change, all under one lock.
"""
import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional

from flask import Flask, jsonify, request

from ..models import SetupStep
from ..services import RotationSession
from ..utils import POSITIONS, AppSettings, configure_logging, now_ts

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Wraps a RotationSession with the lock that serializes requests against
    each other and against clock ticks.
    """

    def __init__(self, session: Optional[RotationSession] = None):
        self.session = session or RotationSession()
        self.lock = threading.Lock()


def _fail(error: str, status: int = 400):
    return jsonify({"success": False, "error": error}), status


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(session: Optional[RotationSession] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        session: Session to serve; a fresh one is created when omitted

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app_state = WebAppState(session)
    app.extensions["rotation_state"] = app_state

    def synced(view: Callable) -> Callable:
        """Run a view under the session lock after delivering due ticks."""

        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            with app_state.lock:
                try:
                    app_state.session.poll(now_ts())
                    return view(app_state.session, *args, **kwargs)
                except Exception as e:
                    logger.exception("Request %s %s failed", request.method, request.path)
                    return _fail(str(e), 500)

        return wrapper

    def _stats_data(session: RotationSession) -> Dict[str, Any]:
        return {
            "on_court": [
                {"position": pos, "player": player.to_dict() if player else None}
                for pos, player in session.stats.on_court()
            ],
            "bench": [p.to_dict() for p in session.stats.bench_players()],
            "players": [s.to_dict() for s in session.stats.player_stats()],
        }

    # ==================== State ==================== #

    @app.route("/api/state", methods=["GET"])
    @synced
    def get_state(session: RotationSession):
        """Get the full session snapshot with derived views."""
        return jsonify({
            "success": True,
            "state": session.state.to_json(),
            "can_continue": session.wizard.can_continue(),
            "stats": _stats_data(session),
        })

    @app.route("/api/settings", methods=["POST"])
    @synced
    def configure_timing(session: RotationSession):
        """Set half length and substitution interval (both in minutes)."""
        data = _payload()
        plan_reset = session.clock.configure_timing(
            half_length=data.get("half_length"),
            substitution_interval_minutes=data.get("substitution_interval"),
        )
        return jsonify({
            "success": True,
            "plan_reset": plan_reset,
            "half_length_minutes": session.state.half_length_minutes,
            "substitution_interval_seconds": session.state.substitution_interval_seconds,
            "interval_count": session.state.interval_count,
        })

    # ==================== Roster ==================== #

    @app.route("/api/players", methods=["POST"])
    @synced
    def add_player(session: RotationSession):
        """Add a player to the roster."""
        name = _payload().get("name")
        if not isinstance(name, str):
            return _fail("Field 'name' is required")
        player = session.roster.add_player(name)
        if player is None:
            return _fail("Player not added (blank name or roster full)", 409)
        return jsonify({"success": True, "player": player.to_dict()})

    @app.route("/api/players/<player_id>", methods=["DELETE"])
    @synced
    def remove_player(session: RotationSession, player_id: str):
        """Remove a player from the roster and the starting lineup."""
        if not session.roster.remove_player(player_id):
            return _fail("Player not found", 404)
        return jsonify({"success": True})

    @app.route("/api/roles", methods=["POST"])
    @synced
    def add_role(session: RotationSession):
        """Define a role label."""
        name = _payload().get("name")
        if not isinstance(name, str):
            return _fail("Field 'name' is required")
        if not session.roster.add_role(name):
            return _fail("Role not added (blank or duplicate)", 409)
        return jsonify({"success": True, "roles": session.state.roles})

    @app.route("/api/roles/<role>", methods=["DELETE"])
    @synced
    def remove_role(session: RotationSession, role: str):
        """Remove a role label from the session and every player."""
        if not session.roster.remove_role(role):
            return _fail("Role not found", 404)
        return jsonify({"success": True, "roles": session.state.roles})

    @app.route("/api/players/<player_id>/roles", methods=["POST"])
    @synced
    def toggle_player_role(session: RotationSession, player_id: str):
        """Assign or unassign a role on a player."""
        role = _payload().get("role")
        if not isinstance(role, str) or not role:
            return _fail("Field 'role' is required")
        if not session.roster.toggle_player_role(player_id, role):
            return _fail("Player not found", 404)
        return jsonify({"success": True, "player": session.roster.get_player(player_id).to_dict()})

    @app.route("/api/starting/<player_id>", methods=["POST"])
    @synced
    def toggle_starting(session: RotationSession, player_id: str):
        """Select or deselect a starter."""
        if session.roster.get_player(player_id) is None:
            return _fail("Player not found", 404)
        if not session.roster.toggle_starting(player_id):
            return _fail("Starting lineup is full", 409)
        return jsonify({"success": True, "starting_lineup": session.state.starting_lineup})

    # ==================== Setup wizard ==================== #

    @app.route("/api/setup/step", methods=["POST"])
    @synced
    def go_to_step(session: RotationSession):
        """Open a setup step directly."""
        try:
            step = SetupStep(_payload().get("step"))
        except ValueError:
            return _fail(f"Unknown setup step. Expected one of: {[s.value for s in SetupStep]}")
        session.wizard.go_to(step)
        return jsonify({"success": True, "step": step.value})

    @app.route("/api/setup/continue", methods=["POST"])
    @synced
    def continue_setup(session: RotationSession):
        """Advance to the next setup step if its gate is satisfied."""
        if not session.wizard.continue_():
            return _fail(f"Cannot continue from '{session.wizard.step.value}'", 409)
        return jsonify({"success": True, "step": session.wizard.step.value})

    @app.route("/api/setup/back", methods=["POST"])
    @synced
    def back_setup(session: RotationSession):
        """Return to the previous setup step."""
        session.wizard.back()
        return jsonify({"success": True, "step": session.wizard.step.value})

    # ==================== Game plan ==================== #

    @app.route("/api/plan/<int:half>", methods=["GET"])
    @synced
    def get_half_plan(session: RotationSession, half: int):
        """Get every interval of a half with its clock window."""
        intervals = []
        for plan in session.plan.get_half(half):
            start, end = session.plan.interval_window(plan.interval)
            intervals.append({**plan.to_dict(), "start": start, "end": end})
        return jsonify({"success": True, "half": half, "intervals": intervals})

    @app.route("/api/plan/<int:half>/<int:interval>/<position>", methods=["POST"])
    @synced
    def set_substitution(session: RotationSession, half: int, interval: int, position: str):
        """Set the outgoing and/or incoming player of a planned swap."""
        if position not in POSITIONS:
            return _fail(f"Unknown position. Expected one of: {list(POSITIONS)}")
        data = _payload()
        if "player_out_id" not in data and "player_in_id" not in data:
            return _fail("Provide 'player_out_id' and/or 'player_in_id'")

        applied = True
        if "player_out_id" in data:
            applied = session.plan.set_player_out(half, interval, position, data["player_out_id"] or "")
        if applied and "player_in_id" in data:
            applied = session.plan.set_player_in(half, interval, position, data["player_in_id"] or "")
        if not applied:
            return _fail("Interval not found", 404)

        entry = session.plan.get_interval(half, interval).get_entry(position)
        return jsonify({"success": True, "substitution": entry.to_dict()})

    @app.route("/api/plan/<int:half>/<int:interval>/<position>", methods=["DELETE"])
    @synced
    def clear_substitution(session: RotationSession, half: int, interval: int, position: str):
        """Remove a planned swap."""
        if position not in POSITIONS:
            return _fail(f"Unknown position. Expected one of: {list(POSITIONS)}")
        if not session.plan.clear_substitution(half, interval, position):
            return _fail("Planned substitution not found", 404)
        return jsonify({"success": True})

    # ==================== Live game ==================== #

    @app.route("/api/game/start", methods=["POST"])
    @synced
    def start_game(session: RotationSession):
        """Finish setup and put the starting lineup on court."""
        if not session.start_game():
            return _fail("Starting lineup must fill every position", 409)
        return jsonify({"success": True, "active_positions": session.state.active_positions})

    @app.route("/api/clock/start", methods=["POST"])
    @synced
    def start_clock(session: RotationSession):
        """Start or resume the game clock."""
        if not session.state.live:
            return _fail("Game has not started", 409)
        session.start_clock(now_ts())
        return jsonify({"success": True, "running": True})

    @app.route("/api/clock/pause", methods=["POST"])
    @synced
    def pause_clock(session: RotationSession):
        """Pause the game clock."""
        session.pause_clock(now_ts())
        return jsonify({"success": True, "running": False})

    @app.route("/api/game/next-half", methods=["POST"])
    @synced
    def next_half(session: RotationSession):
        """Move to the second half."""
        session.next_half(now_ts())
        return jsonify({"success": True, "current_half": session.state.current_half})

    @app.route("/api/game/reset", methods=["POST"])
    @synced
    def reset_game(session: RotationSession):
        """Clear play time and return to setup."""
        session.reset_game()
        return jsonify({"success": True})

    @app.route("/api/game/interval", methods=["POST"])
    @synced
    def select_interval(session: RotationSession):
        """Select the active interval and list its planned swaps."""
        try:
            index = int(_payload().get("index"))
        except (TypeError, ValueError):
            return _fail("Field 'index' must be an integer")
        selected = session.clock.select_interval(index)
        planned = session.plan.planned_substitutions(session.state.current_half, selected)
        return jsonify({
            "success": True,
            "current_interval_index": selected,
            "planned": [
                {"position": pos, "out": out.to_dict(), "in": inc.to_dict()}
                for pos, out, inc in planned
            ],
        })

    @app.route("/api/substitution", methods=["POST"])
    @synced
    def manual_substitution(session: RotationSession):
        """Swap an on-court player for another roster player by name."""
        data = _payload()
        out_name = data.get("out_name")
        in_name = data.get("in_name")

        if not out_name or not in_name:
            return _fail("Both out_name and in_name required")
        if not session.clock.manual_substitution(out_name, in_name):
            return _fail("Player not found", 404)
        return jsonify({"success": True, "message": f"Substituted {in_name} for {out_name}"})

    @app.route("/api/stats", methods=["GET"])
    @synced
    def get_stats(session: RotationSession):
        """Get court, bench and play-time views."""
        return jsonify({"success": True, **_stats_data(session)})

    return app


def run_web_app(settings: Optional[AppSettings] = None) -> None:
    """
    Run the web application.

    Args:
        settings: Host, port and log level; read from the environment when omitted
    """
    settings = settings or AppSettings()
    configure_logging(settings.log_level)
    app = create_app()
    logger.info("Serving rotation planner on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    run_web_app()
