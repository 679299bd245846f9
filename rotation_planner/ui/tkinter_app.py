"""
Tkinter application module for the Basketball Rotation Planner.

This module contains the desktop GUI: the four setup steps and the live
game view. The clock is driven by polling the session from ``Tk.after``.
"""
import logging
import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional

from ..models import SETUP_STEPS, SetupStep
from ..services import RotationSession
from ..utils import (
    APP_TITLE,
    MAX_HALF_LENGTH_MIN,
    MAX_ROSTER_SIZE,
    MAX_SUB_INTERVAL_MIN,
    MIN_HALF_LENGTH_MIN,
    MIN_SUB_INTERVAL_MIN,
    POSITIONS,
    POS_SHORT_TO_FULL,
    SUB_INTERVAL_STEP_MIN,
    AppSettings,
    configure_logging,
    format_time,
)

logger = logging.getLogger(__name__)

POLL_MS = 200
STEP_LABELS = {
    SetupStep.PLAYERS: "Players",
    SetupStep.ROLES: "Roles",
    SetupStep.STARTING: "Starting Five",
    SetupStep.GAME_PLAN: "Game Plan",
}
NO_PLAYER = "(none)"


class RotationApp(tk.Tk):
    """Main application window for the Rotation Planner."""

    def __init__(self, session: Optional[RotationSession] = None):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry("1024x680")
        self.session = session or RotationSession()
        self.after_timer = None

        container = ttk.Frame(self)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self.frames: Dict[str, ttk.Frame] = {
            "setup": SetupView(container, self),
            "live": LiveView(container, self),
        }
        for frame in self.frames.values():
            frame.grid(row=0, column=0, sticky="nsew")

        self.show_current()
        self._poll()

    def show_current(self):
        """Raise the view matching the session mode and refresh it."""
        frame = self.frames["live" if self.session.state.live else "setup"]
        frame.refresh()
        frame.tkraise()

    def _poll(self):
        if self.session.poll() and self.session.state.live:
            self.frames["live"].refresh()
        self.after_timer = self.after(POLL_MS, self._poll)


class SetupView(ttk.Frame):
    """Wizard for roster, roles, starting five and game plan."""

    def __init__(self, parent, controller: RotationApp):
        super().__init__(parent, padding=10)
        self.controller = controller
        self.session = controller.session
        self.editing_half = tk.IntVar(value=1)
        self._role_vars: List[tk.BooleanVar] = []
        self._build_ui()

    def _build_ui(self):
        ttk.Label(self, text=APP_TITLE, font=("TkDefaultFont", 16, "bold")).pack(anchor="w")

        steps = ttk.Frame(self)
        steps.pack(fill="x", pady=6)
        for step in SETUP_STEPS:
            ttk.Button(
                steps, text=STEP_LABELS[step], command=lambda s=step: self._go_to(s)
            ).pack(side="left", padx=2)

        self.body = ttk.Frame(self)
        self.body.pack(fill="both", expand=True)

        nav = ttk.Frame(self)
        nav.pack(fill="x", pady=6)
        self.back_btn = ttk.Button(nav, text="Back", command=self._back)
        self.back_btn.pack(side="left")
        self.next_btn = ttk.Button(nav, text="Continue", command=self._continue)
        self.next_btn.pack(side="right")

    def _go_to(self, step: SetupStep):
        self.session.wizard.go_to(step)
        self.refresh()

    def _back(self):
        self.session.wizard.back()
        self.refresh()

    def _continue(self):
        if self.session.wizard.step is SetupStep.GAME_PLAN:
            if self.session.start_game():
                self.controller.show_current()
            return
        self.session.wizard.continue_()
        self.refresh()

    def refresh(self):
        self._role_vars = []
        for child in self.body.winfo_children():
            child.destroy()

        step = self.session.wizard.step
        builders = {
            SetupStep.PLAYERS: self._build_players,
            SetupStep.ROLES: self._build_roles,
            SetupStep.STARTING: self._build_starting,
            SetupStep.GAME_PLAN: self._build_game_plan,
        }
        builders[step]()

        self.back_btn.state(["disabled"] if self.session.wizard.step_index == 0 else ["!disabled"])
        if step is SetupStep.GAME_PLAN:
            self.next_btn.configure(text="Start Game")
            ready = self.session.roster.is_lineup_complete()
        else:
            self.next_btn.configure(text="Continue")
            ready = self.session.wizard.can_continue()
        self.next_btn.state(["!disabled"] if ready else ["disabled"])

    # ---------- Steps ---------- #

    def _build_players(self):
        state = self.session.state

        timing = ttk.Frame(self.body)
        timing.pack(fill="x", pady=4)
        ttk.Label(timing, text="Half Length (minutes)").pack(side="left")
        half_var = tk.StringVar(value=str(state.half_length_minutes))
        ttk.Spinbox(
            timing, from_=MIN_HALF_LENGTH_MIN, to=MAX_HALF_LENGTH_MIN,
            textvariable=half_var, width=5,
        ).pack(side="left", padx=6)
        ttk.Label(timing, text="Sub Interval (minutes)").pack(side="left")
        sub_var = tk.StringVar(value=f"{state.substitution_interval_seconds / 60:g}")
        ttk.Spinbox(
            timing, from_=MIN_SUB_INTERVAL_MIN, to=MAX_SUB_INTERVAL_MIN,
            increment=SUB_INTERVAL_STEP_MIN, textvariable=sub_var, width=5,
        ).pack(side="left", padx=6)

        def apply_timing():
            self.session.clock.configure_timing(
                half_length=half_var.get(), substitution_interval_minutes=sub_var.get()
            )
            self.refresh()

        ttk.Button(timing, text="Apply", command=apply_timing).pack(side="left")

        entry_row = ttk.Frame(self.body)
        entry_row.pack(fill="x", pady=4)
        name_var = tk.StringVar()
        entry = ttk.Entry(entry_row, textvariable=name_var)
        entry.pack(side="left", fill="x", expand=True)

        def add_player(_event=None):
            if self.session.roster.add_player(name_var.get()):
                self.refresh()

        entry.bind("<Return>", add_player)
        add_btn = ttk.Button(entry_row, text="Add", command=add_player)
        add_btn.pack(side="left", padx=4)
        if len(state.roster) >= MAX_ROSTER_SIZE:
            add_btn.state(["disabled"])

        count = len(state.roster)
        needed = len(POSITIONS)
        status = (
            f"{count} players" if count >= needed
            else f"Need at least {needed} players ({count}/{needed})"
        )
        ttk.Label(self.body, text=status).pack(anchor="w")

        for player in self.session.roster.list_players():
            row = ttk.Frame(self.body)
            row.pack(fill="x")
            ttk.Label(row, text=player.name).pack(side="left")
            ttk.Button(
                row, text="Remove",
                command=lambda pid=player.id: (self.session.roster.remove_player(pid), self.refresh()),
            ).pack(side="right")
        entry.focus_set()

    def _build_roles(self):
        ttk.Label(
            self.body,
            text='Add custom roles like "Shooter" or "Rebounder" to help with decision-making.',
        ).pack(anchor="w")

        entry_row = ttk.Frame(self.body)
        entry_row.pack(fill="x", pady=4)
        role_var = tk.StringVar()
        entry = ttk.Entry(entry_row, textvariable=role_var)
        entry.pack(side="left", fill="x", expand=True)

        def add_role(_event=None):
            if self.session.roster.add_role(role_var.get()):
                self.refresh()

        entry.bind("<Return>", add_role)
        ttk.Button(entry_row, text="Add", command=add_role).pack(side="left", padx=4)

        roles = self.session.state.roles
        if not roles:
            return

        role_row = ttk.Frame(self.body)
        role_row.pack(fill="x", pady=4)
        for role in roles:
            ttk.Button(
                role_row, text=f"{role} ✕",
                command=lambda r=role: (self.session.roster.remove_role(r), self.refresh()),
            ).pack(side="left", padx=2)

        for player in self.session.roster.list_players():
            row = ttk.Frame(self.body)
            row.pack(fill="x")
            ttk.Label(row, text=player.name, width=20).pack(side="left")
            for role in roles:
                var = tk.BooleanVar(value=player.has_role(role))
                self._role_vars.append(var)
                ttk.Checkbutton(
                    row, text=role, variable=var,
                    command=lambda pid=player.id, r=role: self.session.roster.toggle_player_role(pid, r),
                ).pack(side="left")

    def _build_starting(self):
        lineup = self.session.state.starting_lineup
        ttk.Label(
            self.body,
            text=f"Select {len(POSITIONS)} players to start the game ({len(lineup)}/{len(POSITIONS)})",
        ).pack(anchor="w")
        for player in self.session.roster.list_players():
            selected = player.id in lineup
            label = player.name
            if selected:
                label = f"{player.name} ✓ {POSITIONS[lineup.index(player.id)]}"
            ttk.Button(
                self.body, text=label,
                command=lambda pid=player.id: (self.session.roster.toggle_starting(pid), self.refresh()),
            ).pack(fill="x", pady=1)

    def _build_game_plan(self):
        half_row = ttk.Frame(self.body)
        half_row.pack(fill="x")
        for half in (1, 2):
            ttk.Radiobutton(
                half_row, text=f"Half {half} Plan", value=half,
                variable=self.editing_half, command=self.refresh,
            ).pack(side="left", padx=4)

        canvas = tk.Canvas(self.body, highlightthickness=0)
        scroll = ttk.Scrollbar(self.body, orient="vertical", command=canvas.yview)
        inner = ttk.Frame(canvas)
        inner.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
        canvas.create_window((0, 0), window=inner, anchor="nw")
        canvas.configure(yscrollcommand=scroll.set)
        canvas.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")

        players = self.session.roster.list_players()
        names = [NO_PLAYER] + [p.name for p in players]
        ids = [""] + [p.id for p in players]
        half = self.editing_half.get()

        for plan in self.session.plan.get_half(half):
            start, end = self.session.plan.interval_window(plan.interval)
            box = ttk.LabelFrame(inner, text=f"Interval {plan.interval} ({start} - {end})", padding=4)
            box.pack(fill="x", pady=3)
            for pos in POSITIONS:
                entry = plan.get_entry(pos)
                row = ttk.Frame(box)
                row.pack(fill="x")
                ttk.Label(row, text=pos, width=4).pack(side="left")
                out_box = ttk.Combobox(row, values=names, state="readonly", width=18)
                in_box = ttk.Combobox(row, values=names, state="readonly", width=18)
                out_box.current(ids.index(entry.player_out_id) if entry and entry.player_out_id in ids else 0)
                in_box.current(ids.index(entry.player_in_id) if entry and entry.player_in_id in ids else 0)
                out_box.bind(
                    "<<ComboboxSelected>>",
                    lambda _e, b=out_box, i=plan.interval, p=pos: self.session.plan.set_player_out(
                        half, i, p, ids[b.current()]
                    ),
                )
                in_box.bind(
                    "<<ComboboxSelected>>",
                    lambda _e, b=in_box, i=plan.interval, p=pos: self.session.plan.set_player_in(
                        half, i, p, ids[b.current()]
                    ),
                )
                ttk.Label(row, text="Out").pack(side="left")
                out_box.pack(side="left", padx=2)
                ttk.Label(row, text="In").pack(side="left")
                in_box.pack(side="left", padx=2)
                if entry:
                    ttk.Button(
                        row, text="Remove Sub",
                        command=lambda i=plan.interval, p=pos: (
                            self.session.plan.clear_substitution(half, i, p), self.refresh()
                        ),
                    ).pack(side="left", padx=4)


class LiveView(ttk.Frame):
    """Live game view: clock, court, bench, play time and manual substitution."""

    def __init__(self, parent, controller: RotationApp):
        super().__init__(parent, padding=10)
        self.controller = controller
        self.session = controller.session
        self._build_ui()

    def _build_ui(self):
        top = ttk.Frame(self)
        top.pack(fill="x")
        self.half_lbl = ttk.Label(top, font=("TkDefaultFont", 14, "bold"))
        self.half_lbl.pack(side="left")
        self.clock_lbl = ttk.Label(top, font=("TkDefaultFont", 24, "bold"))
        self.clock_lbl.pack(side="right")

        interval_row = ttk.Frame(self)
        interval_row.pack(fill="x", pady=4)
        ttk.Label(interval_row, text="View Substitution Plan for Interval:").pack(side="left")
        self.interval_box = ttk.Combobox(interval_row, state="readonly", width=28)
        self.interval_box.pack(side="left", padx=4)
        self.interval_box.bind("<<ComboboxSelected>>", self._select_interval)
        self.planned_lbl = ttk.Label(self, justify="left")
        self.planned_lbl.pack(anchor="w")

        tables = ttk.Frame(self)
        tables.pack(fill="both", expand=True, pady=6)
        self.court = self._tree(tables, ("pos", "player", "roles"), ("Position", "Player", "Roles"))
        self.bench = self._tree(tables, ("player", "roles"), ("Bench", "Roles"))
        self.stats = self._tree(tables, ("player", "time"), ("Player", "Time"))

        controls = ttk.Frame(self)
        controls.pack(fill="x")
        self.run_btn = ttk.Button(controls, command=self._toggle_clock)
        self.run_btn.pack(side="left")
        ttk.Button(controls, text="Substitution", command=self._toggle_sub_panel).pack(side="left", padx=4)
        self.half_btn = ttk.Button(controls)
        self.half_btn.pack(side="left")

        self.sub_panel = ttk.Frame(self)
        self.sub_out = ttk.Combobox(self.sub_panel, state="readonly", width=20)
        self.sub_in = ttk.Combobox(self.sub_panel, state="readonly", width=20)
        ttk.Label(self.sub_panel, text="Out").pack(side="left")
        self.sub_out.pack(side="left", padx=4)
        ttk.Label(self.sub_panel, text="In").pack(side="left")
        self.sub_in.pack(side="left", padx=4)
        ttk.Button(self.sub_panel, text="Confirm Substitution", command=self._confirm_sub).pack(side="left")

    @staticmethod
    def _tree(parent, columns, headings) -> ttk.Treeview:
        tree = ttk.Treeview(parent, columns=columns, show="headings", height=12)
        for col, heading in zip(columns, headings):
            tree.heading(col, text=heading)
        tree.pack(side="left", fill="both", expand=True, padx=3)
        return tree

    def _toggle_clock(self):
        self.session.toggle_clock()
        self.refresh()

    def _toggle_sub_panel(self):
        if self.sub_panel.winfo_ismapped():
            self.sub_panel.pack_forget()
        else:
            self.sub_panel.pack(fill="x", pady=6)
            self.refresh()

    def _confirm_sub(self):
        if self.session.clock.manual_substitution(self.sub_out.get(), self.sub_in.get()):
            self.sub_out.set("")
            self.sub_in.set("")
            self.sub_panel.pack_forget()
        self.refresh()

    def _select_interval(self, _event=None):
        self.session.clock.select_interval(self.interval_box.current())
        self.refresh()

    def _next_half(self):
        self.session.next_half()
        self.refresh()

    def _reset(self):
        self.session.reset_game()
        self.controller.show_current()

    def refresh(self):
        state = self.session.state
        self.half_lbl.configure(text=f"Half {state.current_half}")
        self.clock_lbl.configure(text=format_time(state.time_until_next_sub))
        self.run_btn.configure(text="Pause" if state.running else "Start")
        if state.current_half == 1:
            self.half_btn.configure(text="Next Half", command=self._next_half)
        else:
            self.half_btn.configure(text="Reset Game", command=self._reset)

        windows = [
            "Interval {} ({} - {})".format(i + 1, *self.session.plan.interval_window(i + 1))
            for i in range(state.interval_count)
        ]
        self.interval_box.configure(values=windows)
        if windows:
            self.interval_box.current(min(state.current_interval_index, len(windows) - 1))

        planned = self.session.plan.planned_substitutions(state.current_half, state.current_interval_index)
        if planned:
            lines = [f"Planned Substitutions for Interval {state.current_interval_index + 1}:"]
            lines += [f"  {pos}: {out.name} → {inc.name}" for pos, out, inc in planned]
            self.planned_lbl.configure(text="\n".join(lines))
        else:
            self.planned_lbl.configure(text="No planned substitutions for this interval.")

        self._fill(self.court, [
            (f"{pos} ({POS_SHORT_TO_FULL[pos]})", p.name if p else NO_PLAYER, ", ".join(p.roles) if p else "")
            for pos, p in self.session.stats.on_court()
        ])
        bench = self.session.stats.bench_players()
        self._fill(self.bench, [(p.name, ", ".join(p.roles)) for p in bench])
        self._fill(self.stats, [(s.name, s.time_formatted) for s in self.session.stats.player_stats()])

        self.sub_out.configure(values=[p.name for _pos, p in self.session.stats.on_court() if p])
        self.sub_in.configure(values=[p.name for p in bench])

    @staticmethod
    def _fill(tree: ttk.Treeview, rows: List[tuple]):
        tree.delete(*tree.get_children())
        for row in rows:
            tree.insert("", "end", values=row)


def create_tkinter_app(session: Optional[RotationSession] = None) -> RotationApp:
    """Create the desktop application window."""
    return RotationApp(session)


def run_tkinter_app(settings: Optional[AppSettings] = None) -> None:
    """Run the desktop application until the window closes."""
    settings = settings or AppSettings()
    configure_logging(settings.log_level)
    logger.info("Starting desktop rotation planner")
    create_tkinter_app().mainloop()


if __name__ == "__main__":
    run_tkinter_app()
