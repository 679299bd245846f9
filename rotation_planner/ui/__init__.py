"""
UI package for the Basketball Rotation Planner.

This package contains the Flask JSON API and the Tkinter desktop app.
The Tkinter module is imported on demand (``rotation_planner.ui.tkinter_app``)
so the web server runs on interpreters built without Tk.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
