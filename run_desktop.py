#!/usr/bin/env python3
"""
Main entry point for the Basketball Rotation Planner desktop application.

This script launches the Tkinter-based desktop interface.
"""
from rotation_planner.ui.tkinter_app import run_tkinter_app

if __name__ == "__main__":
    run_tkinter_app()
