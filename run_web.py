#!/usr/bin/env python3
"""
Main entry point for the Basketball Rotation Planner web application.

This script launches the Flask-based JSON API.
"""
from rotation_planner.ui.web_app import run_web_app

if __name__ == "__main__":
    run_web_app()
