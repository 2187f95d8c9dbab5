"""Textual-powered interactive board."""

from .app import PatienceTextualApp, run_textual_app

__all__ = ["PatienceTextualApp", "run_textual_app"]
