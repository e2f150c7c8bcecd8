"""Blessed-based full-screen station browser."""

from .app import PlayerSession, create_session, run_interactive_ui

__all__ = ["PlayerSession", "create_session", "run_interactive_ui"]
