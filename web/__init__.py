"""Flask JSON front end for the Othello engine."""

from .app import create_app

__all__ = ["create_app"]
