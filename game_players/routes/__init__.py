"""Flask routes for the player REST API."""

from .player_routes import bp as player_bp

__all__ = ['player_bp']
