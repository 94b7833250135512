"""Repository pattern implementation.

This module provides the data access layer behind the player service.
"""

from .base import BaseRepository
from .player_repository import PlayerRepository

__all__ = [
    'BaseRepository',
    'PlayerRepository'
]
