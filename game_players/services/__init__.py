"""Service layer implementations.

This module provides business logic services that orchestrate repository operations
and implement business rules.
"""

from .player_service import InvalidArgumentError, PlayerService

__all__ = [
    'InvalidArgumentError',
    'PlayerService'
]
