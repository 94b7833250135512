"""Domain layer - player entity, enumerations and business rules.

This layer has no knowledge of Flask or SQLAlchemy.
"""

from .models import Player, PlayerOrder, Profession, Race
from .services import LevelRules, PlayerRules

__all__ = [
    # Entities
    'Player',

    # Enumerations
    'Race', 'Profession', 'PlayerOrder',

    # Domain Services
    'PlayerRules', 'LevelRules'
]
