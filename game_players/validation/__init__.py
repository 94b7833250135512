"""Validation module for API input validation.

Provides Marshmallow schemas for all API endpoints.
"""

from .schemas import (
    EpochMillisDate,
    PlayerSchema, PlayerCreateSchema, PlayerUpdateSchema,
    PlayerFilterSchema, PlayerListSchema,
    player_schema, players_schema,
    player_create_schema, player_update_schema,
    player_filter_schema, player_list_schema
)

__all__ = [
    'EpochMillisDate',
    'PlayerSchema', 'PlayerCreateSchema', 'PlayerUpdateSchema',
    'PlayerFilterSchema', 'PlayerListSchema',
    'player_schema', 'players_schema',
    'player_create_schema', 'player_update_schema',
    'player_filter_schema', 'player_list_schema'
]
