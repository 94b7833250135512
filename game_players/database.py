"""Database dependency injection.

Provides database sessions and the player service to Flask route handlers.
The session factory is created by ``create_app`` and stored in
``app.extensions``.
"""

from functools import wraps
from typing import Generator

from flask import current_app
from sqlalchemy.orm import Session

from game_players.repositories import PlayerRepository
from game_players.services import PlayerService


def get_db_session() -> Generator[Session, None, None]:
    """Get database session with automatic cleanup.

    Yields:
        SQLAlchemy database session
    """
    db = current_app.extensions["db_session_factory"]()
    try:
        yield db
    finally:
        db.close()


def get_player_service(db: Session) -> PlayerService:
    """Get a player service bound to a session.

    Args:
        db: Database session

    Returns:
        PlayerService instance
    """
    return PlayerService(PlayerRepository(db))


def with_player_service(func):
    """Decorator to inject the player service into route handlers.

    Usage:
        @bp.route('/players')
        @with_player_service
        def list_players(service: PlayerService):
            return jsonify(players_schema.dump(service.get_players()))
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        with current_app.extensions["db_session_factory"]() as db:
            return func(get_player_service(db), *args, **kwargs)
    return wrapper
