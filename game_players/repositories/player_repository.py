"""Player repository implementation.

Stores players in SQLAlchemy and hands detached domain objects to callers, so
mutating a returned player has no effect until it is passed back to ``save``.
"""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .base import BaseRepository
from game_players.domain.models import Player as DomainPlayer
from game_players.models import Player as ORMPlayer
import logging

logger = logging.getLogger(__name__)


def _map_player(orm: ORMPlayer) -> DomainPlayer:
    return DomainPlayer(
        id=orm.id,
        name=orm.name,
        title=orm.title,
        race=orm.race,
        profession=orm.profession,
        birthday=orm.birthday,
        banned=bool(orm.banned),
        experience=orm.experience,
        level=orm.level,
        until_next_level=orm.until_next_level,
    )


class PlayerRepository(BaseRepository[DomainPlayer]):
    """Repository for players backed by a SQLAlchemy session."""

    def __init__(self, db_session: Session):
        """Initialize player repository.

        Args:
            db_session: SQLAlchemy database session
        """
        self.db = db_session

    def find_all(self) -> List[DomainPlayer]:
        orm_players = self.db.query(ORMPlayer).order_by(ORMPlayer.id).all()
        return [_map_player(p) for p in orm_players]

    def find_by_id(self, id: int) -> Optional[DomainPlayer]:
        orm = self.db.get(ORMPlayer, id)
        if orm is None:
            return None
        return _map_player(orm)

    def save(self, player: DomainPlayer) -> DomainPlayer:
        """Upsert by primary key.

        Raises:
            IntegrityError: If database constraints are violated
        """
        orm: Optional[ORMPlayer] = None
        if player.id is not None:
            orm = self.db.get(ORMPlayer, player.id)

        if orm is None:
            orm = ORMPlayer()
            if player.id is not None:
                orm.id = player.id
            self.db.add(orm)

        orm.name = player.name
        orm.title = player.title
        orm.race = player.race
        orm.profession = player.profession
        orm.birthday = player.birthday
        orm.banned = bool(player.banned)
        orm.experience = player.experience
        orm.level = player.level
        orm.until_next_level = player.until_next_level

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to save player {player.id}: {e}")
            raise

        self.db.refresh(orm)
        logger.info(f"Saved player with id {orm.id}")
        return _map_player(orm)

    def delete(self, player: DomainPlayer) -> None:
        if player.id is None:
            return

        orm = self.db.get(ORMPlayer, player.id)
        if orm is None:
            return

        self.db.delete(orm)
        self.db.commit()
        logger.info(f"Deleted player with id {player.id}")
