"""Player service: query, ordering, paging and validated updates.

Works on domain players handed out by a ``BaseRepository``. Filtering is a
linear scan over ``find_all()``; the store is only written through ``save``
and ``delete``.
"""

import logging
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import List, Optional

from game_players.domain.models import Player, PlayerOrder, Profession, Race
from game_players.domain.services import LevelRules, PlayerRules
from game_players.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3


class InvalidArgumentError(ValueError):
    """A player field failed validation."""

    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for {field}: {value!r}")


def millis_to_date(millis: int) -> date:
    """Convert epoch milliseconds to a UTC calendar date.

    Values outside the representable range clamp to ``date.min``/``date.max``.
    """
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).date()
    except (ValueError, OverflowError, OSError):
        return date.min if millis < 0 else date.max


_SORT_KEYS = {
    PlayerOrder.ID: lambda p: p.id,
    PlayerOrder.NAME: lambda p: p.name,
    PlayerOrder.EXPERIENCE: lambda p: p.experience,
    PlayerOrder.BIRTHDAY: lambda p: p.birthday,
}


class PlayerService:
    """Business operations over a player store."""

    def __init__(self, player_repo: BaseRepository[Player]):
        self._player_repo = player_repo

    def get_players(
        self,
        name: Optional[str] = None,
        title: Optional[str] = None,
        race: Optional[Race] = None,
        profession: Optional[Profession] = None,
        after: Optional[int] = None,
        before: Optional[int] = None,
        banned: Optional[bool] = None,
        min_experience: Optional[int] = None,
        max_experience: Optional[int] = None,
        min_level: Optional[int] = None,
        max_level: Optional[int] = None,
    ) -> List[Player]:
        """Return the stored players matching every supplied criterion.

        ``name`` and ``title`` match as substrings, ``after`` and ``before``
        are epoch milliseconds bounding the birthday, and the experience and
        level bounds are inclusive. ``None`` disables a criterion.

        ``after`` and ``before`` are truncated to their UTC calendar date
        before comparing, so any instant on a player's birthday matches it.
        """
        after_date = millis_to_date(after) if after is not None else None
        before_date = millis_to_date(before) if before is not None else None

        players = []
        for player in self._player_repo.find_all():
            if name is not None and name not in player.name:
                continue
            if title is not None and title not in player.title:
                continue
            if race is not None and player.race != race:
                continue
            if profession is not None and player.profession != profession:
                continue
            if after_date is not None and player.birthday < after_date:
                continue
            if before_date is not None and player.birthday > before_date:
                continue
            if banned is not None and bool(player.banned) != banned:
                continue
            if min_experience is not None and player.experience < min_experience:
                continue
            if max_experience is not None and player.experience > max_experience:
                continue
            if min_level is not None and player.level < min_level:
                continue
            if max_level is not None and player.level > max_level:
                continue
            players.append(player)
        return players

    def sort_players(self, players: List[Player], order: Optional[PlayerOrder]) -> List[Player]:
        """Stable in-place sort of ``players`` by ``order``; returns the same list."""
        if order is not None:
            players.sort(key=_SORT_KEYS[order])
        return players

    def get_page(
        self,
        players: List[Player],
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Player]:
        """Slice one zero-based page out of ``players``.

        The slice is clamped to the list bounds, so a page past the end is
        empty.
        """
        page = DEFAULT_PAGE_NUMBER if page_number is None else page_number
        size = DEFAULT_PAGE_SIZE if page_size is None else page_size

        first = page * size
        start = min(max(first, 0), len(players))
        end = min(max(first + size, start), len(players))
        return players[start:end]

    def get_player(self, player_id: int) -> Optional[Player]:
        return self._player_repo.find_by_id(player_id)

    def save_player(self, player: Player) -> Player:
        return self._player_repo.save(player)

    def delete_player(self, player: Player) -> None:
        self._player_repo.delete(player)
        logger.info(f"Player {player.id} deleted")

    def is_player_valid(self, player: Optional[Player]) -> bool:
        return (
            player is not None
            and PlayerRules.is_name_valid(player.name)
            and PlayerRules.is_title_valid(player.title)
            and PlayerRules.is_birthday_valid(player.birthday)
            and PlayerRules.is_experience_valid(player.experience)
        )

    def is_experience_valid(self, experience: Optional[int]) -> bool:
        return PlayerRules.is_experience_valid(experience)

    @staticmethod
    def compute_level(experience: int) -> int:
        return LevelRules.compute_level(experience)

    @staticmethod
    def compute_until_next_level(level: int, experience: int) -> int:
        return LevelRules.compute_until_next_level(level, experience)

    def create_player(self, player: Player) -> Player:
        """Validate a new player, derive its level and store it.

        Raises:
            InvalidArgumentError: If a required field is missing or invalid
        """
        if not self.is_player_valid(player):
            logger.warning(f"Rejected new player: {player!r}")
            raise InvalidArgumentError("player", player)
        if player.race is None:
            raise InvalidArgumentError("race")
        if player.profession is None:
            raise InvalidArgumentError("profession")

        level, until_next_level = self._derive_level(player.experience)
        new_player = replace(
            player,
            id=None,
            banned=bool(player.banned),
            level=level,
            until_next_level=until_next_level,
        )
        saved = self._player_repo.save(new_player)
        logger.info(f"Player {saved.id} created: {saved.name}")
        return saved

    def update_player(self, old_player: Player, new_player: Player) -> Player:
        """Apply the non-None fields of ``new_player`` onto ``old_player`` and save.

        Every supplied field is checked before ``old_player`` is touched, so a
        rejected patch leaves both the object and the store unchanged.

        Raises:
            InvalidArgumentError: If any supplied field is invalid
        """
        changes = {}

        if new_player.name is not None:
            if not PlayerRules.is_name_valid(new_player.name):
                raise self._reject(old_player, "name", new_player.name)
            changes["name"] = new_player.name

        if new_player.title is not None:
            if not PlayerRules.is_title_valid(new_player.title):
                raise self._reject(old_player, "title", new_player.title)
            changes["title"] = new_player.title

        if new_player.race is not None:
            changes["race"] = new_player.race

        if new_player.profession is not None:
            changes["profession"] = new_player.profession

        if new_player.birthday is not None:
            if not PlayerRules.is_birthday_valid(new_player.birthday):
                raise self._reject(old_player, "birthday", new_player.birthday)
            changes["birthday"] = new_player.birthday

        if new_player.banned is not None:
            changes["banned"] = new_player.banned

        if new_player.experience is not None:
            level, until_next_level = self._derive_level(new_player.experience, old_player)
            changes["experience"] = new_player.experience
            changes["level"] = level
            changes["until_next_level"] = until_next_level

        for field, value in changes.items():
            setattr(old_player, field, value)

        saved = self._player_repo.save(old_player)
        logger.info(f"Player {saved.id} updated: {sorted(changes)}")
        return saved

    def _derive_level(self, experience: int, player: Optional[Player] = None):
        if not PlayerRules.is_experience_valid(experience):
            raise self._reject(player, "experience", experience)

        level = LevelRules.compute_level(experience)
        if not PlayerRules.is_level_valid(level):
            raise self._reject(player, "level", level)

        until_next_level = LevelRules.compute_until_next_level(level, experience)
        if not PlayerRules.is_until_next_level_valid(until_next_level):
            raise self._reject(player, "until_next_level", until_next_level)

        return level, until_next_level

    @staticmethod
    def _reject(player: Optional[Player], field: str, value) -> InvalidArgumentError:
        player_id = player.id if player is not None else None
        logger.warning(f"Rejected {field}={value!r} for player {player_id}")
        return InvalidArgumentError(field, value)
