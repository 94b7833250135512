from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class Race(Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(Enum):
    """Sort keys accepted by the player listing."""

    ID = "id"
    NAME = "name"
    EXPERIENCE = "experience"
    BIRTHDAY = "birthday"


@dataclass
class Player:
    """Player record.

    Every field is optional so the same type serves as a partial-update
    patch: ``None`` means the field was not supplied.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[date] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None
    level: Optional[int] = None
    until_next_level: Optional[int] = None
