from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, Enum, Integer, String
from sqlalchemy.orm import DeclarativeMeta, declarative_base

from .domain.models import Profession, Race
from .domain.services import NAME_MAX_LENGTH, TITLE_MAX_LENGTH

Base: DeclarativeMeta = declarative_base()


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    race = Column(Enum(Race, name="race"), nullable=False)
    profession = Column(Enum(Profession, name="profession"), nullable=False)
    birthday = Column(Date, nullable=False)
    banned = Column(Boolean, default=False, nullable=False)
    experience = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)
    until_next_level = Column(Integer, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"<Player id={self.id} name={self.name} level={self.level}>"
