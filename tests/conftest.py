import os
import sys
from datetime import date, datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Ensure repo root is on sys.path so tests can import the game_players package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from game_players import create_app  # noqa: E402
from game_players.domain import LevelRules, Player, Profession, Race  # noqa: E402
from game_players.models import Base  # noqa: E402
from game_players.repositories import PlayerRepository  # noqa: E402
from game_players.services import PlayerService  # noqa: E402


def make_player(**overrides) -> Player:
    """Build a valid, not yet stored player with consistent level fields."""
    fields = dict(
        name="Hero",
        title="The Brave",
        race=Race.HUMAN,
        profession=Profession.WARRIOR,
        birthday=date(2005, 5, 5),
        banned=False,
        experience=1000,
    )
    fields.update(overrides)
    level = LevelRules.compute_level(fields["experience"])
    fields.setdefault("level", level)
    fields.setdefault(
        "until_next_level",
        LevelRules.compute_until_next_level(level, fields["experience"]),
    )
    return Player(**fields)


def to_millis(day: date) -> int:
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp() * 1000)


@pytest.fixture
def in_memory_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def player_repo(in_memory_session):
    return PlayerRepository(in_memory_session)


@pytest.fixture
def service(player_repo):
    return PlayerService(player_repo)


@pytest.fixture
def app(tmp_path):
    db_file = tmp_path / "test_players.db"
    app = create_app({"DATABASE_URL": f"sqlite:///{db_file}", "TESTING": True})
    app.init_db()
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
