from datetime import date

from game_players.domain import Profession, Race
from game_players.models import Player as ORMPlayer

from conftest import make_player


def test_player_save_and_find(player_repo):
    saved = player_repo.save(make_player(name="Mario", race=Race.ELF, profession=Profession.DRUID))

    assert saved.id is not None
    assert saved.name == "Mario"
    assert saved.race is Race.ELF
    assert saved.profession is Profession.DRUID
    assert saved.birthday == date(2005, 5, 5)
    assert saved.banned is False
    assert saved.level == 4
    assert saved.until_next_level == 500

    fetched = player_repo.find_by_id(saved.id)
    assert fetched == saved


def test_find_by_id_missing_returns_none(player_repo):
    assert player_repo.find_by_id(12345) is None


def test_find_all_returns_rows_in_id_order(player_repo, in_memory_session):
    # rows inserted through the ORM simulate pre-existing data
    in_memory_session.add(ORMPlayer(
        name="Orm", title="Row", race=Race.ORC, profession=Profession.ROGUE,
        birthday=date(2001, 1, 1), banned=True, experience=100, level=1,
        until_next_level=200,
    ))
    in_memory_session.commit()
    player_repo.save(make_player(name="Second"))

    players = player_repo.find_all()
    assert [p.name for p in players] == ["Orm", "Second"]
    assert players[0].banned is True


def test_returned_players_are_detached(player_repo):
    saved = player_repo.save(make_player())
    saved.name = "Changed"

    assert player_repo.find_by_id(saved.id).name == "Hero"


def test_save_existing_updates_in_place(player_repo):
    saved = player_repo.save(make_player())
    saved.title = "Renamed"
    player_repo.save(saved)

    players = player_repo.find_all()
    assert len(players) == 1
    assert players[0].title == "Renamed"


def test_delete(player_repo):
    keep = player_repo.save(make_player(name="Keep"))
    drop = player_repo.save(make_player(name="Drop"))

    player_repo.delete(drop)

    assert player_repo.find_by_id(drop.id) is None
    assert [p.id for p in player_repo.find_all()] == [keep.id]

    # deleting again is a no-op
    player_repo.delete(drop)
