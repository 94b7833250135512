from datetime import date

import pytest
from marshmallow import ValidationError

from game_players.domain import Player, PlayerOrder, Profession, Race
from game_players.validation import (
    player_create_schema,
    player_list_schema,
    player_schema,
    player_update_schema,
)

from conftest import make_player, to_millis


def _create_payload(**overrides):
    payload = {
        "name": "Hero",
        "title": "The Brave",
        "race": "HUMAN",
        "profession": "WARRIOR",
        "birthday": to_millis(date(2005, 5, 5)),
        "experience": 1000,
    }
    payload.update(overrides)
    return payload


def test_create_schema_builds_player():
    player = player_create_schema.load(_create_payload(id=99))

    assert isinstance(player, Player)
    assert player.id is None
    assert player.race is Race.HUMAN
    assert player.profession is Profession.WARRIOR
    assert player.birthday == date(2005, 5, 5)
    assert player.banned is False
    assert player.experience == 1000


@pytest.mark.parametrize("missing", ["name", "title", "race", "profession", "birthday", "experience"])
def test_create_schema_requires_fields(missing):
    payload = _create_payload()
    del payload[missing]

    with pytest.raises(ValidationError) as excinfo:
        player_create_schema.load(payload)
    assert missing in excinfo.value.messages


@pytest.mark.parametrize(
    "field, value",
    [("race", "ELVES"), ("experience", "lots"), ("experience", 10.5), ("birthday", "yesterday")],
)
def test_create_schema_rejects_bad_types(field, value):
    with pytest.raises(ValidationError):
        player_create_schema.load(_create_payload(**{field: value}))


def test_update_schema_treats_null_as_absent():
    patch = player_update_schema.load({"name": None, "title": "Lord", "banned": True})

    assert patch == Player(title="Lord", banned=True)


def test_player_schema_dump_uses_public_names():
    data = player_schema.dump(make_player(id=7))

    assert data == {
        "id": 7,
        "name": "Hero",
        "title": "The Brave",
        "race": "HUMAN",
        "profession": "WARRIOR",
        "birthday": to_millis(date(2005, 5, 5)),
        "banned": False,
        "experience": 1000,
        "level": 4,
        "untilNextLevel": 500,
    }


def test_list_schema_parses_query_strings():
    params = player_list_schema.load({
        "name": "er",
        "banned": "true",
        "minExperience": "10",
        "maxLevel": "5",
        "order": "experience",
        "pageNumber": "2",
        "pageSize": "4",
        "unrelated": "ignored",
    })

    assert params == {
        "name": "er",
        "banned": True,
        "min_experience": 10,
        "max_level": 5,
        "order": PlayerOrder.EXPERIENCE,
        "page_number": 2,
        "page_size": 4,
    }


@pytest.mark.parametrize(
    "query",
    [{"order": "LEVELS"}, {"pageNumber": "-1"}, {"pageSize": "0"}, {"race": "robot"}],
)
def test_list_schema_rejects_bad_parameters(query):
    with pytest.raises(ValidationError):
        player_list_schema.load(query)
