"""Helper to initialize the database schema using SQLAlchemy models.

Usage (from repo root):
python3 scripts/init_db.py [--seed]

This will import the Flask app factory and call app.init_db() which uses SQLAlchemy
models defined in game_players/models.py to create tables. With --seed a few
sample players are stored through the player service.
"""

import argparse
import os
import sys
from datetime import date

# ensure repo root is on path
HERE = os.path.dirname(os.path.dirname(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from game_players import create_app
from game_players.database import get_player_service
from game_players.domain import Player, Profession, Race

SAMPLE_PLAYERS = [
    Player(name="Nius", title="Silent Wanderer", race=Race.HOBBIT,
           profession=Profession.ROGUE, birthday=date(2010, 10, 12), experience=58347),
    Player(name="Nikrashsh", title="Night Wolf", race=Race.ORC,
           profession=Profession.WARRIOR, birthday=date(2010, 2, 14), experience=174403),
    Player(name="Ezzessel", title="The Hissing One", race=Race.DWARF,
           profession=Profession.CLERIC, birthday=date(2006, 2, 28), experience=804, banned=True),
    Player(name="Belan", title="Tse Raa", race=Race.DWARF,
           profession=Profession.ROGUE, birthday=date(2008, 2, 25), experience=44553, banned=True),
    Player(name="Eleonora", title="Grandmother", race=Race.HUMAN,
           profession=Profession.SORCERER, birthday=date(2006, 1, 7), experience=63986, banned=True),
]


def seed(app) -> int:
    with app.extensions["db_session_factory"]() as db:
        service = get_player_service(db)
        for player in SAMPLE_PLAYERS:
            service.create_player(player)
    return len(SAMPLE_PLAYERS)


def main():
    parser = argparse.ArgumentParser(description="Create the players schema")
    parser.add_argument("--seed", action="store_true", help="store sample players")
    args = parser.parse_args()

    app = create_app()
    print("Initializing DB (this will create tables defined in game_players.models)")
    app.init_db()
    if args.seed:
        print(f"Seeded {seed(app)} players")
    print("Done.")


if __name__ == "__main__":
    main()
