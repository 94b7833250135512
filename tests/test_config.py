from game_players import create_app
from game_players.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)


def test_get_config_follows_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    assert isinstance(get_config(), ProductionConfig)

    monkeypatch.setenv("ENVIRONMENT", "testing")
    assert isinstance(get_config(), TestingConfig)

    monkeypatch.setenv("ENVIRONMENT", "anything-else")
    assert isinstance(get_config(), DevelopmentConfig)


def test_testing_config_runs_on_in_memory_database(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "testing")
    cfg = get_config()

    app = create_app({"DATABASE_URL": cfg.DATABASE_URL, "TESTING": True})
    app.init_db()

    # tables created by init_db survive across requests on the shared connection
    with app.test_client() as client:
        assert client.get("/rest/players/count").get_json() == 0
        assert client.get("/rest/health").status_code == 200
