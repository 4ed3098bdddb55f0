import mongomock

from . import database
from .app import create_app


def test_default_store_uses_configured_collection(monkeypatch):
    mock_client = mongomock.MongoClient()
    monkeypatch.setattr(database, "_client", mock_client)
    mock_client[database.MONGO_DB_NAME][database.GAMES_COLLECTION].insert_one({"title": "Tetris"})

    resp = create_app().test_client().get("/games")

    assert resp.status_code == 200
    assert [game["title"] for game in resp.get_json()] == ["Tetris"]

