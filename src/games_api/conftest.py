import mongomock
import pytest
from bson import ObjectId

from .app import create_app
from .logic import GameStore

MARIO_ID = "5b2d1983633f412f4d1d9368"

DUMMY_GAMES = [
    {
        "_id": ObjectId(MARIO_ID),
        "title": "Mario Bros.",
        "genre": "Platforming",
        "releaseDate": "September 1983",
    },
    {
        "title": "Tetris",
        "genre": "Puzzle",
        "releaseDate": "June 1984",
    },
]


@pytest.fixture
def collection():
    mock_client = mongomock.MongoClient()
    return mock_client["games_db"]["games"]


@pytest.fixture
def seeded_collection(collection):
    collection.insert_many([dict(game) for game in DUMMY_GAMES])
    return collection


@pytest.fixture
def store(collection):
    return GameStore.from_collection(collection)


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    return app.test_client()
