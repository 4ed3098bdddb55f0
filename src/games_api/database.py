import logging

from pymongo import MongoClient

from .config import MONGO_URI, MONGO_DB_NAME, GAMES_COLLECTION, MONGO_TIMEOUT_MS

logger = logging.getLogger(__name__)

# --- MongoDB Connection ---
_client = None


def get_db():  # Lazily load DB, never called when a store is injected into create_app
    global _client
    if _client is None:
        _client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
        logger.info("MongoDB client created for %s", MONGO_URI)
    return _client[MONGO_DB_NAME]


def get_games_collection():
    db = get_db()
    return db[GAMES_COLLECTION]

