import logging

from bson import ObjectId
from pymongo import ReturnDocument

logger = logging.getLogger(__name__)


def to_object_id(game_id):
    """Returns the ObjectId for game_id, or None if it can't name a document."""
    if isinstance(game_id, ObjectId):
        return game_id
    if not game_id or not ObjectId.is_valid(game_id):
        return None
    return ObjectId(game_id)


class GameStore:
    """
    Persistence primitives over a single MongoDB collection of games.

    The collection is resolved through ``get_collection`` on every call so the
    connection is opened lazily, on the first request that needs it.
    Driver errors (pymongo.errors.PyMongoError) are not caught here; the
    routes decide how to report them.
    """

    def __init__(self, get_collection):
        self._get_collection = get_collection

    @classmethod
    def from_collection(cls, collection):
        return cls(lambda: collection)

    @property
    def collection(self):
        return self._get_collection()

    def create(self, fields):
        doc = dict(fields)
        doc.pop("_id", None)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Game %s created.", result.inserted_id)
        return doc

    def find_all(self):
        return list(self.collection.find({}))

    def find_by_id_and_update(self, game_id, changes):
        """Applies changes with $set and returns the post-update document, or None."""
        query_id = to_object_id(game_id)
        if query_id is None:
            return None
        return self.collection.find_one_and_update(
            {"_id": query_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )

    def find_by_id_and_remove(self, game_id):
        """Deletes the game and returns the removed document, or None."""
        query_id = to_object_id(game_id)
        if query_id is None:
            return None
        return self.collection.find_one_and_delete({"_id": query_id})
