import logging

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from .models import GameCreate, GameUpdate, game_to_json, validation_errors

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Game not found"
MISSING_ID_MESSAGE = "You need to give me an ID"
MISSING_TITLE_MESSAGE = "Must provide a title"
MISSING_TITLE_OR_ID_MESSAGE = "Must provide a title and an id"
INVALID_GAME_MESSAGE = "Invalid game data"
SAVE_ERROR_MESSAGE = "Error saving data to the DB"
STORE_ERROR_MESSAGE = "Something really bad happened"


def store_error(message, e):
    return jsonify({"message": message, "error": str(e)}), 500


def invalid_game(e, title_message):
    # Only blame the title when the title (or the whole body) is what failed
    errors = validation_errors(e)
    if any(err["field"] in ("title", "body") for err in errors):
        message = title_message
    else:
        message = INVALID_GAME_MESSAGE
    return jsonify({"message": message, "error": errors}), 422


class GamesController:
    def __init__(self, store):
        self.store = store

    def list_games(self):
        # Body and query string are ignored on purpose, there is no filtering
        try:
            games = self.store.find_all()
        except PyMongoError as e:
            logger.exception("Error in list_games")
            return store_error(STORE_ERROR_MESSAGE, e)
        return jsonify([game_to_json(doc) for doc in games]), 200

    def create_game(self):
        data = request.get_json(silent=True)
        try:
            game = GameCreate.model_validate(data if data is not None else {})
        except ValidationError as e:
            return invalid_game(e, MISSING_TITLE_MESSAGE)

        try:
            doc = self.store.create(game.to_document())
        except PyMongoError as e:
            logger.exception("Error in create_game")
            return store_error(SAVE_ERROR_MESSAGE, e)
        return jsonify(game_to_json(doc)), 201

    def update_game(self, game_id=""):
        changes = request.get_json(silent=True)
        if not isinstance(changes, dict):
            changes = {}

        # Only the title and the id are mandatory, genre and release date are optional
        if not game_id or not changes.get("title"):
            return jsonify({"message": MISSING_TITLE_OR_ID_MESSAGE}), 422
        try:
            update = GameUpdate.model_validate(changes)
        except ValidationError as e:
            return invalid_game(e, MISSING_TITLE_OR_ID_MESSAGE)

        try:
            doc = self.store.find_by_id_and_update(game_id, update.to_changes())
        except PyMongoError as e:
            logger.exception("Error in update_game for %s", game_id)
            return store_error(STORE_ERROR_MESSAGE, e)

        if doc is None:
            return jsonify({"message": NOT_FOUND_MESSAGE}), 404
        return jsonify(game_to_json(doc)), 200

    def delete_game(self, game_id=""):
        if not game_id:
            return jsonify({"message": MISSING_ID_MESSAGE}), 422

        try:
            doc = self.store.find_by_id_and_remove(game_id)
        except PyMongoError as e:
            logger.exception("Error in delete_game for %s", game_id)
            return store_error(STORE_ERROR_MESSAGE, e)

        if doc is None:
            return jsonify({"message": NOT_FOUND_MESSAGE}), 404
        return "", 204


def make_games_blueprint(store):
    """Builds the /games blueprint around an injected GameStore."""
    games_blueprint = Blueprint("games", __name__)
    controller = GamesController(store)

    games_blueprint.add_url_rule("/games", view_func=controller.list_games, methods=["GET"])
    games_blueprint.add_url_rule("/games", view_func=controller.create_game, methods=["POST"])

    # Id-less variants exist so a missing id answers 422 instead of 404/405
    for rule in ("/games", "/games/"):
        games_blueprint.add_url_rule(rule, endpoint="update_game_without_id",
                                     view_func=controller.update_game, methods=["PUT"])
        games_blueprint.add_url_rule(rule, endpoint="delete_game_without_id",
                                     view_func=controller.delete_game, methods=["DELETE"])
    games_blueprint.add_url_rule("/games/<game_id>", view_func=controller.update_game, methods=["PUT"])
    games_blueprint.add_url_rule("/games/<game_id>", view_func=controller.delete_game, methods=["DELETE"])

    return games_blueprint
