import pytest
from bson import ObjectId
from pydantic import ValidationError

from .models import GameCreate, GameUpdate, game_to_json, validation_errors


def test_game_create_reads_camel_case_release_date():
    game = GameCreate.model_validate({"title": "Tetris", "releaseDate": "June 1984"})
    assert game.release_date == "June 1984"
    assert game.to_document() == {"title": "Tetris", "releaseDate": "June 1984"}


def test_game_create_drops_unknown_fields_and_client_id():
    game = GameCreate.model_validate({"title": "Tetris", "_id": "abc", "id": "abc", "rating": 5})
    assert game.to_document() == {"title": "Tetris"}


@pytest.mark.parametrize("body", [{}, {"genre": "Puzzle"}, {"title": ""}, {"title": 42}, []])
def test_game_create_rejects_missing_or_bad_title(body):
    with pytest.raises(ValidationError):
        GameCreate.model_validate(body)


def test_game_update_only_reports_sent_fields():
    update = GameUpdate.model_validate({"title": "Tetris", "genre": "Puzzle"})
    assert update.to_changes() == {"title": "Tetris", "genre": "Puzzle"}


def test_game_to_json():
    oid = ObjectId()
    doc = {"_id": oid, "title": "Tetris", "genre": None, "releaseDate": "June 1984", "__v": 0}
    assert game_to_json(doc) == {"id": str(oid), "title": "Tetris", "releaseDate": "June 1984"}


def test_game_to_json_keeps_stored_values_as_is():
    oid = ObjectId()
    assert game_to_json({"_id": oid, "genre": 3}) == {"id": str(oid), "genre": 3}


def test_validation_errors_are_json_safe():
    with pytest.raises(ValidationError) as exc_info:
        GameCreate.model_validate({"genre": "Puzzle"})

    errors = validation_errors(exc_info.value)
    assert errors == [{"field": "title", "message": "Field required"}]
