from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# --- PYDANTIC DATA MODELS ---


class GameBase(BaseModel):
    """Fields shared by every representation of a game record."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., min_length=1, description="Title of the game.")
    genre: Optional[str] = Field(None, description="Free-form genre, e.g. 'Platforming'.")
    release_date: Optional[str] = Field(None, alias="releaseDate", description="Release date as given by the client.")


class GameCreate(GameBase):
    """Schema for POST /games. Any client-supplied id is dropped."""

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class GameUpdate(GameBase):
    """Schema for PUT /games/<id>. Only the fields sent by the client are changed."""

    def to_changes(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


OUTPUT_FIELDS = ("title", "genre", "releaseDate")


def game_to_json(doc: dict) -> dict:
    """Stored game document as returned to clients. Stored values are not re-validated."""
    out = {"id": str(doc["_id"])}
    for key in OUTPUT_FIELDS:
        if doc.get(key) is not None:
            out[key] = doc[key]
    return out


def validation_errors(exc) -> list:
    """Flattens a pydantic ValidationError into JSON-safe field messages."""
    return [
        {"field": ".".join(str(part) for part in err["loc"]) or "body", "message": err["msg"]}
        for err in exc.errors()
    ]
