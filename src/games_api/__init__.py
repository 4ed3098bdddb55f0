from .app import create_app
from .logic import GameStore

__all__ = ["create_app", "GameStore"]
