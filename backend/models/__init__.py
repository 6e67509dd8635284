from models.error import ErrorPayload
from models.pokemon import Pokemon
from models.session import Session, SessionData

__all__ = ["ErrorPayload", "Pokemon", "Session", "SessionData"]
