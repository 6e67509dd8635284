"""
In-memory stores shared across all routes.

Sessions live in a plain dict keyed by the cookie value and pokemon in an
append-only list; nothing survives a process restart. Routes reach the
process-wide instances through get_session_store() / get_pokemon_store()
so tests can swap in fresh ones via app.dependency_overrides.
"""

import logging
import threading
import uuid
from typing import Optional

from models.pokemon import Pokemon
from models.session import Session, SessionData

logger = logging.getLogger(__name__)

SEED_POKEMON = [
    ("Bulbasaur", "Grass"),
    ("Charmander", "Fire"),
    ("Squirtle", "Water"),
]


class SessionStore:
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def get_or_create(self, session_id: Optional[str]) -> Session:
        """
        Returns the stored session for a known id.
        A missing or unknown id gets a freshly minted one; ids the server
        never issued are not adopted.
        """
        if session_id:
            session = self._sessions.get(session_id)
            if session is not None:
                return session

        session = Session(session_id=uuid.uuid4().hex)
        self._sessions[session.session_id] = session
        logger.debug("Created session %s", session.session_id)
        return session

    def destroy(self, session: Session) -> None:
        """Clears the session's data. The id stays registered as a blank session."""
        session.data = SessionData()

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


class PokemonStore:
    def __init__(self, seed: Optional[list[tuple[str, str]]] = None) -> None:
        self._pokemon: list[Pokemon] = []
        self._lock = threading.Lock()
        for name, type_ in SEED_POKEMON if seed is None else seed:
            self.add(name, type_)

    def all(self) -> list[Pokemon]:
        with self._lock:
            return list(self._pokemon)

    def add(self, name: str, type_: str) -> Pokemon:
        # id assignment and append happen under one lock so ids stay sequential
        with self._lock:
            pokemon = Pokemon(id=len(self._pokemon) + 1, name=name, type=type_)
            self._pokemon.append(pokemon)
        return pokemon

    def __len__(self) -> int:
        return len(self._pokemon)


sessions = SessionStore()
pokemon = PokemonStore()


def get_session_store() -> SessionStore:
    return sessions


def get_pokemon_store() -> PokemonStore:
    return pokemon
