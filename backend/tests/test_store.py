"""Unit tests for the in-memory session and pokemon stores."""

import threading

from store import SEED_POKEMON, PokemonStore, SessionStore


# ── Sessions ──────────────────────────────────────────────────────────────


class TestSessionStore:

    def setup_method(self):
        self.sessions = SessionStore()

    def test_missing_id_mints_new_session(self):
        session = self.sessions.get_or_create(None)
        assert session.session_id
        assert not session.data.is_logged_in
        assert session.data.name is None
        assert len(self.sessions) == 1

    def test_known_id_returns_same_object(self):
        session = self.sessions.get_or_create(None)
        session.data.is_logged_in = True

        again = self.sessions.get_or_create(session.session_id)
        assert again is session
        assert again.data.is_logged_in

    def test_unknown_id_is_not_adopted(self):
        session = self.sessions.get_or_create("forged")
        assert session.session_id != "forged"
        assert "forged" not in self.sessions

    def test_ids_are_unique(self):
        ids = {self.sessions.get_or_create(None).session_id for _ in range(100)}
        assert len(ids) == 100

    def test_destroy_clears_data_keeps_id(self):
        session = self.sessions.get_or_create(None)
        session.data.is_logged_in = True
        session.data.name = "Brock"

        self.sessions.destroy(session)

        assert session.session_id in self.sessions
        again = self.sessions.get_or_create(session.session_id)
        assert not again.data.is_logged_in
        assert again.data.name is None


# ── Pokemon ───────────────────────────────────────────────────────────────


class TestPokemonStore:

    def test_seeded_with_sequential_ids(self):
        store = PokemonStore()
        assert [(p.id, p.name, p.type) for p in store.all()] == [
            (i + 1, name, type_) for i, (name, type_) in enumerate(SEED_POKEMON)
        ]

    def test_empty_seed(self):
        assert len(PokemonStore(seed=[])) == 0

    def test_add_assigns_length_plus_one(self):
        store = PokemonStore()
        before = len(store)
        pokemon = store.add("Pikachu", "Electric")
        assert pokemon.id == before + 1
        assert store.all()[-1] == pokemon

    def test_all_returns_a_copy(self):
        store = PokemonStore()
        store.all().clear()
        assert len(store) == len(SEED_POKEMON)

    def test_concurrent_adds_get_distinct_ids(self):
        store = PokemonStore(seed=[])

        def add_many():
            for _ in range(200):
                store.add("Magikarp", "Water")

        threads = [threading.Thread(target=add_many) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [p.id for p in store.all()]
        assert ids == list(range(1, 801))
