"""Tests for the server-side session store and cookie signing"""
from storefront.sessions import InMemorySessionStore, SessionCookieSigner


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_new_session_is_not_stored():
    """Test new sessions are not stored until saved."""
    store = InMemorySessionStore(ttl_seconds=60)
    session = store.new()

    assert session.is_new
    assert not session.modified
    assert store.get(session.id) is None
    assert len(store) == 0


def test_save_and_get():
    """Test saving and loading a session."""
    store = InMemorySessionStore(ttl_seconds=60)
    session = store.new()
    session.data["cart"] = "x"
    session.mark_modified()

    store.save(session)

    assert store.get(session.id) is session
    assert not session.is_new
    assert not session.modified


def test_session_ids_are_unique():
    """Test session ids differ."""
    store = InMemorySessionStore()
    assert store.new().id != store.new().id


def test_expired_session_is_discarded():
    """Test expired sessions are dropped on lookup."""
    clock = FakeClock()
    store = InMemorySessionStore(ttl_seconds=60, clock=clock)
    session = store.new()
    store.save(session)

    clock.now += 59
    assert store.get(session.id) is session

    clock.now += 1
    assert store.get(session.id) is None
    assert len(store) == 0


def test_purge_expired_on_new_save():
    """Test saving a new session sweeps expired ones."""
    clock = FakeClock()
    store = InMemorySessionStore(ttl_seconds=10, clock=clock)
    old = store.new()
    store.save(old)

    clock.now += 20
    fresh = store.new()
    store.save(fresh)

    assert len(store) == 1
    assert store.get(fresh.id) is fresh


def test_signer_round_trip():
    """Test signing and verifying a session id."""
    signer = SessionCookieSigner("secret")
    signed = signer.sign("abc123")

    assert signed != "abc123"
    assert signer.unsign(signed) == "abc123"


def test_signer_rejects_tampering():
    """Test forged cookies are rejected."""
    signer = SessionCookieSigner("secret")
    signed = signer.sign("abc123")

    assert signer.unsign("abc124" + signed[len("abc123"):]) is None
    assert signer.unsign("garbage") is None
    assert SessionCookieSigner("other-secret").unsign(signed) is None
