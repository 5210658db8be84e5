"""
Server-side sessions.

Session records live in process memory; the client only holds a signed
``sid`` cookie naming its record. A session is persisted (and the cookie
issued) the first time a handler modifies it.
"""
import secrets
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from itsdangerous import BadSignature, TimestampSigner
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from storefront.config import DEFAULT_SESSION_TTL, SESSION_COOKIE_NAME
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)

SESSION_SALT = "storefront.session"


@dataclass
class Session:
    """Per-client state. Handlers borrow it for the duration of a request."""
    id: str
    created_at: float
    expires_at: float
    data: Dict[str, object] = field(default_factory=dict)
    is_new: bool = True
    modified: bool = False

    def mark_modified(self) -> None:
        self.modified = True

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemorySessionStore:
    """
    Process-lifetime session storage.

    Sessions expire ``ttl_seconds`` after creation. Expired records are
    dropped when looked up and swept whenever a new session is saved.
    """

    def __init__(self, ttl_seconds: int = DEFAULT_SESSION_TTL, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def new(self) -> Session:
        """Create a session object without storing it."""
        now = self._clock()
        return Session(
            id=secrets.token_urlsafe(32),
            created_at=now,
            expires_at=now + self.ttl_seconds,
        )

    def get(self, session_id: str) -> Optional[Session]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.is_expired(self._clock()):
            del self._sessions[session_id]
            return None
        return session

    def save(self, session: Session) -> None:
        if session.id not in self._sessions:
            self.purge_expired()
        self._sessions[session.id] = session
        session.is_new = False
        session.modified = False

    def purge_expired(self) -> int:
        """Drop every expired session. Returns how many were removed."""
        now = self._clock()
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)


class SessionCookieSigner:
    """Signs session ids for the cookie and verifies them on the way back."""

    def __init__(self, secret: str, max_age: int = DEFAULT_SESSION_TTL):
        self._signer = TimestampSigner(secret, salt=SESSION_SALT)
        self.max_age = max_age

    def sign(self, session_id: str) -> str:
        return self._signer.sign(session_id).decode("utf-8")

    def unsign(self, cookie_value: str) -> Optional[str]:
        """Return the session id, or None if the cookie is forged or too old."""
        try:
            return self._signer.unsign(cookie_value, max_age=self.max_age).decode("utf-8")
        except BadSignature:
            return None


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Attaches ``request.state.session`` to every request.

    Cookie: HTTP-only, SameSite=Lax, Max-Age equal to the store TTL.
    """

    def __init__(
        self,
        app,
        store: InMemorySessionStore,
        secret: str,
        cookie_name: str = SESSION_COOKIE_NAME,
        secure: bool = False,
    ):
        super().__init__(app)
        self.store = store
        self.signer = SessionCookieSigner(secret, max_age=store.ttl_seconds)
        self.cookie_name = cookie_name
        self.secure = secure

    def _load(self, request: Request) -> Session:
        raw = request.cookies.get(self.cookie_name)
        if raw:
            session_id = self.signer.unsign(raw)
            if session_id is None:
                logger.info("Rejected invalid session cookie")
            else:
                session = self.store.get(session_id)
                if session is not None:
                    return session
        return self.store.new()

    async def dispatch(self, request: Request, call_next):
        session = self._load(request)
        request.state.session = session

        response: Response = await call_next(request)

        if session.modified:
            was_new = session.is_new
            self.store.save(session)
            if was_new:
                logger.debug("Created session %s", sanitize_id_for_logging(session.id))
                response.set_cookie(
                    self.cookie_name,
                    self.signer.sign(session.id),
                    max_age=self.store.ttl_seconds,
                    httponly=True,
                    samesite="lax",
                    secure=self.secure,
                )
        return response
