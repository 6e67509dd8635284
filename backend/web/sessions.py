"""
Cookie-backed session lifecycle.

Every request resolves to a Session through get_session(); login state is held
server-side and only the opaque id travels in the cookie, so each response
must write the id back (attach_session_cookie). Logout clears the data and
sends the cookie with an Expires in the past (expire_session_cookie).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Cookie, Depends, Response

import config
from models.session import Session
from store import SessionStore, get_session_store
from web.errors import AuthorizationDenied


def get_session(
    session_id: Optional[str] = Cookie(default=None, alias=config.SESSION_COOKIE_NAME),
    sessions: SessionStore = Depends(get_session_store),
) -> Session:
    return sessions.get_or_create(session_id)


def require_login(session: Session = Depends(get_session)) -> Session:
    if not session.data.is_logged_in:
        raise AuthorizationDenied(session_id=session.session_id)
    return session


def attach_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(config.SESSION_COOKIE_NAME, session_id)


def expire_session_cookie(response: Response, session_id: str) -> None:
    expires = datetime.now(timezone.utc) - timedelta(seconds=config.LOGOUT_EXPIRY_OFFSET_SECONDS)
    response.set_cookie(config.SESSION_COOKIE_NAME, session_id, expires=expires)
