import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from models.session import Session
from store import SessionStore, get_session_store
from web.body import parse_body
from web.sessions import attach_session_cookie, expire_session_cookie, get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


# ---------- Endpoints ----------

@router.post("/login")
async def login(request: Request, session: Session = Depends(get_session)):
    """
    Marks the session as logged in under the submitted name.
    Accepts form-encoded or JSON bodies and redirects back to the home page.
    """
    body = await parse_body(request)

    session.data.is_logged_in = True
    session.data.name = body.get("name")
    logger.info("Session %s logged in as %r", session.session_id, session.data.name)

    response = RedirectResponse("/", status_code=303)
    attach_session_cookie(response, session.session_id)
    return response


@router.post("/logout")
async def logout(
    session: Session = Depends(get_session),
    sessions: SessionStore = Depends(get_session_store),
):
    """
    Clears the session data and tells the browser to drop the cookie.
    The server-side data is already gone; the expired cookie is the second half.
    """
    sessions.destroy(session)
    logger.info("Session %s logged out", session.session_id)

    response = RedirectResponse("/", status_code=303)
    expire_session_cookie(response, session.session_id)
    return response
