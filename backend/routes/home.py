from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from models.session import Session
from web.sessions import attach_session_cookie, get_session
from web.views import render

router = APIRouter(tags=["home"])


@router.get("/", response_class=HTMLResponse)
async def get_home(session: Session = Depends(get_session)):
    """Greets the visitor by name once logged in, as a guest otherwise."""
    data = session.data
    title = f"Welcome {data.name}!" if data.is_logged_in else "Welcome Guest!"

    response = HTMLResponse(
        render("home.html", {"title": title, "is_logged_in": data.is_logged_in})
    )
    attach_session_cookie(response, session.session_id)
    return response
