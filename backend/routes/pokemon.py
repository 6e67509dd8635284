import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from models.session import Session
from store import PokemonStore, get_pokemon_store
from web.body import parse_body
from web.sessions import attach_session_cookie, get_session, require_login
from web.views import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pokemon"])


# ---------- Endpoints ----------

@router.get("/pokemon", response_class=HTMLResponse)
async def get_all_pokemon(
    session: Session = Depends(get_session),
    store: PokemonStore = Depends(get_pokemon_store),
):
    """Lists every pokemon in insertion order. The add form shows only when logged in."""
    response = HTMLResponse(
        render(
            "list.html",
            {
                "title": "All Pokemon",
                "pokemon": store.all(),
                "is_logged_in": session.data.is_logged_in,
            },
        )
    )
    attach_session_cookie(response, session.session_id)
    return response


@router.post("/pokemon")
async def create_pokemon(
    request: Request,
    session: Session = Depends(require_login),
    store: PokemonStore = Depends(get_pokemon_store),
):
    """
    Appends a pokemon and redirects to the list.
    Anonymous sessions are rejected by require_login before the body is read;
    main.py turns that into a 401 in the format the client asked for.
    """
    body = await parse_body(request)

    pokemon = store.add(body.get("name", ""), body.get("type", ""))
    logger.info(
        "Session %s created pokemon #%d %s (%s)",
        session.session_id, pokemon.id, pokemon.name, pokemon.type,
    )

    response = RedirectResponse("/pokemon", status_code=303)
    attach_session_cookie(response, session.session_id)
    return response
