from dotenv import load_dotenv
load_dotenv()

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

import config
from models.error import ErrorPayload
from routes import home, pokemon, session
from web.errors import AuthorizationDenied
from web.negotiation import wants_json
from web.sessions import attach_session_cookie
from web.views import render

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pokedex", version="0.1.0")

app.include_router(home.router)
app.include_router(session.router)
app.include_router(pokemon.router)


# ---------- Error handlers ----------

@app.exception_handler(AuthorizationDenied)
async def authorization_denied_handler(request: Request, exc: AuthorizationDenied):
    """JSON for clients that ask for it (or look like curl), the error page otherwise."""
    logger.warning(f"Unauthorized {request.method} {request.url.path}")

    if wants_json(request):
        payload = ErrorPayload(statusCode=exc.status_code, message=exc.message)
        response = Response(
            content=json.dumps(payload.model_dump(), indent=2),
            status_code=exc.status_code,
            media_type="application/json",
        )
    else:
        response = HTMLResponse(
            render("error.html", {"title": "Unauthorized", "message": exc.message}),
            status_code=exc.status_code,
        )

    if exc.session_id:
        attach_session_cookie(response, exc.session_id)
    return response


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Catch-all (malformed bodies end up here). Never leaks internal details."""
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return PlainTextResponse("Internal Server Error", status_code=500)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
