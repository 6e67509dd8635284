"""
Error-body format negotiation.

The Accept header decides when it names a concrete type. Clients that send no
Accept header, or only */* (curl does this by default), fall back to
User-Agent sniffing: command-line clients get JSON, browsers get HTML.
"""

from fastapi import Request

import config

JSON_TYPE = "application/json"
HTML_TYPE = "text/html"


def _accepted_types(accept: str) -> list[str]:
    """Media types from an Accept header, highest q first, original order on ties."""
    entries = []
    for position, part in enumerate(accept.split(",")):
        media_type, *params = [p.strip() for p in part.split(";")]
        if not media_type:
            continue
        q = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    q = float(value)
                except ValueError:
                    q = 0.0
        if q > 0:
            entries.append((-q, position, media_type.lower()))
    return [media_type for _, _, media_type in sorted(entries)]


def is_cli_client(user_agent: str) -> bool:
    ua = user_agent.lower()
    return any(marker in ua for marker in config.CLI_USER_AGENTS)


def wants_json(request: Request) -> bool:
    for media_type in _accepted_types(request.headers.get("accept", "")):
        if media_type in (JSON_TYPE, "application/*"):
            return True
        if media_type in (HTML_TYPE, "text/*"):
            return False

    return is_cli_client(request.headers.get("user-agent", ""))
