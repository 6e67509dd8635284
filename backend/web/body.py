"""
Request body decoding.

Form-encoded bodies (name=Pikachu&type=Electric) are decoded as a form;
anything else is treated as a JSON object ({"name": "Pikachu", "type": "Electric"}).
No size limit is applied.
"""

import json
from urllib.parse import parse_qsl

from fastapi import Request

from web.errors import MalformedBodyError


def _as_text(value) -> str:
    """JSON scalars become their JSON spelling (151 -> "151"); null becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


async def parse_body(request: Request) -> dict[str, str]:
    raw = await request.body()
    content_type = request.headers.get("content-type", "")

    if "x-www-form-urlencoded" in content_type:
        # dict() keeps the last value for repeated keys
        return dict(parse_qsl(raw.decode("utf-8", errors="replace"), keep_blank_values=True))

    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedBodyError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedBodyError(
            f"Request body must be a JSON object, got {type(parsed).__name__}"
        )
    return {key: _as_text(value) for key, value in parsed.items()}
