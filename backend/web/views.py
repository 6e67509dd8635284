"""Jinja2 template rendering. Autoescape is on for every .html template."""

from typing import Any, Mapping

from fastapi.templating import Jinja2Templates

import config

templates = Jinja2Templates(directory=config.TEMPLATES_DIR)


def render(template_name: str, context: Mapping[str, Any]) -> str:
    return templates.get_template(template_name).render(**context)
