# This project was developed with assistance from AI tools.
"""Jinja2 view renderer.

Templates are addressed by full URL: ``http(s)://`` sources are fetched with
httpx, ``file://`` URLs and bare paths are read from disk. The view-model is
exposed to the template as ``model``.
"""

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx
from jinja2 import Environment, Template, select_autoescape
from pydantic import BaseModel

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = {"http", "https"}


def format_currency(value: Decimal | float | int | None) -> str:
    """Two decimals with thousands separators; blank for None."""
    if value is None:
        return ""
    return f"{Decimal(value):,.2f}"


def format_date(value: date | None, fmt: str = "%d %B %Y") -> str:
    if value is None:
        return ""
    return value.strftime(fmt)


class JinjaViewRenderer:
    """Renders view-models into HTML from templates located by URL."""

    def __init__(self, timeout: float = 10.0, client: httpx.Client | None = None):
        self._timeout = timeout
        self._client = client
        self._env = Environment(autoescape=select_autoescape(default_for_string=True))
        self._env.filters["currency"] = format_currency
        self._env.filters["date"] = format_date
        self._cache: dict[str, Template] = {}

    def render_from_path(self, full_url: str, view_model: BaseModel) -> str:
        template = self._cache.get(full_url)
        if template is None:
            template = self._env.from_string(self._load_source(full_url))
            self._cache[full_url] = template
        return template.render(model=view_model)

    def _load_source(self, full_url: str) -> str:
        parsed = urlparse(full_url)
        if parsed.scheme in _REMOTE_SCHEMES:
            logger.debug("Fetching template %s", full_url)
            if self._client is not None:
                response = self._client.get(full_url, timeout=self._timeout)
            else:
                response = httpx.get(full_url, timeout=self._timeout)
            response.raise_for_status()
            return response.text
        if parsed.scheme == "file":
            path = Path(url2pathname(parsed.path))
        else:
            path = Path(full_url)
        logger.debug("Loading template %s", path)
        return path.read_text(encoding="utf-8")
