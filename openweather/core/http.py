from __future__ import annotations

import logging

import httpx

from openweather.core.config import Settings
from openweather.core.errors import TransportError


logger = logging.getLogger(__name__)

API_KEY_PARAM = "appid"


def create_http_client(settings: Settings) -> httpx.Client:
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        follow_redirects=True,
    )


def redact_url(url: httpx.URL) -> str:
    if API_KEY_PARAM in url.params:
        url = url.copy_set_param(API_KEY_PARAM, "***")
    return str(url)


def fetch(client: httpx.Client, url: httpx.URL) -> httpx.Response:
    """Perform a single GET and return the response whatever its status."""
    try:
        resp = client.get(url)
    except httpx.HTTPError as exc:
        logger.debug("Request to %s failed: %r", redact_url(url), exc)
        raise TransportError(f"Request failed: {type(exc).__name__}: {exc}") from exc

    logger.debug("Url: %s", redact_url(url))
    logger.debug("Status: %s", resp.status_code)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Body: %s", resp.text)
    return resp
