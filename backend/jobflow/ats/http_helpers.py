from __future__ import annotations
from html import unescape
from typing import Any

import httpx
from bs4 import BeautifulSoup

from jobflow.ats.errors import FetchError, UpstreamParseError, UpstreamTransportError
from jobflow.core.config import settings

USER_AGENT = "job-flow/1.0"


def fetch_json(url: str, platform: str) -> Any:
    headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
    try:
        with httpx.Client(timeout=settings.http_timeout_seconds, follow_redirects=True, headers=headers) as client:
            resp = client.get(url)
    except httpx.HTTPError as exc:
        raise UpstreamTransportError(platform, str(exc) or exc.__class__.__name__) from exc

    if not resp.is_success:
        raise FetchError(platform, resp.status_code)
    try:
        return resp.json()
    except ValueError as exc:
        raise UpstreamParseError(platform, f"invalid JSON ({exc})") from exc


def html_to_text(html: str) -> str:
    if not html:
        return ""
    # Greenhouse returns entity-escaped markup with content=true.
    if "&lt;" in html and "<" not in html:
        html = unescape(html)
    soup = BeautifulSoup(html, "html.parser")
    return soup.get_text(separator="\n", strip=True)
