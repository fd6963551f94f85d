"""Turn the /customize input into job posting text.

Known ATS URLs are resolved through the public board APIs; any other URL goes
through the reader service. When both fail the input is used as raw text.
"""

from __future__ import annotations

import logging

import httpx

from jobflow.ats import JobData, fetch_job_from_url, is_known_ats_url
from jobflow.ats.http_helpers import html_to_text
from jobflow.core.config import settings

logger = logging.getLogger(__name__)


def looks_like_url(text: str) -> bool:
    return text.startswith("http://") or text.startswith("https://")


def render_job(job: JobData) -> str:
    lines = [job.title]
    labelled = [
        ("Company", job.client),
        ("Location", job.location),
        ("Department", job.department),
        ("Employment type", job.employment_type),
        ("Remote", None if job.remote is None else ("yes" if job.remote else "no")),
        ("Salary", _salary_line(job)),
        ("Posted", job.posted_at),
        ("Apply", job.apply_url),
    ]
    for label, value in labelled:
        if value:
            lines.append(f"{label}: {value}")
    description = html_to_text(job.description or "")
    if description:
        lines.extend(["", description])
    return "\n".join(lines)


def _salary_line(job: JobData) -> str | None:
    salary = job.salary
    if salary is None or (salary.min is None and salary.max is None):
        return None
    bounds = [_amount(v) for v in (salary.min, salary.max) if v is not None]
    text = " - ".join(bounds)
    return f"{text} {salary.currency}" if salary.currency else text


def _amount(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def fetch_reader_text(url: str) -> str | None:
    reader_url = f"{settings.reader_base_url}{url}"
    try:
        with httpx.Client(timeout=settings.http_timeout_seconds, follow_redirects=True) as client:
            resp = client.get(reader_url, headers={"Accept": "text/plain"})
    except httpx.HTTPError as exc:
        logger.info("Reader fetch error for %s: %s", url, exc)
        return None
    if not resp.is_success:
        logger.info("Reader returned status=%s for %s", resp.status_code, url)
        return None
    text = resp.text
    if text and len(text) > settings.reader_min_chars:
        return text
    logger.info("Reader returned insufficient content for %s (%d chars)", url, len(text or ""))
    return None


def get_job_text(raw_input: str) -> str:
    trimmed = raw_input.strip()
    if not looks_like_url(trimmed):
        return trimmed

    if is_known_ats_url(trimmed):
        job = fetch_job_from_url(trimmed)
        if job is not None:
            return render_job(job)
        logger.info("ATS lookup failed for %s, trying reader", trimmed)

    text = fetch_reader_text(trimmed)
    if text is not None:
        return text

    logger.info("Falling back to raw input for %s", trimmed)
    return trimmed
