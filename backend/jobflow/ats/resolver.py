"""Resolve a job board URL into normalized JobData.

The public functions never raise: unrecognized URLs, upstream failures and
missing jobs all come back as None. `resolve_job` / `resolve_all_jobs` carry
the failure reason for callers that need to tell those cases apart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

from jobflow.ats.base import ATSAdapter, ATSMatch, JobData
from jobflow.ats.errors import ATSError, FetchError, UpstreamParseError, UpstreamTransportError
from jobflow.ats.matcher import match_url
from jobflow.ats.registry import get_adapter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResolveFailure(str, Enum):
    UNRECOGNIZED_URL = "unrecognized_url"
    UPSTREAM_HTTP = "upstream_http"
    UPSTREAM_PARSE = "upstream_parse"
    UPSTREAM_TRANSPORT = "upstream_transport"
    NOT_FOUND = "not_found"


@dataclass
class Resolution(Generic[T]):
    value: T | None = None
    match: ATSMatch | None = None
    failure: ResolveFailure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None and self.value is not None


def _failure_for(exc: ATSError) -> ResolveFailure:
    if isinstance(exc, FetchError):
        return ResolveFailure.UPSTREAM_HTTP
    if isinstance(exc, UpstreamTransportError):
        return ResolveFailure.UPSTREAM_TRANSPORT
    return ResolveFailure.UPSTREAM_PARSE


def _resolve(url: str, action: Callable[[ATSAdapter, ATSMatch], T | None]) -> Resolution[T]:
    match = match_url(url)
    if match is None:
        return Resolution(failure=ResolveFailure.UNRECOGNIZED_URL, detail="URL matches no known ATS")

    adapter = get_adapter(match.platform)
    if adapter is None:
        return Resolution(match=match, failure=ResolveFailure.UNRECOGNIZED_URL, detail="no adapter registered")

    try:
        value = action(adapter, match)
    except FetchError as exc:
        logger.warning("Error fetching from %s: status=%s client=%s", exc.platform, exc.status_code, match.client)
        # A direct job endpoint answers 404 for an unknown id.
        if exc.status_code == 404 and match.job_id:
            return Resolution(match=match, failure=ResolveFailure.NOT_FOUND, detail=str(exc))
        return Resolution(match=match, failure=_failure_for(exc), detail=str(exc))
    except ATSError as exc:
        logger.warning("Error fetching from %s: %s", exc.platform, exc)
        return Resolution(match=match, failure=_failure_for(exc), detail=str(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error normalizing %s payload", match.platform.value)
        return Resolution(match=match, failure=ResolveFailure.UPSTREAM_PARSE, detail=str(exc))

    if value is None:
        return Resolution(match=match, failure=ResolveFailure.NOT_FOUND, detail="job not found")
    return Resolution(value=value, match=match)


def resolve_job(url: str) -> Resolution[JobData]:
    return _resolve(url, lambda adapter, match: adapter.fetch_job(match.client, match.job_id))


def resolve_all_jobs(url: str) -> Resolution[list[JobData]]:
    # Always the list endpoint, even when the URL names a single job; all-or-nothing.
    return _resolve(url, lambda adapter, match: adapter.fetch_all(match.client))


def fetch_job_from_url(url: str) -> JobData | None:
    return resolve_job(url).value


def fetch_all_jobs_from_url(url: str) -> list[JobData] | None:
    return resolve_all_jobs(url).value
