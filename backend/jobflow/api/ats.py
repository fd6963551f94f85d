from __future__ import annotations
from fastapi import APIRouter, Query

from jobflow.api.errors import APIError
from jobflow.ats import Resolution, ResolveFailure, match_url, resolve_all_jobs, resolve_job

router = APIRouter(prefix="/ats", tags=["ats"])


def _raise_for_failure(result: Resolution) -> None:
    if result.failure == ResolveFailure.UNRECOGNIZED_URL:
        raise APIError(404, "Unrecognized ATS URL")
    if result.failure == ResolveFailure.NOT_FOUND:
        raise APIError(404, "Job not found")
    raise APIError(502, "Upstream ATS request failed", details=result.detail or None)


@router.get("/match")
def match(url: str = Query(..., min_length=1)):
    found = match_url(url)
    if found is None:
        raise APIError(404, "Unrecognized ATS URL")
    return found.to_dict()


@router.get("/job")
def job(url: str = Query(..., min_length=1)):
    result = resolve_job(url)
    if not result.ok:
        _raise_for_failure(result)
    return result.value.to_dict()


@router.get("/jobs")
def jobs(url: str = Query(..., min_length=1)):
    result = resolve_all_jobs(url)
    if not result.ok:
        _raise_for_failure(result)
    return {
        "platform": result.match.platform.value,
        "client": result.match.client,
        "count": len(result.value),
        "jobs": [item.to_dict() for item in result.value],
    }
