# Public ATS resolver: URL matching, per-platform fetchers and normalizers.

from jobflow.ats.base import ATSMatch, JobData, Platform, Salary
from jobflow.ats.errors import ATSError, FetchError, UpstreamParseError, UpstreamTransportError
from jobflow.ats.matcher import get_ats_platform, is_known_ats_url, match_url
from jobflow.ats.resolver import (
    Resolution,
    ResolveFailure,
    fetch_all_jobs_from_url,
    fetch_job_from_url,
    resolve_all_jobs,
    resolve_job,
)

__all__ = [
    "ATSError",
    "ATSMatch",
    "FetchError",
    "JobData",
    "Platform",
    "Resolution",
    "ResolveFailure",
    "Salary",
    "UpstreamParseError",
    "UpstreamTransportError",
    "fetch_all_jobs_from_url",
    "fetch_job_from_url",
    "get_ats_platform",
    "is_known_ats_url",
    "match_url",
    "resolve_all_jobs",
    "resolve_job",
]
