from __future__ import annotations

from jobflow.ats.base import ATSAdapter, JobData, Platform
from jobflow.ats.payloads import GreenhouseJob

API_BASE = "https://api.greenhouse.io/v1/boards"


def _employment_type(job: GreenhouseJob) -> str | None:
    meta = next((m for m in job.metadata or [] if m.name == "Employment Type"), None)
    value = meta.value if meta else None
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, str) else job.employment_type


class GreenhouseAdapter(ATSAdapter):
    platform = Platform.GREENHOUSE
    payload_model = GreenhouseJob
    list_key = "jobs"

    def list_url(self, client: str) -> str:
        return f"{API_BASE}/{client}/jobs?content=true"

    def job_url(self, client: str, job_id: str) -> str:
        return f"{API_BASE}/{client}/jobs/{job_id}"

    def normalize(self, raw: dict, client: str) -> JobData:
        job: GreenhouseJob = self.parse(raw)
        location = job.location.name if job.location else None
        departments = job.departments or []
        return JobData(
            source=self.platform.value,
            client=client,
            job_id=str(job.id),
            title=job.title,
            description=job.content,
            location=location,
            department=departments[0].name if departments else None,
            employment_type=_employment_type(job),
            # Unlike the other boards, a missing location means "not remote" rather than unknown.
            remote="remote" in location.lower() if location else False,
            apply_url=job.absolute_url,
            posted_at=job.updated_at,
            raw=raw,
        )
