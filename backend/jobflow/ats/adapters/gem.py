from __future__ import annotations

from jobflow.ats.base import ATSAdapter, JobData, Platform, first_truthy
from jobflow.ats.payloads import GemJob


class GemAdapter(ATSAdapter):
    platform = Platform.GEM
    payload_model = GemJob

    def list_url(self, client: str) -> str:
        return f"https://api.gem.com/job_board/v0/{client}/job_posts/"

    def matches_id(self, raw: dict, job_id: str) -> bool:
        return str(self.parse(raw).id) == job_id

    def normalize(self, raw: dict, client: str) -> JobData:
        job: GemJob = self.parse(raw)
        departments = job.departments or []
        # Gem exposes no remote flag, so remote stays unknown.
        return JobData(
            source=self.platform.value,
            client=client,
            job_id=str(job.id),
            title=job.title,
            description=first_truthy(job.content_plain, job.content),
            location=job.location.name if job.location else None,
            department=departments[0].name if departments else None,
            employment_type=job.employment_type,
            apply_url=job.absolute_url,
            posted_at=first_truthy(job.first_published_at, job.created_at, job.updated_at),
            raw=raw,
        )
