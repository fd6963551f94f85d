from __future__ import annotations

from jobflow.ats.base import ATSAdapter, JobData, Platform, first_truthy
from jobflow.ats.payloads import SmartRecruitersJob

API_BASE = "https://api.smartrecruiters.com/v1/companies"


def _first_not_none(*values):
    return next((v for v in values if v is not None), None)


class SmartRecruitersAdapter(ATSAdapter):
    platform = Platform.SMARTRECRUITERS
    payload_model = SmartRecruitersJob
    list_key = "content"

    def list_url(self, client: str) -> str:
        return f"{API_BASE}/{client}/postings"

    def job_url(self, client: str, job_id: str) -> str:
        return f"{API_BASE}/{client}/postings/{job_id}"

    def normalize(self, raw: dict, client: str) -> JobData:
        job: SmartRecruitersJob = self.parse(raw)
        loc = job.location
        location = None
        if loc is not None:
            parts = [p for p in (loc.city, loc.region, loc.country) if p]
            location = ", ".join(parts) if parts else loc.fullLocation

        sections = job.jobAd.sections if job.jobAd else None
        job_description = sections.jobDescription if sections else None
        job_id = first_truthy(str(job.id) if job.id is not None else None, job.uuid)

        return JobData(
            source=self.platform.value,
            client=client,
            job_id=job_id,
            title=str(_first_not_none(job.name, job.refNumber, job.id, job.uuid, "Unknown role")),
            description=job_description.text if job_description else None,
            location=location,
            department=job.department.label if job.department else None,
            employment_type=job.typeOfEmployment.label if job.typeOfEmployment else None,
            remote=loc.remote if loc else None,
            apply_url=first_truthy(job.ref, job.applyUrl),
            # Left exactly as SmartRecruiters formats it.
            posted_at=job.releasedDate,
            raw=raw,
        )
