from __future__ import annotations

from jobflow.ats.base import ATSAdapter, JobData, Platform, Salary, first_truthy, parse_amount
from jobflow.ats.payloads import RecruiteeJob


class RecruiteeAdapter(ATSAdapter):
    platform = Platform.RECRUITEE
    payload_model = RecruiteeJob
    list_key = "offers"

    def list_url(self, client: str) -> str:
        return f"https://{client}.recruitee.com/api/offers"

    def matches_id(self, raw: dict, job_id: str) -> bool:
        job: RecruiteeJob = self.parse(raw)
        return job.slug == job_id or str(job.id) == job_id

    def normalize(self, raw: dict, client: str) -> JobData:
        job: RecruiteeJob = self.parse(raw)
        salary = None
        if job.salary is not None:
            salary = Salary(
                min=parse_amount(job.salary.min),
                max=parse_amount(job.salary.max),
                currency=job.salary.currency,
            )
        return JobData(
            source=self.platform.value,
            client=client,
            job_id=job.slug or str(job.id),
            title=job.title,
            description=job.description,
            location=job.location,
            department=job.department,
            employment_type=job.employment_type_code,
            remote=job.remote,
            salary=salary,
            apply_url=first_truthy(job.careers_url, job.careers_apply_url),
            posted_at=job.published_at,
            raw=raw,
        )
