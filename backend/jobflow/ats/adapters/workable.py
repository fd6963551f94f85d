from __future__ import annotations

from jobflow.ats.base import ATSAdapter, JobData, Platform, Salary, first_truthy, parse_amount
from jobflow.ats.payloads import WorkableJob


def _location(job: WorkableJob) -> str | None:
    locations = job.locations or []
    primary = next((loc for loc in locations if not loc.hidden), None) or (locations[0] if locations else None)
    parts = [p for p in (primary.city, primary.region, primary.country) if p] if primary else []
    return first_truthy(", ".join(parts), job.city, job.country)


class WorkableAdapter(ATSAdapter):
    platform = Platform.WORKABLE
    payload_model = WorkableJob
    list_key = "jobs"

    def list_url(self, client: str) -> str:
        return f"https://apply.workable.com/api/v1/widget/accounts/{client}"

    def matches_id(self, raw: dict, job_id: str) -> bool:
        shortcode = self.parse(raw).shortcode
        if not shortcode:
            return False
        return shortcode == job_id or shortcode.lower() == job_id.lower()

    def normalize(self, raw: dict, client: str) -> JobData:
        job: WorkableJob = self.parse(raw)
        salary = None
        if job.salary is not None:
            salary = Salary(
                min=parse_amount(job.salary.salary_from),
                max=parse_amount(job.salary.salary_to),
                currency=job.salary.salary_currency,
            )
        return JobData(
            source=self.platform.value,
            client=client,
            job_id=job.shortcode,
            title=job.title,
            description=first_truthy(job.description, job.full_description),
            location=_location(job),
            department=job.department,
            employment_type=job.employment_type,
            remote=job.telecommuting or job.remote,
            salary=salary,
            apply_url=first_truthy(job.application_url, job.url),
            posted_at=first_truthy(job.published_on, job.created_at),
            raw=raw,
        )
