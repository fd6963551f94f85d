from __future__ import annotations

from jobflow.ats.base import ATSAdapter, JobData, Platform, Salary, first_truthy, parse_amount
from jobflow.ats.payloads import AshbyJob


class AshbyAdapter(ATSAdapter):
    platform = Platform.ASHBY
    payload_model = AshbyJob
    list_key = "jobs"

    def list_url(self, client: str) -> str:
        return f"https://api.ashbyhq.com/posting-api/job-board/{client}?includeCompensation=true"

    def matches_id(self, raw: dict, job_id: str) -> bool:
        return str(self.parse(raw).id) == job_id

    def normalize(self, raw: dict, client: str) -> JobData:
        job: AshbyJob = self.parse(raw)
        compensation = job.compensation
        summary = None
        if compensation is not None:
            summary = compensation.compensationTierSummary
            if summary is None:
                summary = compensation.scrapeableCompensationSalarySummary

        salary = None
        if summary is not None:
            salary = Salary(min=parse_amount(summary.min), max=parse_amount(summary.max), currency=summary.currency)

        return JobData(
            source=self.platform.value,
            client=client,
            job_id=str(job.id),
            title=job.title,
            description=first_truthy(job.descriptionHtml, job.descriptionPlain),
            location=job.location,
            department=job.department,
            employment_type=job.employmentType,
            remote=job.isRemote,
            salary=salary,
            apply_url=first_truthy(job.applyUrl, job.jobUrl),
            posted_at=job.publishedAt,
            raw=raw,
        )
