from __future__ import annotations
from datetime import datetime, timezone

from jobflow.ats.base import ATSAdapter, JobData, Platform, Salary, first_truthy, parse_amount
from jobflow.ats.payloads import LeverJob

API_BASE = "https://api.lever.co/v0/postings"


def _iso_from_epoch_ms(value: int | float | None) -> str | None:
    # Lever is the only board that sends an epoch; every other board's date is passed through as-is.
    if not value:
        return None
    dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LeverAdapter(ATSAdapter):
    platform = Platform.LEVER
    payload_model = LeverJob

    def list_url(self, client: str) -> str:
        return f"{API_BASE}/{client}"

    def job_url(self, client: str, job_id: str) -> str:
        return f"{API_BASE}/{client}/{job_id}"

    def normalize(self, raw: dict, client: str) -> JobData:
        job: LeverJob = self.parse(raw)
        categories = job.categories
        location = categories.location if categories else None

        remote = None
        if job.workplaceType == "remote":
            remote = True
        elif location:
            remote = "remote" in location.lower()

        salary = None
        if job.salaryRange is not None:
            salary = Salary(
                min=parse_amount(job.salaryRange.min),
                max=parse_amount(job.salaryRange.max),
                currency=job.salaryRange.currency,
            )

        return JobData(
            source=self.platform.value,
            client=client,
            job_id=str(job.id),
            title=job.text,
            description=first_truthy(job.descriptionPlain, job.description),
            location=location,
            department=categories.department if categories else None,
            employment_type=categories.commitment if categories else None,
            remote=remote,
            salary=salary,
            apply_url=first_truthy(job.applyUrl, job.hostedUrl),
            posted_at=_iso_from_epoch_ms(job.createdAt),
            raw=raw,
        )
