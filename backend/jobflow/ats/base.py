from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from jobflow.ats.errors import UpstreamParseError
from jobflow.ats.http_helpers import fetch_json


class Platform(str, Enum):
    WORKABLE = "workable"
    GREENHOUSE = "greenhouse"
    LEVER = "lever"
    ASHBY = "ashby"
    RECRUITEE = "recruitee"
    GEM = "gem"
    SMARTRECRUITERS = "smartrecruiters"


@dataclass
class Salary:
    min: float | None = None
    max: float | None = None
    currency: str | None = None

    def to_dict(self) -> dict:
        data = {"min": self.min, "max": self.max, "currency": self.currency}
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class JobData:
    source: str
    client: str
    title: str
    job_id: str | None = None
    description: str | None = None
    location: str | None = None
    department: str | None = None
    employment_type: str | None = None
    remote: bool | None = None
    salary: Salary | None = None
    apply_url: str | None = None
    posted_at: str | None = None
    raw: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        # Absent fields are omitted rather than emitted as null.
        data = {
            "source": self.source,
            "client": self.client,
            "jobId": self.job_id,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "department": self.department,
            "employmentType": self.employment_type,
            "remote": self.remote,
            "salary": self.salary.to_dict() if self.salary is not None else None,
            "applyUrl": self.apply_url,
            "postedAt": self.posted_at,
        }
        out = {k: v for k, v in data.items() if v is not None}
        out["raw"] = self.raw
        return out


@dataclass(frozen=True)
class ATSMatch:
    platform: Platform
    client: str
    job_id: str | None = None

    def to_dict(self) -> dict:
        data = {"platform": self.platform.value, "client": self.client}
        if self.job_id:
            data["jobId"] = self.job_id
        return data


_LEADING_NUMBER = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


def first_truthy(*values: Any) -> Any:
    """Return the first truthy value, else None."""
    for value in values:
        if value:
            return value
    return None


def parse_amount(value: Any) -> float | None:
    """Parse a salary figure sent as a number or numeric string; anything else is absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match:
            return float(match.group(0))
    return None


class ATSAdapter:
    """One public ATS job board API: how to fetch it and how to map its jobs onto JobData."""

    platform: ClassVar[Platform]
    payload_model: ClassVar[type[BaseModel]]
    # Key holding the job array in the list response; None when the response is the array itself.
    list_key: ClassVar[str | None] = None

    def list_url(self, client: str) -> str:
        raise NotImplementedError

    def job_url(self, client: str, job_id: str) -> str | None:
        return None

    def matches_id(self, raw: dict, job_id: str) -> bool:
        raise NotImplementedError

    def normalize(self, raw: dict, client: str) -> JobData:
        raise NotImplementedError

    def parse(self, raw: dict) -> Any:
        try:
            return self.payload_model.model_validate(raw)
        except ValidationError as exc:
            raise UpstreamParseError(self.platform.value, f"{exc.error_count()} validation error(s) in job payload") from exc

    def fetch_list(self, client: str) -> list[dict]:
        data = fetch_json(self.list_url(client), self.platform.value)
        if self.list_key is not None:
            if not isinstance(data, dict):
                raise UpstreamParseError(self.platform.value, f"expected an object with '{self.list_key}'")
            data = data.get(self.list_key) or []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise UpstreamParseError(self.platform.value, "expected a list of job objects")
        return data

    def fetch_one(self, client: str, job_id: str) -> dict | None:
        url = self.job_url(client, job_id)
        if url is not None:
            data = fetch_json(url, self.platform.value)
            if not isinstance(data, dict):
                raise UpstreamParseError(self.platform.value, "expected a job object")
            return data

        for item in self.fetch_list(client):
            if self.matches_id(item, job_id):
                return item
        return None

    def fetch_job(self, client: str, job_id: str | None = None) -> JobData | None:
        if job_id:
            raw = self.fetch_one(client, job_id)
            return self.normalize(raw, client) if raw is not None else None

        # No ordering is imposed: "first" is index 0 of the upstream response.
        items = self.fetch_list(client)
        return self.normalize(items[0], client) if items else None

    def fetch_all(self, client: str) -> list[JobData]:
        return [self.normalize(item, client) for item in self.fetch_list(client)]
