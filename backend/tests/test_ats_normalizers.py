from __future__ import annotations

import copy

import pytest

from jobflow.ats.adapters.ashby import AshbyAdapter
from jobflow.ats.adapters.gem import GemAdapter
from jobflow.ats.adapters.greenhouse import GreenhouseAdapter
from jobflow.ats.adapters.lever import LeverAdapter
from jobflow.ats.adapters.recruitee import RecruiteeAdapter
from jobflow.ats.adapters.smartrecruiters import SmartRecruitersAdapter
from jobflow.ats.adapters.workable import WorkableAdapter
from jobflow.ats.base import Salary, parse_amount
from jobflow.ats.errors import UpstreamParseError


WORKABLE_JOB = {
    "title": "Backend Engineer",
    "shortcode": "AB12CD34",
    "description": "<p>Build APIs</p>",
    "department": "Engineering",
    "employment_type": "Full-time",
    "telecommuting": False,
    "remote": True,
    "locations": [
        {"city": "Hidden City", "country": "Nowhere", "hidden": True},
        {"city": "Athens", "region": "Attica", "country": "Greece", "hidden": False},
    ],
    "salary": {"salary_from": "50000", "salary_to": 70000, "salary_currency": "EUR"},
    "url": "https://apply.workable.com/acme/j/AB12CD34/",
    "published_on": "2024-05-01",
    "created_at": "2024-04-01",
}

GREENHOUSE_JOB = {
    "id": 42,
    "title": "Engineer",
    "content": "&lt;p&gt;Hi&lt;/p&gt;",
    "location": {"name": "Remote - US"},
    "departments": [{"name": "Platform"}, {"name": "Infra"}],
    "metadata": [{"name": "Employment Type", "value": ["Full-time"]}],
    "absolute_url": "https://boards.greenhouse.io/acme/jobs/42",
    "updated_at": "2024-06-01T10:00:00-04:00",
}

LEVER_JOB = {
    "id": "abc-123-def",
    "text": "Data Scientist",
    "descriptionPlain": "Crunch numbers",
    "description": "<div>Crunch numbers</div>",
    "categories": {"location": "Berlin", "department": "Data", "commitment": "Full-time"},
    "workplaceType": "remote",
    "salaryRange": {"min": 80000, "max": 100000, "currency": "USD"},
    "hostedUrl": "https://jobs.lever.co/acme/abc-123-def",
    "applyUrl": "https://jobs.lever.co/acme/abc-123-def/apply",
    "createdAt": 1700000000000,
}

ASHBY_JOB = {
    "id": "5f0e8c3a",
    "title": "Designer",
    "descriptionPlain": "Design things",
    "location": "New York",
    "department": "Design",
    "employmentType": "FullTime",
    "isRemote": False,
    "compensation": {
        "compensationTierSummary": {"min": 120000, "max": 150000, "currency": "USD"},
        "scrapeableCompensationSalarySummary": {"min": 1, "max": 2, "currency": "EUR"},
    },
    "jobUrl": "https://jobs.ashbyhq.com/acme/5f0e8c3a",
    "publishedAt": "2024-03-03T00:00:00Z",
}

RECRUITEE_JOB = {
    "id": 991,
    "slug": "backend-engineer",
    "title": "Backend Engineer",
    "description": "<p>Ruby</p>",
    "location": "Amsterdam",
    "department": "Tech",
    "employment_type_code": "fulltime",
    "remote": True,
    "salary": {"min": "4000.50", "max": "n/a", "currency": "EUR"},
    "careers_apply_url": "https://acme.recruitee.com/o/backend-engineer/c/new",
    "published_at": "2024-02-02 10:00:00 UTC",
}

GEM_JOB = {
    "id": "am9icG9zdDox",
    "title": "SRE",
    "content": "<p>Keep it up</p>",
    "content_plain": "Keep it up",
    "location": {"name": "London"},
    "departments": [{"name": "Ops"}],
    "employment_type": "full_time",
    "absolute_url": "https://jobs.gem.com/acme/am9icG9zdDox",
    "created_at": "2024-01-01",
    "updated_at": "2024-01-05",
}

SMARTRECRUITERS_JOB = {
    "id": "743999912345678",
    "uuid": "d1b2",
    "name": "Account Executive",
    "jobAd": {"sections": {"jobDescription": {"title": "Job Description", "text": "<p>Sell</p>"}}},
    "location": {"city": "Madrid", "country": "es", "remote": True, "fullLocation": "Madrid, Spain"},
    "department": {"id": "1", "label": "Sales"},
    "typeOfEmployment": {"id": "permanent", "label": "Full-time"},
    "ref": "https://api.smartrecruiters.com/v1/companies/Acme/postings/743999912345678",
    "releasedDate": "2024-07-07T07:07:07.000Z",
}


def test_workable_normalizer():
    job = WorkableAdapter().normalize(WORKABLE_JOB, "acme")

    assert job.source == "workable"
    assert job.job_id == "AB12CD34"
    assert job.location == "Athens, Attica, Greece"
    assert job.remote is True
    assert job.salary == Salary(min=50000.0, max=70000, currency="EUR")
    assert job.apply_url == "https://apply.workable.com/acme/j/AB12CD34/"
    assert job.posted_at == "2024-05-01"


def test_workable_location_falls_back_to_flat_fields():
    raw = {"title": "Ops", "locations": [], "city": "", "country": "Portugal"}

    assert WorkableAdapter().normalize(raw, "acme").location == "Portugal"


def test_workable_shortcode_match_is_case_insensitive():
    adapter = WorkableAdapter()

    assert adapter.matches_id(WORKABLE_JOB, "AB12CD34")
    assert adapter.matches_id(WORKABLE_JOB, "ab12cd34")
    assert not adapter.matches_id(WORKABLE_JOB, "ZZ")


def test_greenhouse_normalizer():
    job = GreenhouseAdapter().normalize(GREENHOUSE_JOB, "acme")

    assert job.job_id == "42"
    assert job.remote is True
    assert job.department == "Platform"
    assert job.employment_type == "Full-time"
    assert job.posted_at == "2024-06-01T10:00:00-04:00"
    assert job.salary is None


def test_greenhouse_remote_defaults_to_false_without_location():
    job = GreenhouseAdapter().normalize({"id": 1, "title": "Engineer"}, "acme")

    assert job.remote is False
    assert job.location is None


def test_lever_normalizer_converts_epoch_to_iso():
    job = LeverAdapter().normalize(LEVER_JOB, "acme")

    assert job.title == "Data Scientist"
    assert job.description == "Crunch numbers"
    assert job.remote is True
    assert job.employment_type == "Full-time"
    assert job.apply_url == "https://jobs.lever.co/acme/abc-123-def/apply"
    assert job.posted_at == "2023-11-14T22:13:20.000Z"
    assert job.salary.to_dict() == {"min": 80000, "max": 100000, "currency": "USD"}


def test_lever_remote_unknown_without_signal():
    raw = {"id": "a1", "text": "Role", "workplaceType": "onsite"}

    assert LeverAdapter().normalize(raw, "acme").remote is None


def test_lever_remote_from_location_text():
    raw = {"id": "a1", "text": "Role", "categories": {"location": "Remote, EU"}}

    assert LeverAdapter().normalize(raw, "acme").remote is True


def test_ashby_prefers_tier_summary():
    job = AshbyAdapter().normalize(ASHBY_JOB, "acme")

    assert job.salary == Salary(min=120000, max=150000, currency="USD")
    assert job.remote is False
    assert job.apply_url == "https://jobs.ashbyhq.com/acme/5f0e8c3a"
    assert job.description == "Design things"


def test_ashby_falls_back_to_scrapeable_summary():
    raw = dict(ASHBY_JOB, compensation={"scrapeableCompensationSalarySummary": {"min": 1, "currency": "EUR"}})

    job = AshbyAdapter().normalize(raw, "acme")

    assert job.salary.to_dict() == {"min": 1, "currency": "EUR"}


def test_recruitee_normalizer():
    job = RecruiteeAdapter().normalize(RECRUITEE_JOB, "acme")

    assert job.job_id == "backend-engineer"
    assert job.salary == Salary(min=4000.5, max=None, currency="EUR")
    assert job.apply_url == "https://acme.recruitee.com/o/backend-engineer/c/new"
    assert RecruiteeAdapter().matches_id(RECRUITEE_JOB, "991")
    assert RecruiteeAdapter().matches_id(RECRUITEE_JOB, "backend-engineer")


def test_gem_normalizer():
    job = GemAdapter().normalize(GEM_JOB, "acme")

    assert job.description == "Keep it up"
    assert job.location == "London"
    assert job.department == "Ops"
    assert job.remote is None
    assert job.posted_at == "2024-01-01"


def test_smartrecruiters_normalizer():
    job = SmartRecruitersAdapter().normalize(SMARTRECRUITERS_JOB, "Acme")

    assert job.title == "Account Executive"
    assert job.location == "Madrid, es"
    assert job.description == "<p>Sell</p>"
    assert job.department == "Sales"
    assert job.employment_type == "Full-time"
    assert job.remote is True
    assert job.posted_at == "2024-07-07T07:07:07.000Z"


def test_smartrecruiters_title_fallback():
    job = SmartRecruitersAdapter().normalize({"id": 7}, "Acme")

    assert job.title == "7"
    assert job.job_id == "7"


@pytest.mark.parametrize(
    "adapter,raw",
    [
        (WorkableAdapter(), WORKABLE_JOB),
        (GreenhouseAdapter(), GREENHOUSE_JOB),
        (LeverAdapter(), LEVER_JOB),
        (AshbyAdapter(), ASHBY_JOB),
        (RecruiteeAdapter(), RECRUITEE_JOB),
        (GemAdapter(), GEM_JOB),
        (SmartRecruitersAdapter(), SMARTRECRUITERS_JOB),
    ],
)
def test_raw_is_kept_unmodified_and_normalizing_is_repeatable(adapter, raw):
    snapshot = copy.deepcopy(raw)

    first = adapter.normalize(raw, "acme")
    second = adapter.normalize(raw, "acme")

    assert first.raw is raw
    assert raw == snapshot
    assert first == second
    assert first.source == adapter.platform.value
    assert first.client == "acme"
    assert first.title


def test_missing_required_title_is_a_parse_error():
    with pytest.raises(UpstreamParseError):
        GreenhouseAdapter().normalize({"id": 1}, "acme")


def test_to_dict_omits_absent_fields():
    data = GreenhouseAdapter().normalize({"id": 5, "title": "QA"}, "acme").to_dict()

    assert data == {
        "source": "greenhouse",
        "client": "acme",
        "jobId": "5",
        "title": "QA",
        "remote": False,
        "raw": {"id": 5, "title": "QA"},
    }


@pytest.mark.parametrize(
    "value,expected",
    [(None, None), (True, None), (12, 12), (1.5, 1.5), ("3000", 3000.0), ("  42.5k", 42.5), ("abc", None), ([], None)],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


def test_ashby_display_string_compensation_is_not_a_salary():
    raw = dict(
        ASHBY_JOB,
        compensation={
            "compensationTierSummary": "$120K – $150K",
            "scrapeableCompensationSalarySummary": "$120K - $150K",
        },
    )

    job = AshbyAdapter().normalize(raw, "acme")

    assert job.title == "Designer"
    assert job.salary is None
    assert job.raw is raw


def test_ashby_string_tier_summary_falls_back_to_structured_summary():
    raw = dict(
        ASHBY_JOB,
        compensation={
            "compensationTierSummary": "$120K – $150K",
            "scrapeableCompensationSalarySummary": {"min": 120000, "max": 150000, "currency": "USD"},
        },
    )

    assert AshbyAdapter().normalize(raw, "acme").salary == Salary(min=120000, max=150000, currency="USD")


def test_optional_fields_of_unexpected_type_read_as_absent():
    raw = {
        "title": "Ops",
        "shortcode": "Q1",
        "salary": "competitive",
        "telecommuting": "sometimes",
        "locations": "Lisbon",
        "city": "Lisbon",
    }

    job = WorkableAdapter().normalize(raw, "acme")

    assert job.salary is None
    assert job.remote is None
    assert job.location == "Lisbon"


def test_greenhouse_location_string_reads_as_absent():
    job = GreenhouseAdapter().normalize({"id": 3, "title": "QA", "location": "Remote"}, "acme")

    assert job.location is None
    assert job.remote is False
