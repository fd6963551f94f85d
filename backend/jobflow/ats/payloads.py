"""Typed views over the public ATS job payloads.

Only the fields the normalizers read are declared; everything else is kept
as extra data. Apart from each platform's own title/id, every field is
optional upstream, and an optional value of the wrong type reads as absent.
"""

from __future__ import annotations
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, ValidatorFunctionWrapHandler, field_validator


class Payload(BaseModel):
    model_config = ConfigDict(extra="allow")

    @field_validator("*", mode="wrap")
    @classmethod
    def _absent_when_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        # An optional field of an unexpected type is treated as missing; only required fields can fail.
        try:
            return handler(value)
        except ValidationError:
            if cls.model_fields[info.field_name].is_required():
                raise
            return None


# Workable


class WorkableLocation(Payload):
    country: str | None = None
    city: str | None = None
    region: str | None = None
    hidden: bool | None = None


class WorkableSalary(Payload):
    salary_from: Any = None
    salary_to: Any = None
    salary_currency: str | None = None


class WorkableJob(Payload):
    title: str
    shortcode: str | None = None
    description: str | None = None
    full_description: str | None = None
    country: str | None = None
    city: str | None = None
    department: str | None = None
    employment_type: str | None = None
    telecommuting: bool | None = None
    remote: bool | None = None
    locations: list[WorkableLocation] | None = None
    salary: WorkableSalary | None = None
    application_url: str | None = None
    url: str | None = None
    published_on: str | None = None
    created_at: str | None = None


# Greenhouse


class GreenhouseLocation(Payload):
    name: str | None = None


class GreenhouseDepartment(Payload):
    name: str | None = None


class GreenhouseMetadata(Payload):
    name: str | None = None
    value: Any = None


class GreenhouseJob(Payload):
    id: int
    title: str
    content: str | None = None
    location: GreenhouseLocation | None = None
    departments: list[GreenhouseDepartment] | None = None
    metadata: list[GreenhouseMetadata] | None = None
    employment_type: str | None = None
    absolute_url: str | None = None
    updated_at: str | None = None


# Lever


class LeverCategories(Payload):
    location: str | None = None
    department: str | None = None
    commitment: str | None = None


class LeverSalaryRange(Payload):
    min: Any = None
    max: Any = None
    currency: str | None = None


class LeverJob(Payload):
    id: str | int
    text: str
    description: str | None = None
    descriptionPlain: str | None = None
    categories: LeverCategories | None = None
    workplaceType: str | None = None
    salaryRange: LeverSalaryRange | None = None
    applyUrl: str | None = None
    hostedUrl: str | None = None
    createdAt: int | float | None = None


# Ashby


class AshbyCompensationSummary(Payload):
    min: Any = None
    max: Any = None
    currency: str | None = None


class AshbyCompensation(Payload):
    compensationTierSummary: AshbyCompensationSummary | None = None
    scrapeableCompensationSalarySummary: AshbyCompensationSummary | None = None


class AshbyJob(Payload):
    id: str | int
    title: str
    descriptionHtml: str | None = None
    descriptionPlain: str | None = None
    location: str | None = None
    department: str | None = None
    employmentType: str | None = None
    isRemote: bool | None = None
    compensation: AshbyCompensation | None = None
    applyUrl: str | None = None
    jobUrl: str | None = None
    publishedAt: str | None = None


# Recruitee


class RecruiteeSalary(Payload):
    # Recruitee sends either numbers or numeric strings here.
    min: Any = None
    max: Any = None
    currency: str | None = None


class RecruiteeJob(Payload):
    id: int
    title: str
    slug: str | None = None
    description: str | None = None
    location: str | None = None
    department: str | None = None
    employment_type_code: str | None = None
    remote: bool | None = None
    salary: RecruiteeSalary | None = None
    careers_url: str | None = None
    careers_apply_url: str | None = None
    published_at: str | None = None


# Gem


class GemLocation(Payload):
    name: str | None = None


class GemDepartment(Payload):
    name: str | None = None


class GemJob(Payload):
    id: str | int
    title: str
    absolute_url: str | None = None
    content: str | None = None
    content_plain: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    first_published_at: str | None = None
    employment_type: str | None = None
    location: GemLocation | None = None
    departments: list[GemDepartment] | None = None


# SmartRecruiters


class SmartRecruitersSection(Payload):
    text: str | None = None


class SmartRecruitersSections(Payload):
    jobDescription: SmartRecruitersSection | None = None


class SmartRecruitersJobAd(Payload):
    sections: SmartRecruitersSections | None = None


class SmartRecruitersLocation(Payload):
    city: str | None = None
    region: str | None = None
    country: str | None = None
    remote: bool | None = None
    fullLocation: str | None = None


class SmartRecruitersLabel(Payload):
    label: str | None = None


class SmartRecruitersJob(Payload):
    id: str | int | None = None
    uuid: str | None = None
    name: str | None = None
    refNumber: str | None = None
    ref: str | None = None
    jobAd: SmartRecruitersJobAd | None = None
    location: SmartRecruitersLocation | None = None
    department: SmartRecruitersLabel | None = None
    typeOfEmployment: SmartRecruitersLabel | None = None
    applyUrl: str | None = None
    releasedDate: str | None = None
