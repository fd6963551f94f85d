from __future__ import annotations
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CustomizeRequest(BaseModel):
    # Checked by hand so a missing or non-string input gets its own error message.
    input: Any = None


class ParsedJob(BaseModel):
    """Job details as extracted by the model; every value is passed through loosely."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: Any = None
    company: Any = None
    location: Any = None
    salary: Any = None
    employment_type: Any = Field(default=None, alias="employmentType")
    remote: Any = None
    requirements: list[Any] = Field(default_factory=list)
    responsibilities: list[Any] = Field(default_factory=list)
    nice_to_have: list[Any] = Field(default_factory=list, alias="niceToHave")
    benefits: list[Any] = Field(default_factory=list)
    tech_stack: list[Any] = Field(default_factory=list, alias="techStack")
    about_company: Any = Field(default=None, alias="aboutCompany")
    raw_text: Any = Field(default=None, alias="rawText")

    @field_validator("requirements", "responsibilities", "nice_to_have", "benefits", "tech_stack", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value


class ResumeChange(BaseModel):
    model_config = ConfigDict(extra="allow")

    section: Any = None
    field: Any = None
    before: Any = None
    after: Any = None
    rationale: Any = None


class LLMResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    job: ParsedJob = Field(default_factory=ParsedJob)
    customized: Any = None
    changes: list[ResumeChange] = Field(default_factory=list)
    reasoning: Any = None

    @field_validator("job", mode="before")
    @classmethod
    def _null_job(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("changes", mode="before")
    @classmethod
    def _null_changes(cls, value: Any) -> Any:
        return [] if value is None else value


class CustomizeResponse(BaseModel):
    job: ParsedJob
    original: dict[str, Any]
    customized: Any = None
    changes: list[ResumeChange] = Field(default_factory=list)
    reasoning: Any = None

    def to_dict(self) -> dict[str, Any]:
        # Resume objects are returned untouched; only the parsed parts drop their empty keys.
        return {
            "job": self.job.model_dump(by_alias=True, exclude_none=True),
            "original": self.original,
            "customized": self.customized,
            "changes": [change.model_dump(exclude_none=True) for change in self.changes],
            "reasoning": self.reasoning,
        }
