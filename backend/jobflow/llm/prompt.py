"""Prompt contract for the resume customization call.

The model gets the job posting and the master resume, and must answer with a
single JSON object: `{job, customized, changes, reasoning}`.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from jobflow.llm.errors import LLMParseError
from jobflow.schemas.customize import LLMResponse

SYSTEM_PROMPT = """You are an expert resume consultant who helps job seekers tailor their resumes to specific positions. You know how applicant tracking systems rank candidates and how hiring managers read resumes.

For every request:
1. Extract structured details from the job posting
2. Compare the candidate's existing resume with the role
3. Make specific, targeted edits so the resume fits the position better

## Rules

- **No invented experience**: reorder, reframe or emphasize what is already there, nothing more
- **Keep the candidate's voice**: improve clarity without rewriting their style
- **Be concrete**: avoid generic buzzwords
- **Use the posting's keywords** where they honestly apply
- **Stay accurate**: do not hide gaps; the resume must remain true

## Output Format

Answer with one JSON object of exactly this shape:

```json
{
  "job": {
    "title": "string",
    "company": "string",
    "location": "string or null",
    "salary": "string or null",
    "employmentType": "string or null",
    "remote": "string or null",
    "requirements": ["required qualifications"],
    "responsibilities": ["responsibilities of the role"],
    "niceToHave": ["preferred or bonus qualifications"],
    "benefits": ["benefits, if listed"],
    "techStack": ["technologies named in the posting"],
    "aboutCompany": "short company description, if present",
    "rawText": "the original job text"
  },
  "customized": {
    "...": "the complete JSON Resume object including your edits"
  },
  "changes": [
    {
      "section": "resume section, e.g. 'work', 'skills', 'basics.summary'",
      "field": "the specific field that changed",
      "before": "original text",
      "after": "new text",
      "rationale": "how the change helps for this role"
    }
  ],
  "reasoning": "two or three paragraphs on your overall approach and main recommendations"
}
```

Output valid JSON only. Do not wrap it in code fences and do not add text before or after it."""


def build_user_prompt(job_text: str, resume: dict[str, Any]) -> str:
    resume_json = json.dumps(resume, indent=2, ensure_ascii=False)
    return (
        "## Job Posting\n\n"
        f"{job_text}\n\n"
        "## Candidate's Current Resume (JSON Resume format)\n\n"
        f"```json\n{resume_json}\n```\n\n"
        "Customize the resume for this job posting:\n"
        '- put the structured job details in "job"\n'
        "- make targeted edits to the resume\n"
        "- record every edit with before, after and rationale\n"
        '- explain the overall approach in "reasoning"\n\n'
        "Reply with the JSON object only."
    )


def strip_code_fence(text: str) -> str:
    body = text.strip()
    if body.startswith("```json"):
        body = body[7:]
    elif body.startswith("```"):
        body = body[3:]
    if body.endswith("```"):
        body = body[:-3]
    return body.strip()


def parse_response(text: str) -> LLMResponse:
    body = strip_code_fence(text)
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise LLMParseError(f"Failed to parse LLM response as JSON: {exc}", raw=text) from exc
    try:
        return LLMResponse.model_validate(data)
    except ValidationError as exc:
        raise LLMParseError(f"LLM response has unexpected shape: {exc}", raw=text) from exc
