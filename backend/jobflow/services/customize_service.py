"""The /customize pipeline: job text, master resume, one model call, parse."""

from __future__ import annotations

import logging
from typing import Any

from jobflow.core.config import settings
from jobflow.llm.client import ResumeCustomizer
from jobflow.llm.errors import LLMParseError
from jobflow.llm.prompt import SYSTEM_PROMPT, build_user_prompt, parse_response
from jobflow.schemas.customize import CustomizeResponse
from jobflow.services.job_text import get_job_text
from jobflow.services.resume_service import load_resume
from jobflow.storage.object_store import ObjectStore

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    def __init__(self, message: str, too_large: bool = False):
        super().__init__(message)
        self.too_large = too_large


class ResumeUnavailable(Exception):
    def __init__(self, reason: str):
        super().__init__(f"master resume is {reason}")
        self.reason = reason


def validate_input(raw_input: Any) -> str:
    if not raw_input or not isinstance(raw_input, str):
        raise InvalidInput("Missing or invalid 'input' field")
    trimmed = raw_input.strip()
    if not trimmed:
        raise InvalidInput("Input cannot be empty")
    if len(trimmed) > settings.max_input_chars:
        raise InvalidInput("Input too large", too_large=True)
    return trimmed


def customize_resume(raw_input: Any, store: ObjectStore, customizer: ResumeCustomizer) -> CustomizeResponse:
    """Raises InvalidInput, ResumeUnavailable or an LLMError; callers map these to responses."""
    trimmed = validate_input(raw_input)
    job_text = get_job_text(trimmed)

    loaded = load_resume(store)
    if not loaded.ok:
        raise ResumeUnavailable(loaded.reason)
    resume = loaded.resume

    text = customizer.complete(SYSTEM_PROMPT, build_user_prompt(job_text, resume))
    try:
        parsed = parse_response(text)
    except LLMParseError as exc:
        logger.error("Could not parse model response (%d chars): %s", len(text), exc)
        raise

    return CustomizeResponse(
        job=parsed.job,
        original=resume,
        customized=parsed.customized,
        changes=parsed.changes,
        reasoning=parsed.reasoning,
    )
