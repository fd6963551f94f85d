from __future__ import annotations
from jobflow.schemas.customize import CustomizeRequest, CustomizeResponse, LLMResponse, ParsedJob, ResumeChange

__all__ = [
    "CustomizeRequest",
    "CustomizeResponse",
    "LLMResponse",
    "ParsedJob",
    "ResumeChange",
]
