from __future__ import annotations


class LLMError(Exception):
    pass


class LLMRequestError(LLMError):
    """The SDK call itself failed (network, auth, rate limit, server error)."""


class LLMEmptyResponse(LLMError):
    def __init__(self, content: list | None = None):
        super().__init__("No text block in model response")
        self.content = content or []


class LLMParseError(LLMError):
    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw
