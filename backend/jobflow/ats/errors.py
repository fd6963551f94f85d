from __future__ import annotations


class ATSError(Exception):
    """Base class for failures talking to a public ATS API."""

    def __init__(self, platform: str, message: str):
        super().__init__(message)
        self.platform = platform


class FetchError(ATSError):
    def __init__(self, platform: str, status_code: int):
        super().__init__(platform, f"{platform} API error: {status_code}")
        self.status_code = status_code


class UpstreamParseError(ATSError):
    def __init__(self, platform: str, detail: str):
        super().__init__(platform, f"{platform} returned an unexpected payload: {detail}")
        self.detail = detail


class UpstreamTransportError(ATSError):
    def __init__(self, platform: str, detail: str):
        super().__init__(platform, f"{platform} request failed: {detail}")
        self.detail = detail
