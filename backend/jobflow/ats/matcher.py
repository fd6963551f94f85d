"""Map a job board URL to its ATS platform, client and optional job id."""

from __future__ import annotations
import re

from jobflow.ats.base import ATSMatch, Platform

# Group 1 is the client, group 2 the optional job id. Order matters: the first
# platform in table order, then the first pattern in its list, wins.
ATS_PATTERNS: dict[Platform, list[re.Pattern[str]]] = {
    Platform.WORKABLE: [
        re.compile(r"^https?://apply\.workable\.com/([^/?#]+)(?:/j/([A-Z0-9]+))?", re.I),
        re.compile(r"^https?://(?!apply\.)([^./?#]+)\.workable\.com/(?:j/([A-Z0-9]+))?", re.I),
    ],
    Platform.GREENHOUSE: [
        re.compile(r"^https?://boards\.greenhouse\.io/([^/?#]+)(?:/jobs/(\d+))?", re.I),
        re.compile(r"^https?://job-boards\.greenhouse\.io/([^/?#]+)(?:/jobs/(\d+))?", re.I),
        re.compile(r"^https?://(?!(?:boards|job-boards|api|boards-api)\.)([^./?#]+)\.greenhouse\.io/(?:jobs/(\d+))?", re.I),
    ],
    Platform.LEVER: [
        re.compile(r"^https?://jobs\.lever\.co/([^/?#]+)(?:/([a-f0-9-]+))?", re.I),
    ],
    Platform.ASHBY: [
        re.compile(r"^https?://jobs\.ashbyhq\.com/([^/?#]+)(?:/([a-f0-9-]+))?", re.I),
    ],
    Platform.RECRUITEE: [
        re.compile(r"^https?://([^./?#]+)\.recruitee\.com(?:/o/([^/?#]+))?", re.I),
    ],
    Platform.GEM: [
        re.compile(r"^https?://jobs\.gem\.com/([^/?#]+)(?:/([^/?#]+))?", re.I),
    ],
    Platform.SMARTRECRUITERS: [
        re.compile(r"^https?://jobs\.smartrecruiters\.com/([^/?#]+)(?:/([^/?#]+))?", re.I),
        re.compile(r"^https?://careers\.smartrecruiters\.com/([^/?#]+)(?:/([^/?#]+))?", re.I),
    ],
}


def match_url(url: str) -> ATSMatch | None:
    text = (url or "").strip()
    for platform, patterns in ATS_PATTERNS.items():
        for pattern in patterns:
            m = pattern.match(text)
            if m and m.group(1):
                return ATSMatch(platform=platform, client=m.group(1), job_id=m.group(2) or None)
    return None


def is_known_ats_url(url: str) -> bool:
    return match_url(url) is not None


def get_ats_platform(url: str) -> str | None:
    match = match_url(url)
    return match.platform.value if match else None
