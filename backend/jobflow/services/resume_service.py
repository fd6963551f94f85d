from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Literal

from jobflow.core.config import settings
from jobflow.storage.object_store import ObjectStore


@dataclass
class ResumeResult:
    ok: bool
    resume: dict[str, Any] | None = None
    reason: Literal["missing", "corrupt"] | None = None


def load_resume(store: ObjectStore) -> ResumeResult:
    data = store.get(settings.resume_key)
    if data is None:
        return ResumeResult(ok=False, reason="missing")
    try:
        resume = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return ResumeResult(ok=False, reason="corrupt")
    if not isinstance(resume, dict):
        return ResumeResult(ok=False, reason="corrupt")
    return ResumeResult(ok=True, resume=resume)


def save_resume(store: ObjectStore, resume: dict[str, Any]) -> None:
    body = json.dumps(resume, indent=2, ensure_ascii=False).encode("utf-8")
    store.put(settings.resume_key, body, content_type="application/json")


def has_basics_name(resume: Any) -> bool:
    basics = resume.get("basics") if isinstance(resume, dict) else None
    return isinstance(basics, dict) and bool(basics.get("name"))
