from __future__ import annotations
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from jobflow.api.deps import get_store
from jobflow.api.errors import APIError
from jobflow.services.resume_service import has_basics_name, load_resume, save_resume
from jobflow.storage.object_store import ObjectStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["resume"])


@router.put("")
def put_resume(resume: dict[str, Any] = Body(...), store: ObjectStore = Depends(get_store)):
    if not has_basics_name(resume):
        raise APIError(400, "Invalid JSON Resume: missing basics.name")
    try:
        save_resume(store, resume)
    except (OSError, ValueError) as exc:
        logger.error("Failed to write resume: %s", exc)
        raise APIError(500, "Failed to write resume", details=str(exc)) from exc
    return {"status": "ok", "message": "Resume uploaded"}


@router.get("")
def get_resume(store: ObjectStore = Depends(get_store)):
    result = load_resume(store)
    if not result.ok:
        if result.reason == "corrupt":
            raise APIError(500, "Stored resume.json is corrupted")
        raise APIError(404, "No resume found")
    return result.resume
