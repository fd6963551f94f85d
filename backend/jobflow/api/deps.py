from __future__ import annotations
import secrets

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobflow.api.errors import APIError
from jobflow.core.config import settings
from jobflow.llm.client import ResumeCustomizer
from jobflow.storage.object_store import LocalObjectStore, ObjectStore

bearer_scheme = HTTPBearer(auto_error=False)


def require_token(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> str:
    # An unset token locks the API instead of opening it.
    expected = settings.api_token
    if not expected or credentials is None:
        raise APIError(401, "Unauthorized")
    if not secrets.compare_digest(credentials.credentials.encode(), expected.encode()):
        raise APIError(401, "Unauthorized")
    return credentials.credentials


def get_store() -> ObjectStore:
    return LocalObjectStore(settings.storage_dir)


def get_customizer() -> ResumeCustomizer:
    return ResumeCustomizer(
        api_key=settings.anthropic_api_key,
        model=settings.anthropic_model,
        max_tokens=settings.anthropic_max_tokens,
    )
