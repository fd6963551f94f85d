from __future__ import annotations
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from jobflow.api import ats, customize, health, resume
from jobflow.api.deps import require_token
from jobflow.api.errors import APIError, api_error_handler, validation_error_handler
from jobflow.core.config import settings
from jobflow.core.logging import setup_logging

setup_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

auth = [Depends(require_token)]

app.include_router(health.router, dependencies=auth)
app.include_router(customize.router, prefix=settings.api_prefix, dependencies=auth)
app.include_router(resume.router, prefix=settings.api_prefix, dependencies=auth)
app.include_router(ats.router, prefix=settings.api_prefix, dependencies=auth)
