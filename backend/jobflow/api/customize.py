from __future__ import annotations
from fastapi import APIRouter, Depends

from jobflow.api.deps import get_customizer, get_store
from jobflow.api.errors import APIError
from jobflow.llm.client import ResumeCustomizer
from jobflow.llm.errors import LLMEmptyResponse, LLMParseError, LLMRequestError
from jobflow.schemas.customize import CustomizeRequest
from jobflow.services.customize_service import InvalidInput, ResumeUnavailable, customize_resume
from jobflow.storage.object_store import ObjectStore

router = APIRouter(tags=["customize"])


@router.post("/customize")
def customize(
    req: CustomizeRequest,
    store: ObjectStore = Depends(get_store),
    customizer: ResumeCustomizer = Depends(get_customizer),
):
    try:
        result = customize_resume(req.input, store, customizer)
    except InvalidInput as exc:
        raise APIError(413 if exc.too_large else 400, str(exc)) from exc
    except ResumeUnavailable as exc:
        if exc.reason == "corrupt":
            raise APIError(500, "Stored resume.json is corrupted") from exc
        raise APIError(500, "Master resume not found. Upload resume.json first.") from exc
    except LLMRequestError as exc:
        raise APIError(500, "Claude request failed", details=str(exc)) from exc
    except LLMEmptyResponse as exc:
        raise APIError(500, "No text response from Claude", raw=exc.content) from exc
    except LLMParseError as exc:
        raise APIError(500, "Failed to parse Claude response", details=str(exc), raw=exc.raw) from exc
    return result.to_dict()
