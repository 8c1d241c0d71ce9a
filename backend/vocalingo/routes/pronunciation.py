"""POST /api/check-pronunciation — pronunciation evaluation endpoint."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from vocalingo.errors import (
    PROCESSING_ERROR_MESSAGE,
    MalformedResponseError,
    PronunciationCheckError,
    UpstreamError,
    ValidationError,
)
from vocalingo.models import ErrorOut, PronunciationFeedback, PronunciationRequest
from vocalingo.services.pronunciation_checker import PronunciationChecker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pronunciation"])


def get_checker(request: Request) -> PronunciationChecker:
    """Dependency – the checker built at startup."""
    return request.app.state.checker


async def _read_payload(request: Request) -> Any:
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        logger.info("Request body is not valid JSON")
        return {}


@router.post(
    "/check-pronunciation",
    response_model=PronunciationFeedback,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": PronunciationRequest.model_json_schema()}
            },
        }
    },
)
async def check_pronunciation(
    request: Request,
    checker: PronunciationChecker = Depends(get_checker),
):
    """Judge a spoken attempt against the target word.

    Pipeline:
      1. Validate that targetWord, spokenWord and language are all present
      2. Build the evaluation prompt
      3. Ask the model (blocking call, run off the event loop)
      4. Strip code fences and parse the JSON reply
      5. Return the parsed record verbatim
    """
    payload = await _read_payload(request)

    try:
        feedback = await run_in_threadpool(checker.check, payload)
    except ValidationError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except MalformedResponseError as exc:
        logger.error("JSON parsing error: %s", exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except UpstreamError as exc:
        logger.exception("Model invocation failed: %s", exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except PronunciationCheckError as exc:
        logger.exception("Error processing pronunciation check")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except Exception:
        logger.exception("Error processing pronunciation check")
        return JSONResponse(status_code=500, content={"error": PROCESSING_ERROR_MESSAGE})

    # Returned as-is so keys the model added are not filtered by response_model.
    return JSONResponse(content=feedback)
