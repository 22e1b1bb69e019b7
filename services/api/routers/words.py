"""Reverse Words router.

Endpoints:
- POST / - Reverse the submitted word
- GET / - Report the deployed release
- GET /health - Liveness probe
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from core.config.settings import Settings
from services.api.deps import get_app_settings, get_metrics
from services.api.exceptions import MalformedBodyError
from services.api.prometheus import (
    ENDPOINT_HEALTH,
    ENDPOINT_RELEASE,
    ENDPOINT_REVERSE_WORD,
    WordMetrics,
)
from services.api.reverse import NO_WORD_DETECTED, reverse_word
from services.api.schemas import ReverseWordRequest, ReverseWordResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["words"])

RELEASE_PREFIX = "Reverse Words Release: "
HEALTHY = "Healthy"


async def read_reverse_request(request: Request) -> ReverseWordRequest:
    """
    Decode the reverse-word request body.

    An empty (or whitespace only) body and a JSON ``null`` both mean no word
    was supplied. Anything else must be a JSON object whose ``word`` field,
    when present, is a string.

    Raises:
        MalformedBodyError: If the body cannot be decoded.
    """
    raw = await request.body()
    if not raw.strip():
        return ReverseWordRequest()

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise MalformedBodyError(str(e)) from e

    if data is None:
        return ReverseWordRequest()
    if not isinstance(data, dict):
        raise MalformedBodyError(f"expected a JSON object, got {type(data).__name__}")

    try:
        return ReverseWordRequest.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(error["msg"] for error in e.errors())
        raise MalformedBodyError(errors) from e


@router.post("/", response_model=None)
async def reverse_word_endpoint(
    request: Request,
    metrics: WordMetrics = Depends(get_metrics),
) -> Response:
    """
    Reverse the submitted word.

    Answers the fixed default word when no word was supplied. The reversed
    word counter is updated before encoding; the endpoint counter only once
    the JSON body has been produced.
    """
    payload = await read_reverse_request(request)

    if not payload.word:
        logger.info("No word detected, sending default reverse word")
        reversed_word = NO_WORD_DETECTED
    else:
        logger.info(f"Detected word {payload.word}")
        reversed_word = reverse_word(payload.word)
    logger.info(f"Reverse word {reversed_word}")
    metrics.record_reversed_word()

    try:
        body = ReverseWordResponse(reverse_word=reversed_word).model_dump_json(
            exclude_none=True
        )
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode reverse word response: {e}")
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = Response(content=body, media_type="application/json")
    metrics.record_endpoint_access(ENDPOINT_REVERSE_WORD)
    return response


@router.get("/", response_class=PlainTextResponse)
def get_release(
    settings: Settings = Depends(get_app_settings),
    metrics: WordMetrics = Depends(get_metrics),
) -> PlainTextResponse:
    """Report the release this instance was deployed with."""
    response = PlainTextResponse(RELEASE_PREFIX + settings.release)
    metrics.record_endpoint_access(ENDPOINT_RELEASE)
    return response


@router.get("/health", response_class=PlainTextResponse)
def health_check(metrics: WordMetrics = Depends(get_metrics)) -> PlainTextResponse:
    """Basic health check endpoint for load balancers."""
    response = PlainTextResponse(HEALTHY)
    metrics.record_endpoint_access(ENDPOINT_HEALTH)
    return response
