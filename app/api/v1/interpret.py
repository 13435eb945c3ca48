"""Emoji interpreter API endpoints."""

import json
import logging
from collections.abc import AsyncIterator
from typing import Any, NoReturn

import anthropic
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import StreamingResponse

from app.api.deps import (
    ensure_interpret_allowance,
    get_client_key,
    get_interpreter,
    interpret_usage_limit,
    record_interpret_use,
)
from app.core.exceptions import (
    BadGatewayError,
    GatewayTimeoutError,
    RateLimitedError,
    ServiceUnavailableError,
)
from app.schemas.interpret import (
    InterpretationResultRead,
    InterpretErrorResponse,
    InterpretRequest,
)
from app.services.interpreter import (
    EmojiInterpreter,
    InterpretationResult,
    InterpreterConfigError,
    InterpreterError,
    ProviderError,
    ResponseValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interpret", tags=["interpreter"])


def _to_http_error(error: Exception) -> HTTPException:
    """Map an interpreter or provider failure to the HTTP error the client sees."""
    if isinstance(error, InterpreterConfigError):
        return ServiceUnavailableError()
    if isinstance(error, ResponseValidationError):
        return BadGatewayError("Interpretation failed")
    if isinstance(error, ProviderError):
        if error.code == "TIMEOUT":
            return GatewayTimeoutError()
        return BadGatewayError("AI service returned an empty response")
    if isinstance(error, anthropic.AuthenticationError):
        return ServiceUnavailableError("AI service authentication failed")
    if isinstance(error, anthropic.RateLimitError):
        return RateLimitedError()
    if isinstance(error, anthropic.APIStatusError) and error.status_code >= 500:
        return ServiceUnavailableError("AI service is temporarily unavailable")
    if isinstance(error, anthropic.APIConnectionError):
        return ServiceUnavailableError("AI service is temporarily unavailable")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="AI service error",
    )


def _raise_http_error(error: Exception) -> NoReturn:
    http_error = _to_http_error(error)
    if http_error.status_code >= 500:
        logger.error(f"Interpretation failed: {error}")
    raise http_error from error


def _sse(event: str, data: dict[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


@router.post(
    "",
    response_model=InterpretationResultRead,
    response_model_exclude_none=True,
    responses={
        400: {"model": InterpretErrorResponse},
        429: {"description": "Daily interpretation limit reached"},
        502: {"description": "Model response failed validation"},
        503: {"description": "AI service not configured or unavailable"},
    },
)
async def interpret(
    data: InterpretRequest,
    response: Response,
    interpreter: EmojiInterpreter = Depends(get_interpreter),
    client_key: str = Depends(get_client_key),
) -> dict[str, Any]:
    """Interpret the emojis in a message for a platform and relationship context.

    Only a successful interpretation is charged against the daily allowance;
    the uses left are returned in `X-RateLimit-Remaining`.
    """
    ensure_interpret_allowance(client_key)

    try:
        result = await interpreter.interpret_message(data.to_input())
    except (InterpreterError, anthropic.APIError) as e:
        _raise_http_error(e)

    remaining = record_interpret_use(client_key)
    response.headers["X-RateLimit-Limit"] = str(interpret_usage_limit().max_uses)
    response.headers["X-RateLimit-Remaining"] = str(remaining)
    return result.to_dict()


@router.post("/stream")
async def interpret_stream(
    data: InterpretRequest,
    interpreter: EmojiInterpreter = Depends(get_interpreter),
    client_key: str = Depends(get_client_key),
) -> StreamingResponse:
    """Streaming variant of POST /interpret (text/event-stream).

    Emits `delta` events with raw model text, then one terminal event:
    `result` with the validated interpretation, or `error`. Only a stream
    that reaches `result` is charged against the daily allowance.
    """
    ensure_interpret_allowance(client_key)

    # Config problems are reported as a plain 503, before the stream opens
    try:
        interpreter.ensure_configured()
    except InterpreterConfigError as e:
        _raise_http_error(e)

    async def event_stream() -> AsyncIterator[str]:
        try:
            async for item in interpreter.stream_interpretation(data.to_input()):
                if isinstance(item, InterpretationResult):
                    record_interpret_use(client_key)
                    yield _sse("result", item.to_dict())
                else:
                    yield _sse("delta", {"text": item})
        except (InterpreterError, anthropic.APIError) as e:
            http_error = _to_http_error(e)
            logger.warning(f"Streamed interpretation failed: {e}")
            yield _sse("error", {"status": http_error.status_code, "message": http_error.detail})

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache, no-transform", "Connection": "keep-alive"},
    )
