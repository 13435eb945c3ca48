"""Shared FastAPI dependencies for the interpreter API."""

from fastapi import Request

from app.config import settings
from app.core.rate_limit import UsageLimit, usage_limiter
from app.services.interpreter import EmojiCatalog, EmojiInterpreter


def get_catalog(request: Request) -> EmojiCatalog:
    """The emoji catalog loaded at startup."""
    return request.app.state.catalog


def get_interpreter(request: Request) -> EmojiInterpreter:
    """The process-wide interpreter (shares one Anthropic client)."""
    return request.app.state.interpreter


def get_client_key(request: Request) -> str:
    """Identify the caller for rate limiting."""
    return request.client.host if request.client else "unknown"


def interpret_usage_limit() -> UsageLimit:
    """Free interpretations per client per rolling day."""
    return UsageLimit(max_uses=settings.interpret_daily_limit)


def ensure_interpret_allowance(client_key: str) -> None:
    """Check the caller still has an interpretation left today.

    Raises:
        RateLimitedError: 429 when the daily allowance is used up
    """
    usage_limiter.ensure_available(client_key, interpret_usage_limit())


def record_interpret_use(client_key: str) -> int:
    """Charge one successful interpretation; returns the uses left today."""
    return usage_limiter.record_use(client_key, interpret_usage_limit())
