"""Assemble the final InterpretationResult from validated model output."""

import secrets
from datetime import UTC, datetime

from app.services.interpreter.schema import InterpretationResponse
from app.services.interpreter.types import DetectedEmoji, InterpretationResult

INTERPRETATION_ID_PREFIX = "int_"


def generate_interpretation_id() -> str:
    """Unique per call; not derived from the content."""
    timestamp_ms = int(datetime.now(UTC).timestamp() * 1000)
    return f"{INTERPRETATION_ID_PREFIX}{timestamp_ms}_{secrets.token_hex(6)}"


def build_interpretation_result(
    message: str,
    response: InterpretationResponse,
    slug_map: dict[str, str],
) -> InterpretationResult:
    """
    Build the final result returned to callers.

    Args:
        message: The original, unmodified message
        response: Model output that already passed validation
        slug_map: Emoji character -> catalog slug, for detail-page links

    Returns:
        InterpretationResult with a fresh id and timestamp
    """
    emojis = [
        DetectedEmoji(
            character=emoji.character,
            meaning=emoji.meaning,
            slug=slug_map.get(emoji.character),
        )
        for emoji in response.emojis
    ]

    return InterpretationResult(
        id=generate_interpretation_id(),
        timestamp=datetime.now(UTC).isoformat(),
        message=message,
        emojis=emojis,
        interpretation=response.interpretation,
        metrics=response.metrics,
        red_flags=list(response.red_flags),
    )
