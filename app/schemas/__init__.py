"""Pydantic schemas for API request/response validation."""

from app.schemas.interpret import (
    DetectedEmojiRead,
    EmojiLookupRead,
    EmojiSearchRead,
    EmojiSummaryRead,
    InterpretationResultRead,
    InterpretErrorResponse,
    InterpretRequest,
)

__all__ = [
    "DetectedEmojiRead",
    "EmojiLookupRead",
    "EmojiSearchRead",
    "EmojiSummaryRead",
    "InterpretErrorResponse",
    "InterpretRequest",
    "InterpretationResultRead",
]
