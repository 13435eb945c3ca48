"""Request/response schemas for the interpreter API."""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.services.interpreter import (
    InterpretationInput,
    InterpretationMetrics,
    Platform,
    RedFlag,
    RelationshipContext,
    contains_emoji,
)

MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000


class InterpretRequest(BaseModel):
    """Body for POST /interpret and POST /interpret/stream."""

    message: str
    platform: Platform
    context: RelationshipContext

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if len(v) < MESSAGE_MIN_LENGTH:
            raise ValueError(f"Message must be at least {MESSAGE_MIN_LENGTH} characters")
        if len(v) > MESSAGE_MAX_LENGTH:
            raise ValueError(f"Message must be at most {MESSAGE_MAX_LENGTH} characters")
        if not contains_emoji(v):
            raise ValueError("Message must contain at least one emoji")
        return v

    def to_input(self) -> InterpretationInput:
        return InterpretationInput(
            message=self.message,
            platform=self.platform,
            context=self.context,
        )


class DetectedEmojiRead(BaseModel):
    character: str
    meaning: str
    slug: str | None = None  # Dropped from the response when unknown


class InterpretationResultRead(BaseModel):
    """Interpretation result as returned by the API (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    timestamp: str
    message: str
    emojis: list[DetectedEmojiRead]
    interpretation: str
    metrics: InterpretationMetrics
    red_flags: list[RedFlag]


class InterpretErrorResponse(BaseModel):
    """Error body for interpreter endpoints."""

    detail: str
    field_errors: dict[str, list[str]] | None = None


class EmojiLookupRead(BaseModel):
    character: str
    slug: str


class EmojiSummaryRead(BaseModel):
    """A catalog emoji as returned by search."""

    slug: str
    character: str
    name: str
    category: str | None = None
    tldr: str | None = None


class EmojiSearchRead(BaseModel):
    emojis: list[EmojiSummaryRead]
