"""
Model response contract and validation.

The model must answer with a JSON object of exactly this shape:

    {
      "emojis": [{"character": str, "meaning": str}, ...],
      "interpretation": str,
      "metrics": {
        "sarcasmProbability": 0-100,
        "passiveAggressionProbability": 0-100,
        "overallTone": "positive" | "neutral" | "negative",
        "confidence": 0-100
      },
      "redFlags": [{"type": str, "description": str, "severity": "low" | "medium" | "high"}, ...]
    }

The whole response is accepted or the whole call fails. Nothing is clamped,
coerced or defaulted: these values drive user-facing tone and risk signals.
"""

import json
import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.services.interpreter.exceptions import ResponseValidationError

logger = logging.getLogger(__name__)

OverallTone = Literal["positive", "neutral", "negative"]
RedFlagSeverity = Literal["low", "medium", "high"]


class _ResponseModel(BaseModel):
    """Shared config: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ModelEmojiMeaning(_ResponseModel):
    character: str = Field(strict=True)
    meaning: str = Field(strict=True)


class InterpretationMetrics(_ResponseModel):
    sarcasm_probability: float = Field(strict=True, ge=0, le=100)
    passive_aggression_probability: float = Field(strict=True, ge=0, le=100)
    overall_tone: OverallTone
    confidence: float = Field(strict=True, ge=0, le=100)


class RedFlag(_ResponseModel):
    # Free-form category ("manipulation", "guilt-tripping", ...), not an enum
    type: str = Field(strict=True)
    description: str = Field(strict=True)
    severity: RedFlagSeverity


class InterpretationResponse(_ResponseModel):
    """Validated model output. All four fields are mandatory."""

    emojis: list[ModelEmojiMeaning]
    interpretation: str = Field(strict=True)
    metrics: InterpretationMetrics
    red_flags: list[RedFlag]


def _strip_code_fence(text: str) -> str:
    """Remove a single markdown code fence wrapping the whole response."""
    if not text.startswith("```"):
        return text

    lines = text.split("\n")
    # Remove first line (```json or ```)
    lines = lines[1:]
    # Remove last line (```)
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def _format_issues(error: PydanticValidationError) -> list[str]:
    issues = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"]) or "<root>"
        issues.append(f"{path}: {issue['msg']}")
    return issues


def parse_interpretation_response(response_text: str) -> InterpretationResponse:
    """
    Parse and validate the model's raw text output.

    Args:
        response_text: Raw text returned by the provider

    Returns:
        The validated response

    Raises:
        ResponseValidationError: If the text is not JSON or breaks the schema
    """
    text = _strip_code_fence(response_text.strip())

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseValidationError("Failed to parse model response as JSON") from e

    try:
        return InterpretationResponse.model_validate(parsed)
    except PydanticValidationError as e:
        issues = _format_issues(e)
        logger.debug(f"Model response rejected: {issues}")
        raise ResponseValidationError(
            f"Invalid response structure: {'; '.join(issues)}",
            issues=issues,
        ) from e
