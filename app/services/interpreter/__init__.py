"""Emoji message interpretation service.

Decodes the emojis in a pasted message: finds them (multi-code-point
sequences included), links them to the emoji catalog, asks the model for a
structured reading and validates that reading before returning it.

Quick start:
    from app.services.interpreter import (
        EmojiCatalog, EmojiInterpreter, InterpretationInput, Platform, RelationshipContext,
    )

    catalog = EmojiCatalog.from_directory(settings.emoji_data_dir)
    interpreter = EmojiInterpreter(catalog)
    result = await interpreter.interpret_message(InterpretationInput(
        message="Sure, sounds great 🙂",
        platform=Platform.SLACK,
        context=RelationshipContext.COWORKER,
    ))
    print(result.metrics.passive_aggression_probability)
"""

from .base import BaseInterpreter
from .catalog import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, CatalogEmoji, EmojiCatalog
from .exceptions import (
    InterpreterConfigError,
    InterpreterError,
    ProviderError,
    ResponseValidationError,
)
from .extractor import contains_emoji, extract_emojis_with_positions
from .result import build_interpretation_result, generate_interpretation_id
from .schema import (
    InterpretationMetrics,
    InterpretationResponse,
    ModelEmojiMeaning,
    RedFlag,
    parse_interpretation_response,
)
from .service import EmojiInterpreter, PreparedInterpretation
from .types import (
    DetectedEmoji,
    ExtractedEmoji,
    InterpretationInput,
    InterpretationResult,
    Platform,
    RelationshipContext,
)

__all__ = [
    "DEFAULT_SEARCH_LIMIT",
    "MAX_SEARCH_LIMIT",
    "BaseInterpreter",
    "CatalogEmoji",
    "DetectedEmoji",
    "EmojiCatalog",
    "EmojiInterpreter",
    "ExtractedEmoji",
    "InterpretationInput",
    "InterpretationMetrics",
    "InterpretationResponse",
    "InterpretationResult",
    "InterpreterConfigError",
    "InterpreterError",
    "ModelEmojiMeaning",
    "Platform",
    "PreparedInterpretation",
    "ProviderError",
    "RedFlag",
    "RelationshipContext",
    "ResponseValidationError",
    "build_interpretation_result",
    "contains_emoji",
    "extract_emojis_with_positions",
    "generate_interpretation_id",
    "parse_interpretation_response",
]
