"""
Emoji message interpreter.

Runs one interpretation end to end:

    config check -> extract emojis -> map slugs -> call model
    -> validate response -> assemble result

Every step either produces a fully valid value or raises; there is no
partial result and no fallback interpretation.
"""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, field

from app.services.interpreter.base import BaseInterpreter
from app.services.interpreter.catalog import EmojiCatalog
from app.services.interpreter.exceptions import ResponseValidationError
from app.services.interpreter.extractor import extract_emojis_with_positions
from app.services.interpreter.prompts import (
    INTERPRETATION_SYSTEM_PROMPT,
    build_interpretation_prompt,
)
from app.services.interpreter.result import build_interpretation_result
from app.services.interpreter.schema import (
    InterpretationResponse,
    parse_interpretation_response,
)
from app.services.interpreter.types import (
    ExtractedEmoji,
    InterpretationInput,
    InterpretationResult,
)

logger = logging.getLogger(__name__)


@dataclass
class PreparedInterpretation:
    """Request state after extraction and slug mapping, ready for the model."""

    request: InterpretationInput
    extracted: list[ExtractedEmoji] = field(default_factory=list)
    slug_map: dict[str, str] = field(default_factory=dict)


class EmojiInterpreter(BaseInterpreter[PreparedInterpretation, InterpretationResponse]):
    """Interprets the emojis in a message for a given platform and relationship.

    The catalog is injected and only read, so one instance can serve
    concurrent requests.
    """

    def __init__(self, catalog: EmojiCatalog, **kwargs) -> None:
        super().__init__(**kwargs)
        self.catalog = catalog

    def get_system_prompt(self) -> str:
        return INTERPRETATION_SYSTEM_PROMPT

    def format_input(self, input_data: PreparedInterpretation) -> str:
        return build_interpretation_prompt(input_data.request, input_data.extracted)

    def parse_output(self, response_text: str) -> InterpretationResponse:
        try:
            return parse_interpretation_response(response_text)
        except ResponseValidationError as e:
            logger.warning(f"Model response failed validation: {e.message}")
            raise

    def prepare(self, request: InterpretationInput) -> PreparedInterpretation:
        """Extract emojis and resolve catalog slugs."""
        extracted = extract_emojis_with_positions(request.message)
        return PreparedInterpretation(
            request=request,
            extracted=extracted,
            slug_map=self.catalog.build_slug_map(extracted),
        )

    async def interpret_message(self, request: InterpretationInput) -> InterpretationResult:
        """
        Interpret a message containing emojis.

        Args:
            request: Message, platform and relationship context

        Returns:
            The assembled, validated interpretation

        Raises:
            InterpreterConfigError: No API key configured (raised before any work)
            ProviderError: Empty model response or timeout
            ResponseValidationError: Model output is not valid JSON or breaks the schema
            anthropic.APIError: Provider failures, propagated as-is
        """
        self.ensure_configured()

        prepared = self.prepare(request)
        response = await self.interpret(prepared)
        result = build_interpretation_result(request.message, response, prepared.slug_map)

        logger.info(
            f"Interpretation {result.id} completed: {len(result.emojis)} emojis, "
            f"tone={result.metrics.overall_tone}, {len(result.red_flags)} red flags"
        )
        return result

    async def stream_interpretation(
        self, request: InterpretationInput
    ) -> AsyncIterator[str | InterpretationResult]:
        """
        Interpret a message while streaming the model's raw text.

        Yields text chunks as they arrive, then the validated
        InterpretationResult as the final item. The accumulated text goes
        through the same validation as interpret_message.
        """
        self.ensure_configured()

        prepared = self.prepare(request)
        chunks: list[str] = []

        async for chunk in self.stream(self.format_input(prepared)):
            chunks.append(chunk)
            yield chunk

        response = self.parse_output("".join(chunks))
        result = build_interpretation_result(request.message, response, prepared.slug_map)

        logger.info(f"Streamed interpretation {result.id} completed")
        yield result
