"""Base class for LLM-backed interpreters.

Owns the Anthropic client, the credential check and the provider call
(plain or streamed). Subclasses define prompts and parsing.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

import anthropic

from app.config import settings

from .exceptions import InterpreterConfigError, ProviderError

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseInterpreter(ABC, Generic[TInput, TOutput]):
    """Abstract base for all message interpreters.

    Subclass this to create interpreters for different input sources
    or output formats. The base handles LLM communication; subclasses
    define prompts and parsing.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        enabled: bool | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout_seconds: float | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.anthropic_api_key
        self.enabled = enabled if enabled is not None else settings.enable_interpreter
        self.model = model or settings.interpreter_model
        self.max_tokens = max_tokens or settings.interpreter_max_tokens
        self.temperature = (
            temperature if temperature is not None else settings.interpreter_temperature
        )
        self.timeout_seconds = timeout_seconds or settings.interpreter_timeout_seconds
        self._client: anthropic.AsyncAnthropic | None = None

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(
                api_key=self.api_key,
                timeout=self.timeout_seconds,
            )
        return self._client

    def ensure_configured(self) -> None:
        """Fail fast, before any work, when the provider cannot be reached."""
        if not self.api_key:
            raise InterpreterConfigError()
        if not self.enabled:
            raise InterpreterConfigError("Interpreter is disabled")

    @abstractmethod
    def get_system_prompt(self) -> str:
        """Return the system prompt for this interpreter."""
        ...

    @abstractmethod
    def format_input(self, input_data: TInput) -> str:
        """Convert typed input to prompt string."""
        ...

    @abstractmethod
    def parse_output(self, response_text: str) -> TOutput:
        """Parse LLM response into typed output."""
        ...

    async def complete(self, user_message: str) -> str:
        """Send one prompt and return the full response text."""
        try:
            response = await asyncio.wait_for(
                self.client.messages.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                    system=self.get_system_prompt(),
                    messages=[{"role": "user", "content": user_message}],
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as e:
            raise ProviderError(
                f"Model did not respond within {self.timeout_seconds}s", code="TIMEOUT"
            ) from e

        text = "".join(block.text for block in response.content if block.type == "text")
        if not text.strip():
            raise ProviderError("Empty response from model")
        return text

    async def stream(self, user_message: str) -> AsyncIterator[str]:
        """Send one prompt and yield text chunks as the model generates them.

        The whole stream shares one deadline of `timeout_seconds`, and a
        stream with no text fails the same way as an empty `complete()`.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.timeout_seconds
        received_text = False

        async with self.client.messages.stream(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=self.get_system_prompt(),
            messages=[{"role": "user", "content": user_message}],
        ) as stream:
            chunks = aiter(stream.text_stream)
            while True:
                try:
                    text = await asyncio.wait_for(
                        anext(chunks), timeout=max(deadline - loop.time(), 0)
                    )
                except StopAsyncIteration:
                    break
                except TimeoutError as e:
                    raise ProviderError(
                        f"Model did not finish within {self.timeout_seconds}s", code="TIMEOUT"
                    ) from e

                received_text = received_text or bool(text.strip())
                yield text

        if not received_text:
            raise ProviderError("Empty response from model")

    async def interpret(self, input_data: TInput) -> TOutput:
        """Interpret already-prepared input and return structured output.

        Callers are expected to have run `ensure_configured()` first.
        """
        response_text = await self.complete(self.format_input(input_data))
        return self.parse_output(response_text)
