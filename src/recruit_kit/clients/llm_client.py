"""Claude API wrapper: single-shot JSON calls and streaming chat sessions."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass

import anthropic

from recruit_kit.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_CHAT_MODEL = "claude-haiku-4-5-20251001"

JSON_OUTPUT_INSTRUCTION = """\
Respond with a single JSON object and nothing else: no prose, no code fences.
The object must conform to this JSON Schema. Every property listed under
"required" must be present, and each "description" says what the value
should contain:
"""


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class ChatSession:
    """Multi-turn conversation against one model and system instruction.

    Each call to ``send_message_stream`` is one turn. The turn is recorded in
    the history only after its stream has been fully consumed; a failed
    turn, or one whose reply has no text, leaves the history as it was.
    """

    def __init__(
        self,
        client: anthropic.AsyncAnthropic,
        *,
        model: str,
        system: str,
        max_tokens: int,
        on_usage: Callable[[str, int, int], None] | None = None,
    ):
        self._client = client
        self.model = model
        self.system = system
        self.max_tokens = max_tokens
        self._on_usage = on_usage
        self._history: list[dict] = []

    @property
    def history(self) -> list[dict]:
        return list(self._history)

    async def send_message_stream(self, text: str) -> AsyncIterator[str]:
        """Send ``text`` and yield the reply as it arrives, chunk by chunk."""
        messages = [*self._history, {"role": "user", "content": text}]
        parts: list[str] = []
        logger.debug("Chat turn: model=%s, history=%d messages", self.model, len(self._history))
        async with self._client.messages.stream(
            model=self.model,
            max_tokens=self.max_tokens,
            system=self.system,
            messages=messages,
        ) as stream:
            async for chunk in stream.text_stream:
                parts.append(chunk)
                yield chunk
            final = await stream.get_final_message()

        if self._on_usage is not None:
            self._on_usage(self.model, final.usage.input_tokens, final.usage.output_tokens)
        reply = "".join(parts)
        if not reply:
            # The API rejects an empty assistant message anywhere but last.
            logger.warning("Chat turn produced no text; not recorded in history")
            return
        self._history.append({"role": "user", "content": text})
        self._history.append({"role": "assistant", "content": reply})


class LLMClient:
    """Async Claude API client.

    The SDK's own retries are switched off: a failed call surfaces to the
    caller immediately and the user decides whether to try again.
    """

    def __init__(self, api_key: str | None = None):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    def _record_usage(self, model: str, input_tokens: int, output_tokens: int) -> None:
        logger.debug("LLM usage: model=%s, %d input, %d output tokens", model, input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 8192,
        thinking_budget: int = 0,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage.

        With a non-zero ``thinking_budget`` extended thinking is enabled and
        ``temperature`` is not sent (the API only accepts the default then).
        """
        logger.debug("LLM call: model=%s, thinking_budget=%d", model, thinking_budget)
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        if thinking_budget:
            kwargs["thinking"] = {"type": "enabled", "budget_tokens": thinking_budget}
        else:
            kwargs["temperature"] = temperature

        try:
            message = await self.client.messages.create(**kwargs)
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        self._record_usage(model, input_tokens, output_tokens)
        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)

    async def generate_json(
        self,
        prompt: str,
        schema: dict | None = None,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 8192,
        thinking_budget: int = 0,
    ) -> dict:
        """Send a prompt and parse a JSON object from the response.

        ``schema`` is attached to the system instruction as the output
        contract. Raises ValueError when no JSON object can be parsed.
        """
        if schema is not None:
            contract = JSON_OUTPUT_INSTRUCTION + json.dumps(schema, indent=2)
            system = f"{system}\n\n{contract}" if system else contract
        response = await self.generate(
            prompt=prompt,
            system=system,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            thinking_budget=thinking_budget,
        )
        return extract_json(response.text)

    def start_chat(
        self,
        system: str,
        model: str = DEFAULT_CHAT_MODEL,
        max_tokens: int = 2048,
    ) -> ChatSession:
        """Open a stateful chat session preloaded with ``system``."""
        return ChatSession(
            self.client,
            model=model,
            system=system,
            max_tokens=max_tokens,
            on_usage=self._record_usage,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = self.peek_token_summary()
        self._token_log.clear()
        return summary

    def peek_token_summary(self) -> dict:
        """Return accumulated token usage without resetting the log."""
        return {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
