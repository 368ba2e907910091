"""
Anthropic Messages API client.
Wraps POST /v1/messages for single-shot text generation.
"""
import logging
from typing import Optional, Sequence

import httpx

from config import settings
from errors import ProviderError
from models.chat import ChatMessage

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Thin client for the Anthropic Messages API. No retries."""

    def __init__(
        self,
        api_key: Optional[str],
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key or None
        self.model = model or settings.ANTHROPIC_MODEL
        self.base_url = (base_url or settings.ANTHROPIC_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.ANTHROPIC_TIMEOUT_SECONDS

    @classmethod
    def from_settings(cls) -> "AnthropicClient":
        return cls(api_key=settings.ANTHROPIC_API_KEY)

    def is_configured(self) -> bool:
        """True when a credential is present. Makes no network call."""
        return bool(self.api_key)

    def generate(
        self,
        system: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the first text block of the reply, stripped."""
        if not self.is_configured():
            raise ProviderError(
                "Anthropic API key is not configured. Please set ANTHROPIC_API_KEY environment variable."
            )

        system_text, wire_messages = _to_wire(system, messages)
        if not wire_messages:
            raise ProviderError("No user message to send")

        payload = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "system": system_text,
            "messages": wire_messages,
        }
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": settings.ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        try:
            resp = httpx.post(
                f"{self.base_url}/v1/messages",
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Anthropic returned HTTP %d: %s", e.response.status_code, e.response.text[:200])
            raise ProviderError(f"Provider returned HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Anthropic request failed: %s", e)
            raise ProviderError(f"Provider request failed: {e}") from e

        for block in body.get("content") or []:
            if block.get("type") == "text":
                text = (block.get("text") or "").strip()
                if not text:
                    break
                logger.debug("Anthropic response length: %d chars", len(text))
                return text
        raise ProviderError("No text content in response")


def _to_wire(system: str, messages: Sequence[ChatMessage]) -> tuple[str, list[dict]]:
    """
    Map conversation turns onto the Messages API shape:
    system turns join the system prompt, same-role runs are merged,
    and the first wire message is always from the user.
    """
    system_parts = [system] if system else []
    wire: list[dict] = []
    for msg in messages:
        if msg.role == "system":
            system_parts.append(msg.content)
            continue
        if not wire and msg.role == "assistant":
            continue
        if wire and wire[-1]["role"] == msg.role:
            wire[-1]["content"] += "\n\n" + msg.content
        else:
            wire.append({"role": msg.role, "content": msg.content})
    return "\n\n".join(system_parts), wire
