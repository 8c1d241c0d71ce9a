"""Generative-text completion boundary.

A single blocking call per check: no streaming, no retries. Every failure
surfaces as :class:`UpstreamError`.
"""

import logging
from typing import Any

from openai import OpenAI

from vocalingo.errors import UpstreamError

logger = logging.getLogger(__name__)


class TextGenerator:
    """Anything that turns a prompt into completion text."""

    def complete(self, prompt: str) -> str:
        raise NotImplementedError


class OpenAIChatGenerator(TextGenerator):
    """Chat Completions backed generator.

    Works with any OpenAI-compatible endpoint via *base_url*. The client is
    built once and reused for every request; pass *client* to substitute it.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str | None = None,
        temperature: float = 0.2,
        timeout: float | None = None,
        client: Any = None,
    ):
        self.model = model
        self.temperature = temperature
        if client is None:
            client = OpenAI(
                # the SDK refuses to construct without a key; an unusable
                # key turns every call into an upstream failure instead
                api_key=api_key or "missing",
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
            )
        self._client = client

    def complete(self, prompt: str) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
            content = completion.choices[0].message.content
        except Exception as exc:
            raise UpstreamError(f"{type(exc).__name__}: {exc}") from exc
        return content or ""


def build_generator(settings) -> TextGenerator:
    """Create the process-wide generator from *settings*."""
    if not settings.LLM_API_KEY:
        logger.warning("LLM_API_KEY is not set; pronunciation checks will fail upstream")
    logger.info("Using model %s%s", settings.LLM_MODEL,
                f" at {settings.LLM_BASE_URL}" if settings.LLM_BASE_URL else "")
    return OpenAIChatGenerator(
        api_key=settings.LLM_API_KEY,
        model=settings.LLM_MODEL,
        base_url=settings.LLM_BASE_URL,
        temperature=settings.LLM_TEMPERATURE,
        timeout=settings.LLM_TIMEOUT_S,
    )
