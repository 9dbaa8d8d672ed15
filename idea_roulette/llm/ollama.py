# idea_roulette/llm/ollama.py

import asyncio
import logging
from typing import Optional

import aiohttp

from idea_roulette.config import OLLAMA_MODEL, OLLAMA_TIMEOUT, OLLAMA_URL

logger = logging.getLogger(__name__)

PROBE_PROMPT = 'Reply with just the word "OK" if you can hear me.'
PROBE_TOKEN = "ok"


class OllamaError(Exception):
    """Raised for any failure talking to the generation service."""


class OllamaClient:
    """Thin client for Ollama's /api/generate endpoint (non-streaming)."""

    def __init__(
        self,
        url: str = OLLAMA_URL,
        model: str = OLLAMA_MODEL,
        timeout: float = OLLAMA_TIMEOUT,
    ):
        self.url = url
        self.model = model
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "OllamaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the model's `response` text."""
        body = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }

        try:
            session = self._get_session()
            async with session.post(self.url, json=body) as resp:
                if not resp.ok:
                    raise OllamaError(f"HTTP error! status: {resp.status}")
                data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise OllamaError(str(e) or e.__class__.__name__) from e

        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            raise OllamaError("Ollama returned an invalid response.")

        return data["response"]

    async def probe(self) -> bool:
        """
        One-shot startup check that the service answers with the OK token.
        Any failure counts as unavailable.
        """
        try:
            text = await self.generate(PROBE_PROMPT)
        except OllamaError as e:
            logger.warning("Ollama probe failed: %s", e)
            return False

        if not text:
            logger.warning("Ollama probe returned an empty response")
            return False

        if PROBE_TOKEN not in text.lower():
            logger.warning("Ollama probe got unexpected reply: %r", text[:80])
            return False

        return True
