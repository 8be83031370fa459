import json
import logging
from typing import Any

import httpx

from fact_generator.config import Settings
from fact_generator.errors import (
    InvalidResponseFormat,
    RequestBuildError,
    UpstreamApiError,
    UpstreamParseError,
    UpstreamReadError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


class OpenRouterClient:
    """Single-shot chat-completion client for the OpenRouter API."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self.url = settings.openrouter_url
        self.model = settings.openrouter_model
        self.transport = transport

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

    def build_headers(self, api_key: str) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        if self.settings.openrouter_site_url:
            headers["HTTP-Referer"] = self.settings.openrouter_site_url
        if self.settings.openrouter_site_title:
            headers["X-Title"] = self.settings.openrouter_site_title
        return headers

    async def complete(self, prompt: str, api_key: str) -> str:
        """Send one completion request and return ``choices[0].message.content``."""
        try:
            body = json.dumps(self.build_payload(prompt), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(f"Ошибка при подготовке запроса: {exc}") from exc

        logger.info("openrouter.request model=%s prompt_chars=%d", self.model, len(prompt))
        async with httpx.AsyncClient(timeout=self.settings.llm_timeout_seconds, transport=self.transport) as client:
            try:
                request = client.build_request("POST", self.url, content=body, headers=self.build_headers(api_key))
            except (httpx.InvalidURL, ValueError) as exc:
                raise RequestBuildError(f"Ошибка при создании запроса к API: {exc}") from exc

            try:
                response = await client.send(request, stream=True)
            except httpx.RequestError as exc:
                raise UpstreamTransportError(str(exc)) from exc

            try:
                raw = await response.aread()
            except httpx.RequestError as exc:
                raise UpstreamReadError(str(exc)) from exc
            finally:
                await response.aclose()

        logger.info("openrouter.response status=%d bytes=%d", response.status_code, len(raw))
        return self.extract_content(self.parse_response(raw), raw)

    @staticmethod
    def parse_response(raw: bytes) -> dict[str, Any]:
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise UpstreamParseError(str(exc)) from exc
        if not isinstance(payload, dict):
            raise UpstreamParseError(f"expected JSON object, got {type(payload).__name__}")
        return payload

    @staticmethod
    def extract_content(payload: dict[str, Any], raw: bytes = b"") -> str:
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            logger.error("openrouter.api_error message=%s", error["message"])
            raise UpstreamApiError(error["message"])

        choices = payload.get("choices")
        if not isinstance(choices, list) or not choices:
            logger.error("openrouter.response.invalid body=%s", raw.decode("utf-8", errors="replace"))
            raise InvalidResponseFormat("ответа")

        first_choice = choices[0]
        if not isinstance(first_choice, dict):
            raise InvalidResponseFormat("choice")

        message = first_choice.get("message")
        if not isinstance(message, dict):
            raise InvalidResponseFormat("message")

        content = message.get("content")
        if not isinstance(content, str):
            raise InvalidResponseFormat("content")
        return content
