from typing import Any

import httpx
import structlog

from appforge.config import AppForgeSettings

from .prompts import build_web_app_prompt
from .response_parser import AIResponse, AIResponseParser

logger = structlog.get_logger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}


class GeminiClient:
    """Client for the Gemini ``generateContent`` endpoint.

    Provider and transport failures come back as an ``AIResponse`` with
    ``error`` set; nothing is raised to the caller.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash-preview-04-17",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: AppForgeSettings) -> "GeminiClient":
        if not settings.gemini_api_key:
            logger.warning("gemini_api_key_missing", env_var="APPFORGE_GEMINI_API_KEY")
        return cls(
            api_key=settings.gemini_api_key or "",
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.ai_timeout_seconds,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_content(self, prompt: str) -> AIResponse:
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": GENERATION_CONFIG,
        }

        try:
            resp = await self._post(body)
            data = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error("ai_request_failed", model=self.model, error=str(e))
            return AIResponseParser.failure(str(e))

        if not resp.is_success:
            message = self._error_message(data)
            logger.warning(
                "ai_provider_error", model=self.model, status=resp.status_code, error=message
            )
            return AIResponseParser.failure(message)

        text = self._candidate_text(data)
        response = AIResponseParser.parse(text)
        logger.info(
            "ai_response_received",
            model=self.model,
            text_length=len(text),
            has_code=response.code is not None,
        )
        return response

    async def generate_web_app(self, prompt: str) -> AIResponse:
        return await self.generate_content(build_web_app_prompt(prompt))

    async def _post(self, body: dict[str, Any]) -> httpx.Response:
        params = {"key": self.api_key}
        if self._http_client is not None:
            return await self._http_client.post(self.endpoint, params=params, json=body)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self.endpoint, params=params, json=body)

    @staticmethod
    def _error_message(data: Any) -> str | None:
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict):
                return error.get("message")
        return None

    @staticmethod
    def _candidate_text(data: dict[str, Any]) -> str:
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"] or ""
        except (KeyError, IndexError, TypeError):
            return ""
