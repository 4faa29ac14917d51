import re

from pydantic import BaseModel


class AIResponse(BaseModel):
    """Reply from an AI provider, with any fenced code pulled out.

    ``code`` is None when the reply held no fenced block at all, and an
    empty string when it held only empty blocks.
    """

    text: str
    code: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AIResponseParser:
    """Extracts fenced code regions from free-form provider text."""

    DEFAULT_ERROR = "Failed to generate content"

    # Optional language hint must sit directly after the opening fence and end the line
    _FENCE_PATTERN = re.compile(r"```(?:[\w.+#-]*[ \t]*\r?\n)?(.*?)```", re.DOTALL)

    @classmethod
    def parse(cls, text: str) -> AIResponse:
        regions = [
            cls._strip_trailing_newline(m.group(1)) for m in cls._FENCE_PATTERN.finditer(text)
        ]
        if not regions:
            return AIResponse(text=text)
        return AIResponse(text=text, code="\n\n".join(regions))

    @classmethod
    def failure(cls, message: str | None = None) -> AIResponse:
        """Response for a provider or transport level failure."""
        return AIResponse(text="", error=message or cls.DEFAULT_ERROR)

    @staticmethod
    def _strip_trailing_newline(region: str) -> str:
        if region.endswith("\r\n"):
            return region[:-2]
        if region.endswith("\n"):
            return region[:-1]
        return region
