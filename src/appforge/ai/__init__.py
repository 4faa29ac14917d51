from .demux import parse_code_into_files
from .gemini import GeminiClient
from .prompts import build_web_app_prompt
from .response_parser import AIResponse, AIResponseParser

__all__ = [
    "AIResponse",
    "AIResponseParser",
    "GeminiClient",
    "build_web_app_prompt",
    "parse_code_into_files",
]
