from .demo import DemoProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider

__all__ = ["DemoProvider", "GeminiProvider", "OpenAIProvider"]
