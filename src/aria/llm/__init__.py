from .base import LLMProvider
from .errors import CompletionError, NetworkError, ProtocolError
from .factory import SUPPORTED_PROVIDERS, create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import DemoProvider, GeminiProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "SUPPORTED_PROVIDERS",
    "ChatMessage",
    "LLMResponse",
    "CompletionError",
    "NetworkError",
    "ProtocolError",
    "DemoProvider",
    "GeminiProvider",
    "OpenAIProvider",
]
