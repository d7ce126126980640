"""Provider construction by name."""

from typing import Any

from .base import LLMProvider
from .providers import DemoProvider, GeminiProvider, OpenAIProvider

_PROVIDERS: dict[str, type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
    "demo": DemoProvider,
}

SUPPORTED_PROVIDERS = tuple(_PROVIDERS)

# Back-ends that cannot work without a credential
_NEEDS_API_KEY = ("gemini", "openai")


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    Args:
        provider: 'gemini', 'openai' or 'demo' (case-insensitive)
        **config: Passed to the provider's constructor
            gemini: api_key (required), model, client
            openai: api_key (required), model, base_url, organization, client
            demo: delay, responses, seed

    Raises:
        ValueError: If provider type is not supported
        TypeError: If a provider that needs a key gets no ``api_key``

    Examples:
        >>> provider = create_llm_provider("gemini", api_key="...")
        >>> provider = create_llm_provider("demo", delay=(0.0, 0.0))
    """
    name = provider.lower()
    provider_cls = _PROVIDERS.get(name)
    if provider_cls is None:
        supported = ", ".join(f"'{p}'" for p in SUPPORTED_PROVIDERS)
        raise ValueError(f"Unsupported provider: {provider}. Supported providers: {supported}")

    if name in _NEEDS_API_KEY and "api_key" not in config:
        raise TypeError(f"{provider_cls.__name__} requires 'api_key' in config")

    return provider_cls(**config)
