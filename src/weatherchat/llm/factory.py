"""Construction of LLM providers by name."""

from typing import Any, Callable

from .base import LLMProvider
from .providers import GeminiProvider

_REQUIRED: dict[str, tuple[str, ...]] = {
    "gemini": ("api_key",),
}

_PROVIDERS: dict[str, Callable[..., LLMProvider]] = {
    "gemini": GeminiProvider,
}


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    Args:
        provider: Provider name, case-insensitive ('gemini')
        **config: Keyword arguments for the provider, e.g. api_key, model

    Raises:
        ValueError: If the provider is unknown
        TypeError: If a required setting is missing or empty
    """
    key = provider.lower()
    if key not in _PROVIDERS:
        supported = ", ".join(f"'{name}'" for name in _PROVIDERS)
        raise ValueError(f"Unsupported provider: {provider}. Supported providers: {supported}")

    missing = [name for name in _REQUIRED[key] if not config.get(name)]
    if missing:
        raise TypeError(f"{key} provider requires {', '.join(missing)}")

    return _PROVIDERS[key](**config)
