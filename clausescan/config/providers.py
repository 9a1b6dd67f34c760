OPENAI_COMPATIBLE_BASE_URLS: dict[str, str] = {
    "openrouter": "https://openrouter.ai/api/v1",
    "groq": "https://api.groq.com/openai/v1",
    "together": "https://api.together.xyz/v1",
    "deepseek": "https://api.deepseek.com/v1",
    "ollama": "http://localhost:11434/v1",
    "lovable": "https://ai.gateway.lovable.dev/v1",
}


def resolve_base_url(provider: str, configured_url: str, setting_name: str) -> str | None:
    """Pick the chat API base URL for an OpenAI-compatible provider.

    Raises:
        ValueError: for an unknown provider, or ``openai_compatible`` without a URL.
    """
    url = configured_url.strip()
    if provider == "openai":
        return url or None
    if provider == "openai_compatible":
        if not url:
            raise ValueError(
                f"{setting_name} is required for provider=openai_compatible"
            )
        return url
    default_base_url = OPENAI_COMPATIBLE_BASE_URLS.get(provider)
    if default_base_url is not None:
        return url or default_base_url
    raise ValueError(f"Unknown provider '{provider}'")
