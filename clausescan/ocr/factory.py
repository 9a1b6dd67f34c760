from clausescan.config.providers import OPENAI_COMPATIBLE_BASE_URLS, resolve_base_url
from clausescan.config.settings import Settings
from clausescan.ocr.client_base import BaseOcrClient
from clausescan.ocr.example_client_adapter import ExampleOcrClient
from clausescan.ocr.http_adapter import HttpOcrClient
from clausescan.ocr.openai_vision_adapter import OpenAIVisionOcrClient


class OcrClientFactory:
    """Creates the configured OCR collaborator, or None when OCR is disabled."""

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient | None:
        provider = settings.ocr_provider.lower()
        if provider == "none":
            return None
        if provider == "example":
            return ExampleOcrClient(text=settings.ocr_example_text)
        if provider == "http":
            if not settings.ocr_endpoint_url.strip():
                raise ValueError("ocr_endpoint_url is required for ocr_provider=http")
            return HttpOcrClient(
                endpoint_url=settings.ocr_endpoint_url.strip(),
                timeout_seconds=settings.ocr_timeout_seconds,
                api_key=settings.ocr_api_key,
            )
        if provider not in ("openai", "openai_compatible", *OPENAI_COMPATIBLE_BASE_URLS):
            supported = [
                "none",
                "example",
                "http",
                "openai",
                "openai_compatible",
                *sorted(OPENAI_COMPATIBLE_BASE_URLS),
            ]
            raise ValueError(f"Unknown OCR provider '{provider}'. Choose from: {supported}")
        return OpenAIVisionOcrClient(
            api_key=settings.ocr_api_key,
            model=settings.ocr_model_name,
            timeout_seconds=settings.ocr_timeout_seconds,
            base_url=resolve_base_url(provider, settings.ocr_base_url, "ocr_base_url"),
            max_tokens=settings.ocr_max_tokens,
            temperature=settings.ocr_temperature,
        )
