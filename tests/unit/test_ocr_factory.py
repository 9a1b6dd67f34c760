from unittest.mock import patch

import pytest

from clausescan.config.settings import Settings
from clausescan.ocr.example_client_adapter import ExampleOcrClient
from clausescan.ocr.factory import OcrClientFactory
from clausescan.ocr.http_adapter import HttpOcrClient
from clausescan.ocr.openai_vision_adapter import OpenAIVisionOcrClient


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


class TestOcrClientFactory:
    def test_none_disables_ocr(self) -> None:
        assert OcrClientFactory.create(_settings(ocr_provider="none")) is None

    def test_example_provider(self) -> None:
        client = OcrClientFactory.create(
            _settings(ocr_provider="example", ocr_example_text="fixed")
        )
        assert isinstance(client, ExampleOcrClient)

    def test_http_provider(self) -> None:
        client = OcrClientFactory.create(
            _settings(ocr_provider="http", ocr_endpoint_url="https://ocr.example.com")
        )
        assert isinstance(client, HttpOcrClient)

    def test_http_provider_requires_endpoint(self) -> None:
        with pytest.raises(ValueError, match="ocr_endpoint_url"):
            OcrClientFactory.create(_settings(ocr_provider="http"))

    def test_preset_provider_uses_default_base_url(self) -> None:
        with patch("clausescan.ocr.openai_vision_adapter.openai.AsyncOpenAI") as mock_cls:
            client = OcrClientFactory.create(
                _settings(ocr_provider="openrouter", ocr_api_key="k")
            )
        assert isinstance(client, OpenAIVisionOcrClient)
        assert mock_cls.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_provider_name_is_case_insensitive(self) -> None:
        with patch("clausescan.ocr.openai_vision_adapter.openai.AsyncOpenAI"):
            client = OcrClientFactory.create(_settings(ocr_provider="OpenAI"))
        assert isinstance(client, OpenAIVisionOcrClient)

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="ocr_base_url"):
            OcrClientFactory.create(_settings(ocr_provider="openai_compatible"))

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR provider"):
            OcrClientFactory.create(_settings(ocr_provider="tesseract"))
