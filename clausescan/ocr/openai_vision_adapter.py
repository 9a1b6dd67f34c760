import httpx
import openai

from clausescan.ocr.client_base import BaseOcrClient
from clausescan.ocr.exceptions import OcrError, OcrNetworkError, OcrRateLimitError
from clausescan.ocr.prompt_loader import load_ocr_prompt


class OpenAIVisionOcrClient(BaseOcrClient):
    """OCR through a vision-capable model behind an OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_tokens: int = 16000,
        temperature: float = 0.1,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._system_prompt = load_ocr_prompt("ocr_system_prompt")
        self._user_prompt = load_ocr_prompt("ocr_user_prompt")

    async def extract_text(self, pdf_base64: str, file_name: str) -> str:
        if not pdf_base64:
            raise OcrError("No PDF data provided")
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                messages=[
                    {"role": "system", "content": self._system_prompt},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": self._user_prompt},
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": f"data:application/pdf;base64,{pdf_base64}"
                                },
                            },
                        ],
                    },
                ],
            )
        except openai.RateLimitError as exc:
            raise OcrRateLimitError(f"OCR rate limit exceeded for {file_name}: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise OcrNetworkError(f"OCR provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            if exc.status_code == 402:
                raise OcrRateLimitError(f"OCR provider quota exhausted: {exc}") from exc
            raise OcrNetworkError(f"OCR provider API error: {exc}") from exc
        except openai.APIError as exc:
            raise OcrNetworkError(f"OCR provider API error: {exc}") from exc

        if not response.choices:
            raise OcrError("OCR returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise OcrError("OCR returned empty response")
        return content
