import httpx

from clausescan.ocr.client_base import BaseOcrClient
from clausescan.ocr.exceptions import OcrError, OcrNetworkError, OcrRateLimitError


class HttpOcrClient(BaseOcrClient):
    """Calls a hosted OCR function that accepts ``{pdfBase64, fileName}``."""

    def __init__(
        self,
        *,
        endpoint_url: str,
        timeout_seconds: int,
        api_key: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._transport = transport
        self._timeout_seconds = timeout_seconds
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"

    async def extract_text(self, pdf_base64: str, file_name: str) -> str:
        payload = {"pdfBase64": pdf_base64, "fileName": file_name}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._endpoint_url,
                    json=payload,
                    headers=self._headers,
                )
        except httpx.HTTPError as exc:
            raise OcrNetworkError(f"OCR endpoint network error: {exc}") from exc

        if response.status_code in (402, 429):
            raise OcrRateLimitError(
                f"OCR endpoint refused request ({response.status_code}): "
                f"{self._error_message(response)}"
            )
        if not response.is_success:
            raise OcrNetworkError(
                f"OCR endpoint error ({response.status_code}): "
                f"{self._error_message(response)}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise OcrError(f"OCR endpoint returned invalid JSON: {exc}") from exc
        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text:
            raise OcrError("OCR endpoint returned no text")
        return text

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return response.text
