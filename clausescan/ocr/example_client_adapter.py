"""Example OCR client adapter.

Use this module as a reference when implementing new OCR providers.
Implement BaseOcrClient and register the provider in OcrClientFactory.
"""

from clausescan.ocr.client_base import BaseOcrClient
from clausescan.ocr.exceptions import OcrError


class ExampleOcrClient(BaseOcrClient):
    """Offline adapter that returns fixed text.

    No network calls. An empty ``text`` makes every call fail the way an
    unavailable provider would.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    async def extract_text(self, pdf_base64: str, file_name: str) -> str:
        _ = pdf_base64, file_name
        if not self._text:
            raise OcrError("Example OCR client has no text configured")
        return self._text
