from abc import ABC, abstractmethod


class BaseOcrClient(ABC):
    """Contract for remote OCR collaborators."""

    @abstractmethod
    async def extract_text(self, pdf_base64: str, file_name: str) -> str:
        """Recognize the text of a base64-encoded PDF.

        Args:
            pdf_base64: Document bytes encoded as standard base64.
            file_name: Original upload name, used for diagnostics only.

        Returns:
            Free-form extracted text without page boundaries.

        Raises:
            OcrError: on transport failure, non-success status or empty result.
        """
