from abc import ABC, abstractmethod

from clausescan.pdf.models import ExtractionCandidate


class BasePdfExtractor(ABC):
    """Contract for all native PDF text extraction engines."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> ExtractionCandidate:
        """Extract plain text and a page count from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            ExtractionCandidate with the recovered text and a page count >= 1.

        Raises:
            PdfExtractionError: if a library engine cannot open the document.
        """
