import io

import pdfplumber

from clausescan.pdf.base import BasePdfExtractor
from clausescan.pdf.exceptions import PdfExtractionError
from clausescan.pdf.models import ExtractionCandidate


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> ExtractionCandidate:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return ExtractionCandidate(
                text="\n".join(pages).strip(),
                page_count=len(pages),
            )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
