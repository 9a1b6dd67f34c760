import pymupdf

from clausescan.pdf.base import BasePdfExtractor
from clausescan.pdf.exceptions import PdfExtractionError
from clausescan.pdf.models import ExtractionCandidate


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> ExtractionCandidate:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return ExtractionCandidate(
                text="\n".join(pages).strip(),
                page_count=len(pages),
            )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
