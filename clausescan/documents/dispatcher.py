import math
import re

from clausescan.documents.models import DocumentText, RawDocument
from clausescan.logging.logger import Log
from clausescan.pdf.extractor import PdfTextExtractor

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"

DOCX_MAX_CHARS = 50_000
CHARS_PER_PAGE = 3000

IMAGE_PLACEHOLDER = (
    "[Image file uploaded - OCR extraction would be needed for image-based contracts]"
)

_XML_TAG = re.compile(r"<[^>]+>")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7e\n\r]")
_WHITESPACE = re.compile(r"\s+")


class FormatDispatcher:
    """Routes a document to the extraction strategy for its format."""

    def __init__(self, pdf_extractor: PdfTextExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    async def extract(self, document: RawDocument) -> DocumentText:
        mime_type = document.mime_type.lower()
        name = document.file_name.lower()

        if mime_type == TEXT_MIME or name.endswith(".txt"):
            return self._plain_text(document)

        if mime_type == PDF_MIME or name.endswith(".pdf"):
            result = await self._pdf_extractor.extract(document)
            Log.info(
                f"PDF extracted using {result.method.value} method, "
                f"{result.page_count} pages"
            )
            return DocumentText(
                text=result.text,
                page_count=result.page_count,
                method=result.method,
            )

        if mime_type == DOCX_MIME or name.endswith(".docx"):
            return self._docx(document)

        if mime_type.startswith("image/"):
            return DocumentText(text=IMAGE_PLACEHOLDER, page_count=1)

        try:
            return self._plain_text(document, strict=True)
        except UnicodeDecodeError:
            Log.warning(f"Could not decode {document.file_name} as text")
            return DocumentText(text="", page_count=1)

    @staticmethod
    def _plain_text(document: RawDocument, strict: bool = False) -> DocumentText:
        text = document.content.decode("utf-8", errors="strict" if strict else "replace")
        return DocumentText(text=text, page_count=pages_for_length(len(text)))

    @staticmethod
    def _docx(document: RawDocument) -> DocumentText:
        """Strip markup from the raw archive bytes.

        No unzipping is done, so only text stored uncompressed survives.
        """
        raw = document.content.decode("utf-8", errors="replace")
        text = _XML_TAG.sub(" ", raw)
        text = _NON_PRINTABLE.sub(" ", text)
        text = _WHITESPACE.sub(" ", text).strip()
        return DocumentText(text=text[:DOCX_MAX_CHARS], page_count=1)


def pages_for_length(length: int) -> int:
    """Approximate a page count from a character count."""
    return max(1, math.ceil(length / CHARS_PER_PAGE))
