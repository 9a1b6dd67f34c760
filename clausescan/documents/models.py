from dataclasses import dataclass

from clausescan.pdf.models import ExtractionMethod


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file as received: bytes plus declared name and media type."""

    content: bytes
    file_name: str
    mime_type: str = ""


@dataclass(frozen=True)
class DocumentText:
    """Text recovered from a document of any supported format."""

    text: str
    page_count: int
    method: ExtractionMethod = ExtractionMethod.NATIVE
