from dataclasses import dataclass
from enum import Enum


class ExtractionMethod(str, Enum):
    """Provenance of the text in an ExtractionResult."""

    NATIVE = "native"
    OCR = "ocr"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ExtractionCandidate:
    """Output of one native extraction pass."""

    text: str
    page_count: int = 1

    def __post_init__(self) -> None:
        if self.page_count < 1:
            object.__setattr__(self, "page_count", 1)


@dataclass(frozen=True)
class ExtractionResult:
    """Final outcome of a PDF extraction call."""

    text: str
    page_count: int
    method: ExtractionMethod

    def to_dict(self) -> dict[str, object]:
        """Render the result in its wire form."""
        return {
            "text": self.text,
            "pageCount": self.page_count,
            "method": self.method.value,
        }
