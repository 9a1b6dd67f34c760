from clausescan.config.settings import Settings
from clausescan.pdf.base import BasePdfExtractor
from clausescan.pdf.pattern_scanner import PatternScanner
from clausescan.pdf.pdfplumber_adapter import PdfPlumberAdapter
from clausescan.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the native PDF engine selected in settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pattern": PatternScanner,
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
