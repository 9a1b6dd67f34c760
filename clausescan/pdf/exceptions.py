class PdfExtractionError(Exception):
    """Raised when a native PDF engine cannot read the document."""
