class OcrError(Exception):
    """Raised when remote OCR does not produce text."""


class OcrNetworkError(OcrError):
    """Raised when the OCR provider call fails due to network/infrastructure issues."""


class OcrRateLimitError(OcrError):
    """Raised when the OCR provider rejects the call for rate or quota reasons."""
