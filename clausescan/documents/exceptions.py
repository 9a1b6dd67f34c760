class DocumentError(Exception):
    """Base exception for document loading errors."""


class FileReadError(DocumentError):
    """Raised when a file cannot be read from disk."""
