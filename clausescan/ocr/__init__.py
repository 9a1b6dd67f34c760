from clausescan.ocr.client_base import BaseOcrClient
from clausescan.ocr.exceptions import OcrError
from clausescan.ocr.factory import OcrClientFactory

__all__ = ["BaseOcrClient", "OcrClientFactory", "OcrError"]
