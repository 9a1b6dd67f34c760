"""PDF extraction orchestrator: native scan, readability check, OCR fallback."""

import asyncio
import base64
import math
from collections.abc import Callable
from enum import Enum

from clausescan.documents.models import RawDocument
from clausescan.logging.logger import Log
from clausescan.ocr.client_base import BaseOcrClient
from clausescan.pdf.base import BasePdfExtractor
from clausescan.pdf.models import ExtractionCandidate, ExtractionMethod, ExtractionResult
from clausescan.pdf.readability import ReadabilityClassifier

NATIVE_MIN_LENGTH = 100
OCR_MIN_LENGTH = 50
DEGRADED_MIN_LENGTH = 50
CHARS_PER_PAGE = 3000

INCOMPLETE_NOTE = (
    "\n\n[Note: Text extraction may be incomplete. The document appears to be "
    "scanned or use complex encoding. Some content may be missing or garbled.]"
)

UNREADABLE_MESSAGE = (
    "Unable to extract readable text from this PDF. The document may be:\n\n"
    "• A scanned document with low image quality\n"
    "• Password protected or encrypted\n"
    "• Using an unsupported encoding\n\n"
    "Please try:\n"
    "1. Converting the scanned PDF to a clearer image\n"
    "2. Using a PDF with selectable text\n"
    "3. Copying and pasting the text directly"
)

READ_ERROR_MESSAGE = (
    "Error reading PDF file. Please ensure the file is not corrupted and try again."
)


class ExtractionStage(str, Enum):
    """Terminal stage that produced an ExtractionResult."""

    NATIVE_ACCEPTED = "native_accepted"
    OCR_ESCALATED = "ocr_escalated"
    DEGRADED_NATIVE = "degraded_native"
    UNREADABLE = "unreadable"
    ERROR = "error"


StageHook = Callable[[ExtractionStage, ExtractionResult], None]


class PdfTextExtractor:
    """Turns PDF bytes into an ExtractionResult, never raising.

    Stages are tried in order and the first match wins:

    1. native text that is long and readable enough;
    2. remote OCR text;
    3. native text with an incomplete-extraction note;
    4. a fixed explanation that nothing readable was found.

    Unexpected exceptions become a fixed read-error result.
    """

    def __init__(
        self,
        *,
        native_extractor: BasePdfExtractor,
        classifier: ReadabilityClassifier,
        ocr_client: BaseOcrClient | None = None,
        on_stage: StageHook | None = None,
    ) -> None:
        self._native_extractor = native_extractor
        self._classifier = classifier
        self._ocr_client = ocr_client
        self._on_stage = on_stage

    async def extract(self, document: RawDocument) -> ExtractionResult:
        try:
            stage, result = await self._run(document)
        except Exception as exc:
            Log.exception(f"PDF extraction failed for {document.file_name}: {exc}")
            stage = ExtractionStage.ERROR
            result = ExtractionResult(
                text=READ_ERROR_MESSAGE,
                page_count=1,
                method=ExtractionMethod.FALLBACK,
            )
        self._notify(stage, result)
        return result

    async def _run(
        self, document: RawDocument
    ) -> tuple[ExtractionStage, ExtractionResult]:
        Log.debug(f"Attempting native PDF text extraction for {document.file_name}")
        candidate = await asyncio.to_thread(
            self._native_extractor.extract, document.content
        )

        if len(candidate.text) > NATIVE_MIN_LENGTH and self._classifier.is_readable(
            candidate.text
        ):
            Log.info(f"Native extraction successful: {len(candidate.text)} characters")
            return ExtractionStage.NATIVE_ACCEPTED, ExtractionResult(
                text=candidate.text,
                page_count=candidate.page_count,
                method=ExtractionMethod.NATIVE,
            )

        Log.info(f"Native extraction yielded minimal content for {document.file_name}")
        ocr_text = await self._try_ocr(document)
        if ocr_text is not None:
            return ExtractionStage.OCR_ESCALATED, ExtractionResult(
                text=ocr_text,
                page_count=candidate.page_count or math.ceil(len(ocr_text) / CHARS_PER_PAGE),
                method=ExtractionMethod.OCR,
            )

        if len(candidate.text) > DEGRADED_MIN_LENGTH:
            return ExtractionStage.DEGRADED_NATIVE, self._degraded(candidate)

        return ExtractionStage.UNREADABLE, ExtractionResult(
            text=UNREADABLE_MESSAGE,
            page_count=1,
            method=ExtractionMethod.FALLBACK,
        )

    async def _try_ocr(self, document: RawDocument) -> str | None:
        """Return OCR text when it is long enough, otherwise None."""
        if self._ocr_client is None:
            Log.debug("OCR client not configured, skipping OCR fallback")
            return None
        try:
            pdf_base64 = base64.b64encode(document.content).decode("ascii")
            text = await self._ocr_client.extract_text(pdf_base64, document.file_name)
        except Exception as exc:
            Log.error(f"OCR fallback error for {document.file_name}: {exc}")
            return None
        if not text or len(text) <= OCR_MIN_LENGTH:
            Log.warning(
                f"OCR returned too little text for {document.file_name}: "
                f"{len(text or '')} characters"
            )
            return None
        Log.info(f"OCR extraction successful: {len(text)} characters")
        return text

    @staticmethod
    def _degraded(candidate: ExtractionCandidate) -> ExtractionResult:
        return ExtractionResult(
            text=candidate.text + INCOMPLETE_NOTE,
            page_count=candidate.page_count,
            method=ExtractionMethod.FALLBACK,
        )

    def _notify(self, stage: ExtractionStage, result: ExtractionResult) -> None:
        Log.debug(
            f"PDF extraction finished at stage {stage.value}",
            stage=stage.value,
            method=result.method.value,
            page_count=result.page_count,
        )
        if self._on_stage is None:
            return
        try:
            self._on_stage(stage, result)
        except Exception as exc:
            Log.warning(f"Extraction stage hook failed: {exc}")
