from collections.abc import Sequence
from pathlib import Path

from clausescan.analysis.base import BaseContractAnalyzer
from clausescan.analysis.factory import AnalyzerFactory
from clausescan.config.settings import Settings
from clausescan.documents.dispatcher import FormatDispatcher
from clausescan.documents.file_loader import FileLoader
from clausescan.logging.logger import Log
from clausescan.ocr.factory import OcrClientFactory
from clausescan.pdf.extractor import PdfTextExtractor
from clausescan.pdf.factory import PdfExtractorFactory
from clausescan.pdf.readability import ReadabilityClassifier
from clausescan.processor.exceptions import PipelineStateError
from clausescan.processor.models import ProcessorResult
from clausescan.processor.pipeline import PipelineContext, PipelineStep
from clausescan.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    GateTextStep,
    LoadDocumentStep,
)


class Processor:
    """Orchestrates the contract review pipeline.

    Pipeline: load -> extract text -> gate on length -> analyze.
    """

    def __init__(
        self,
        file_loader: FileLoader,
        dispatcher: FormatDispatcher,
        analyzer: BaseContractAnalyzer,
        min_text_length: int,
    ) -> None:
        self._extraction_steps: list[PipelineStep] = [
            LoadDocumentStep(file_loader),
            ExtractTextStep(dispatcher),
        ]
        self._analysis_steps: list[PipelineStep] = [
            GateTextStep(min_text_length),
            AnalyzeStep(analyzer),
        ]

    async def extract(self, path: Path, mime_type: str | None = None) -> ProcessorResult:
        """Load a document and recover its text, without analysis."""
        context = PipelineContext(path=path, mime_type=mime_type)
        context = await self._run_steps(self._extraction_steps, context)
        return self._to_result(context)

    async def process(
        self,
        path: Path,
        *,
        contract_type: str = "other",
        user_role: str = "other",
        jurisdiction: str = "",
        mime_type: str | None = None,
    ) -> ProcessorResult:
        """Run the full pipeline for one document.

        Raises:
            InsufficientTextError: if too little text was extracted to analyze.
            AnalysisError: if the analysis provider fails.
        """
        Log.info(f"Processing {path} as {contract_type} contract for {user_role}")
        context = PipelineContext(
            path=path,
            contract_type=contract_type,
            user_role=user_role,
            jurisdiction=jurisdiction,
            mime_type=mime_type,
        )
        context = await self._run_steps(
            [*self._extraction_steps, *self._analysis_steps], context
        )
        return self._to_result(context)

    @staticmethod
    async def _run_steps(
        steps: Sequence[PipelineStep], context: PipelineContext
    ) -> PipelineContext:
        for step in steps:
            context = await step.run(context)
        return context

    @staticmethod
    def _to_result(context: PipelineContext) -> ProcessorResult:
        if context.document is None or context.document_text is None:
            raise PipelineStateError("Pipeline finished without extracted text")
        return ProcessorResult(
            file_name=context.document.file_name,
            document_text=context.document_text,
            analysis=context.analysis,
        )


def build_pdf_extractor(settings: Settings) -> PdfTextExtractor:
    """Build the PDF orchestrator with the configured engine and OCR client."""
    return PdfTextExtractor(
        native_extractor=PdfExtractorFactory.create(settings),
        classifier=ReadabilityClassifier.from_settings(settings),
        ocr_client=OcrClientFactory.create(settings),
    )


def build_processor(
    settings: Settings,
    files_root: Path | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(
        file_loader=FileLoader(files_root=files_root),
        dispatcher=FormatDispatcher(build_pdf_extractor(settings)),
        analyzer=AnalyzerFactory.create(settings),
        min_text_length=settings.min_analysis_text_length,
    )
